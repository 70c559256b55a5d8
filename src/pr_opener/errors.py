"""Errors raised while building or opening a pull request URL."""


class PrOpenerError(Exception):
    """Base class for errors that should be shown to users."""


class RepositoryNotFoundError(PrOpenerError):
    """No git repository exists at the given path."""


class HeadUnresolvableError(PrOpenerError):
    """HEAD is detached or points at an unborn branch."""


class RemoteNotFoundError(PrOpenerError):
    """The selected remote is not configured."""


class UrlParseError(PrOpenerError):
    """A remote URL does not look like a hosted repository."""


class AzureUrlParseError(UrlParseError):
    """An Azure DevOps URL has no recognizable organization/project."""


class UnknownProviderError(PrOpenerError):
    """No URL template exists for the hosting provider."""


class BrowserLaunchError(PrOpenerError):
    """None of the candidate programs could open the URL."""
