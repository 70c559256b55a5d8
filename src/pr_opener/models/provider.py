"""Hosting provider enums."""

from enum import Enum


class HostingProvider(str, Enum):
    """Hosting providers a pull request URL can be built for."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    AZURE_DEVOPS = "azure"
    UNKNOWN = "unknown"


class Service(str, Enum):
    """Provider choices accepted on the command line."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    AZURE = "azure"

    @property
    def provider(self) -> HostingProvider:
        return HostingProvider(self.value)
