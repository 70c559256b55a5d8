"""Provider-specific "new pull request" URLs."""

from collections.abc import Callable
from urllib.parse import quote_plus

from pr_opener.errors import UnknownProviderError
from pr_opener.models.pr import PullRequestRequest
from pr_opener.models.provider import HostingProvider
from pr_opener.url_parser import parse_azure_url


def _encode(value: str) -> str:
    return quote_plus(value, safe="")


def _query(params: list[tuple[str, str]], free_text: list[tuple[str, str | None]]) -> str:
    """Join verbatim params with form-encoded free-text params, skipping unset ones."""
    parts = [f"{key}={value}" for key, value in params]
    parts.extend(f"{key}={_encode(value)}" for key, value in free_text if value is not None)
    return "&".join(parts)


def _github_url(request: PullRequestRequest) -> str:
    params = [("expand", "1")]
    query = _query(params, [("title", request.title), ("body", request.description)])
    if request.draft:
        query += "&draft=1"
    return (
        f"https://github.com/{request.owner}/{request.repository}"
        f"/compare/{request.target_branch}...{request.source_branch}?{query}"
    )


def _gitlab_url(request: PullRequestRequest) -> str:
    params = [
        ("merge_request%5Bsource_branch%5D", request.source_branch),
        ("merge_request%5Btarget_branch%5D", request.target_branch),
    ]
    query = _query(
        params,
        [
            ("merge_request%5Btitle%5D", request.title),
            ("merge_request%5Bdescription%5D", request.description),
        ],
    )
    if request.draft:
        query += "&merge_request%5Bdraft%5D=true"
    return (
        f"https://gitlab.com/{request.owner}/{request.repository}"
        f"/-/merge_requests/new?{query}"
    )


def _bitbucket_url(request: PullRequestRequest) -> str:
    # Bitbucket has no draft parameter.
    params = [("source", request.source_branch), ("dest", request.target_branch)]
    query = _query(params, [("title", request.title), ("description", request.description)])
    return (
        f"https://bitbucket.org/{request.owner}/{request.repository}"
        f"/pull-requests/new?{query}"
    )


def _azure_url(request: PullRequestRequest) -> str:
    azure = request.azure
    if azure is None:
        azure = parse_azure_url(f"https://dev.azure.com/{request.owner}/{request.repository}")
    repository = azure.repository or request.repository

    params = [("sourceRef", request.source_branch), ("targetRef", request.target_branch)]
    query = _query(params, [("title", request.title), ("description", request.description)])
    if request.draft:
        query += "&isDraft=true"
    return (
        f"https://dev.azure.com/{azure.organization}/{azure.project}"
        f"/_git/{repository}/pullrequestcreate?{query}"
    )


BUILDERS: dict[HostingProvider, Callable[[PullRequestRequest], str]] = {
    HostingProvider.GITHUB: _github_url,
    HostingProvider.GITLAB: _gitlab_url,
    HostingProvider.BITBUCKET: _bitbucket_url,
    HostingProvider.AZURE_DEVOPS: _azure_url,
}


def build_pr_url(request: PullRequestRequest) -> str:
    """
    Build the URL of the provider's "new pull request" form.

    Title and description are form-urlencoded; branch names, owner and
    repository are inserted as-is.

    Args:
        request: Provider, repository, branches and optional fields

    Returns:
        URL string ready to open in a browser

    Raises:
        UnknownProviderError: If the provider has no URL template
        AzureUrlParseError: If Azure DevOps organization/project cannot be derived
    """
    try:
        builder = BUILDERS[request.provider]
    except KeyError:
        raise UnknownProviderError(
            f"Unknown git service for {request.owner}/{request.repository}"
        ) from None
    return builder(request)
