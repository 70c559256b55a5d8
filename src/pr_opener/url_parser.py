"""Remote URL parsing."""

import logging
import re

from pr_opener.errors import AzureUrlParseError, UrlParseError
from pr_opener.models.repository import AzureProject, OwnerRepo

logger = logging.getLogger(__name__)

# git@github.com:owner/repo.git, ssh://git@github.com/owner/repo.git
SSH_URL_RE = re.compile(
    r"^(?:ssh://)?[^@/:\s]+@[^:/\s]+(?::\d+(?=/))?[:/]"
    r"(?P<owner>[^/]+)/(?P<repo>.+?)(?:\.git)?/?$"
)

# https://github.com/owner/repo.git
HTTPS_URL_RE = re.compile(
    r"^https?://[^/\s]+/(?P<owner>[^/]+)/(?P<repo>.+?)(?:\.git)?/?$"
)

AZURE_URL_PATTERNS = [
    # https://dev.azure.com/org/project/_git/repo
    re.compile(
        r"^https://(?:[^@/]+@)?dev\.azure\.com/(?P<org>[^/]+)/(?P<project>[^/]+)"
        r"(?:/_git/(?P<repo>[^/]+?))?(?:\.git)?/?$"
    ),
    # https://org.visualstudio.com/project/_git/repo, optionally under DefaultCollection/
    re.compile(
        r"^https://(?:[^@/]+@)?(?P<org>[^./]+)\.visualstudio\.com/"
        r"(?:DefaultCollection/)?(?P<project>[^/]+)"
        r"(?:/_git/(?P<repo>[^/]+?))?(?:\.git)?/?$"
    ),
    # git@ssh.dev.azure.com:v3/org/project/repo
    re.compile(
        r"^(?:ssh://)?[^@/:]+@(?:ssh\.dev\.azure\.com|vs-ssh\.visualstudio\.com)[:/]v3/"
        r"(?P<org>[^/]+)/(?P<project>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$"
    ),
]


def parse_git_url(url: str) -> OwnerRepo:
    """
    Extract owner and repository from a remote URL.

    The SSH form is tried before the HTTPS form. In both, the owner is the
    first path segment and the repository is everything after it.

    Args:
        url: Remote URL (e.g., git@github.com:owner/repo.git)

    Returns:
        OwnerRepo with both fields set

    Raises:
        UrlParseError: If the URL matches neither form
    """
    url = url.strip()
    for pattern in (SSH_URL_RE, HTTPS_URL_RE):
        match = pattern.match(url)
        if match:
            repo = match.group("repo")
            while repo.endswith(".git"):
                repo = repo[: -len(".git")]
            if repo:
                logger.debug("Parsed %s as %s/%s", url, match.group("owner"), repo)
                return OwnerRepo(owner=match.group("owner"), repository=repo)

    raise UrlParseError(f"Could not parse git URL: {url}")


def parse_azure_url(url: str) -> AzureProject:
    """
    Extract organization and project from an Azure DevOps URL.

    Accepts dev.azure.com and legacy visualstudio.com URLs over HTTPS and SSH.
    The repository is only filled in when the URL contains one.

    Raises:
        AzureUrlParseError: If the URL is not an Azure DevOps URL
    """
    url = url.strip()
    for pattern in AZURE_URL_PATTERNS:
        match = pattern.match(url)
        if match:
            return AzureProject(
                organization=match.group("org"),
                project=match.group("project"),
                repository=match.group("repo"),
            )

    raise AzureUrlParseError(f"Could not parse Azure DevOps URL: {url}")
