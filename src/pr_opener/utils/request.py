"""Assemble a pull request request from the local repository."""

import logging
from pathlib import Path

from pr_opener.errors import AzureUrlParseError
from pr_opener.models.options import OpenerOptions
from pr_opener.models.pr import PullRequestRequest
from pr_opener.models.provider import HostingProvider
from pr_opener.repo.inspector import RepositoryInspector
from pr_opener.service_resolver import resolve_service
from pr_opener.url_parser import parse_azure_url, parse_git_url

logger = logging.getLogger(__name__)


def build_request(options: OpenerOptions, path: Path | str = ".") -> PullRequestRequest:
    """
    Resolve branches, remote and provider for the repository at path.

    Args:
        options: Command line overrides and flags
        path: Repository working directory

    Returns:
        PullRequestRequest ready for URL building

    Raises:
        PrOpenerError: If the repository, HEAD or remote cannot be resolved,
            or the remote URL cannot be parsed
    """
    inspector = RepositoryInspector(path)

    # 1. Source branch
    branch = inspector.resolve_branch(options.branch)

    # 2. Remote and its URL
    remote_name = inspector.resolve_remote_name(options.remote, options.force_remote)
    remote = inspector.get_remote(remote_name)

    # 3. Owner/repo and provider
    owner_repo = parse_git_url(remote.url)
    provider = resolve_service(remote.url, options.service)

    azure = None
    if provider is HostingProvider.AZURE_DEVOPS:
        try:
            azure = parse_azure_url(remote.url)
        except AzureUrlParseError:
            logger.debug("Remote %s is not an Azure DevOps URL", remote.url)

    # 4. Target branch
    target = inspector.resolve_target_branch(remote.name, options.target)

    logger.debug(
        "Request: %s %s/%s %s -> %s",
        provider.value,
        owner_repo.owner,
        owner_repo.repository,
        branch,
        target,
    )
    return PullRequestRequest(
        provider=provider,
        owner=owner_repo.owner,
        repository=owner_repo.repository,
        source_branch=branch,
        target_branch=target,
        title=options.title,
        description=options.description,
        draft=options.draft,
        azure=azure,
    )
