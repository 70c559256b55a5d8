"""Read branch and remote information from a local git repository."""

import logging
from pathlib import Path

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from pr_opener.errors import HeadUnresolvableError, RemoteNotFoundError, RepositoryNotFoundError
from pr_opener.models.repository import RemoteReference

logger = logging.getLogger(__name__)

DEFAULT_BRANCH_CANDIDATES = ("main", "master", "develop", "trunk")
FALLBACK_TARGET_BRANCH = "main"
UPSTREAM_REMOTE = "upstream"
ORIGIN_REMOTE = "origin"


class RepositoryInspector:
    """Read-only view of the repository in a working directory."""

    def __init__(self, path: Path | str = "."):
        """
        Open the repository rooted at path.

        Args:
            path: Repository working directory (parents are not searched)

        Raises:
            RepositoryNotFoundError: If path is not a git repository
        """
        self.path = Path(path)
        try:
            self.repo = Repo(self.path, search_parent_directories=False)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise RepositoryNotFoundError(
                f"Error opening git repository: {self.path.resolve()}"
            ) from e

    def current_branch(self) -> str:
        """
        Short name of the branch HEAD points to.

        Raises:
            HeadUnresolvableError: On a detached HEAD or an empty repository
        """
        head = self.repo.head
        if head.is_detached:
            raise HeadUnresolvableError(
                "Could not determine current branch name: HEAD is detached"
            )
        if not head.is_valid():
            raise HeadUnresolvableError(
                f"Could not determine current branch name: "
                f"'{head.reference.name}' has no commits"
            )
        return head.reference.name

    def resolve_branch(self, override: str | None = None) -> str:
        if override:
            return override
        return self.current_branch()

    def has_remote(self, name: str) -> bool:
        return any(remote.name == name for remote in self.repo.remotes)

    def resolve_remote_name(self, override: str | None = None, force_default: bool = False) -> str:
        """Pick the remote: override, then upstream (unless forced off), then origin."""
        if override:
            return override
        if not force_default and self.has_remote(UPSTREAM_REMOTE):
            logger.debug("Remote %r exists, preferring it", UPSTREAM_REMOTE)
            return UPSTREAM_REMOTE
        return ORIGIN_REMOTE

    def get_remote(self, name: str) -> RemoteReference:
        """
        Look up a remote by exact name.

        Raises:
            RemoteNotFoundError: If no remote with that name is configured
        """
        if not self.has_remote(name):
            raise RemoteNotFoundError(f"Remote '{name}' not found")
        try:
            url = self.repo.remote(name).url
        except AttributeError as e:
            raise RemoteNotFoundError(f"Remote '{name}' not found") from e
        logger.debug("Remote %s -> %s", name, url)
        return RemoteReference(name=name, url=url)

    def remote_branch_exists(self, remote: str, branch: str) -> bool:
        path = f"refs/remotes/{remote}/{branch}"
        return any(ref.path == path for ref in self.repo.references)

    def resolve_target_branch(self, remote: str, override: str | None = None) -> str:
        """
        Target branch for the pull request.

        Without an override, checks the remote-tracking branches for common
        default branch names and falls back to "main".
        """
        if override:
            return override
        for candidate in DEFAULT_BRANCH_CANDIDATES:
            if self.remote_branch_exists(remote, candidate):
                logger.debug("Found %s/%s, using it as target", remote, candidate)
                return candidate
        logger.debug(
            "No default branch found on %s, falling back to %s", remote, FALLBACK_TARGET_BRANCH
        )
        return FALLBACK_TARGET_BRANCH
