"""Local git repository access."""

from pr_opener.repo.inspector import RepositoryInspector

__all__ = ["RepositoryInspector"]
