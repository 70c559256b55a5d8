"""Pytest fixtures for pr-opener tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from git import Repo

from tests.helpers.git import configure_repo_identity


@pytest.fixture
def empty_repo(tmp_path: Path) -> Repo:
    """Repository with no commits."""
    repo_dir = tmp_path / "empty"
    repo_dir.mkdir()
    repo = Repo.init(repo_dir)
    configure_repo_identity(repo)
    return repo


@pytest.fixture
def git_repo(tmp_path: Path) -> Repo:
    """Repository on branch feature/login with an origin remote on GitHub."""
    repo_dir = tmp_path / "work"
    repo_dir.mkdir()
    repo = Repo.init(repo_dir)
    configure_repo_identity(repo)
    (repo_dir / "README.md").write_text("initial\n")
    repo.git.add("-A")
    repo.index.commit("Initial commit")
    repo.git.branch("-M", "main")
    repo.git.checkout("-b", "feature/login")
    repo.create_remote("origin", "git@github.com:acme/widget.git")
    return repo


@pytest.fixture
def repo_dir(git_repo: Repo) -> Path:
    if git_repo.working_tree_dir is None:
        raise RuntimeError("Repository working tree was not available.")
    return Path(git_repo.working_tree_dir)
