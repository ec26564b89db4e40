"""Pytest configuration and shared fixtures."""

import subprocess
from pathlib import Path

import pytest

from tix.config.credentials import HostCredentials
from tix.config.settings import RepositoryConfig, TixSettings


def git(cwd: Path, *args: str) -> str:
    """Run a git command and return its stdout."""
    result = subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)
    return result.stdout.strip()


def init_repo(path: Path, branch: str = "main") -> Path:
    """Create a git repository at ``path`` with one commit on ``branch``."""
    path.mkdir(parents=True, exist_ok=True)
    git(path, "init")
    git(path, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
    git(path, "config", "user.email", "test@example.com")
    git(path, "config", "user.name", "Test User")
    git(path, "config", "commit.gpgsign", "false")

    (path / "README.md").write_text("# Test Repository\n")
    git(path, "add", "README.md")
    git(path, "commit", "-m", "Initial commit")
    return path


@pytest.fixture
def run_git():
    """The ``git`` helper, for tests that drive repositories directly."""
    return git


@pytest.fixture
def make_repo():
    """The ``init_repo`` helper, for tests that need extra repositories."""
    return init_repo


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Temporary repository with an initial commit on ``main``."""
    return init_repo(tmp_path / "repo")


@pytest.fixture
def credentials() -> HostCredentials:
    """Credentials for both hosts, independent of the environment."""
    return HostCredentials(
        github_token="ghp_test_token",
        gitlab_token="glpat_test_token",
        github_api_url="https://api.github.com",
        gitlab_url="https://gitlab.example.com",
    )


@pytest.fixture
def github_repository(git_repo: Path) -> RepositoryConfig:
    """GitHub-backed repository pointing at ``git_repo``."""
    return RepositoryConfig(name="api", directory=str(git_repo), github_repo="acme/api")


@pytest.fixture
def settings(github_repository: RepositoryConfig) -> TixSettings:
    """Settings with a single GitHub-backed repository."""
    return TixSettings(repositories=[github_repository])
