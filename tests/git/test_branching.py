"""Tests for BranchMaterializer against real repositories."""

import pytest

from tix.enums import BranchTarget
from tix.exceptions import GitOperationError
from tix.git.branching import BranchMaterializer
from tix.git.exceptions import (
    BranchExistsError,
    BranchNotFoundError,
    CheckoutError,
    WorktreePathExistsError,
)
from tix.git.repository import open_repository


@pytest.fixture
def repo(git_repo, run_git):
    """Repository whose ``main`` has a file that differs from ``develop``."""
    run_git(git_repo, "checkout", "-b", "develop")
    (git_repo / "feature.txt").write_text("develop only\n")
    run_git(git_repo, "add", "feature.txt")
    run_git(git_repo, "commit", "-m", "Add feature file")
    run_git(git_repo, "checkout", "main")

    repo = open_repository(git_repo)
    yield repo
    repo.close()


class TestInPlace:
    """Branches checked out in the primary working directory."""

    def test_creates_and_checks_out(self, repo, git_repo, run_git):
        """HEAD and files follow the new branch; no worktree is added."""
        result = BranchMaterializer(repo).materialize("develop", "42-fix-login-bug", BranchTarget.IN_PLACE)

        assert result.name == "42-fix-login-bug"
        assert result.worktree_path is None
        assert result.commit == run_git(git_repo, "rev-parse", "develop")
        assert run_git(git_repo, "symbolic-ref", "--short", "HEAD") == "42-fix-login-bug"
        assert (git_repo / "feature.txt").read_text() == "develop only\n"
        assert len(run_git(git_repo, "worktree", "list").splitlines()) == 1

    def test_branch_from_current_head(self, repo, git_repo, run_git):
        result = BranchMaterializer(repo).materialize("main", "7-docs", BranchTarget.IN_PLACE)

        assert result.commit == run_git(git_repo, "rev-parse", "main")
        assert not (git_repo / "feature.txt").exists()

    def test_checkout_blocked_by_local_changes(self, repo, git_repo, run_git):
        """Git's checkout safety applies; local edits are never overwritten."""
        (git_repo / "feature.txt").write_text("untracked on main\n")

        with pytest.raises(CheckoutError):
            BranchMaterializer(repo).materialize("develop", "42-fix", BranchTarget.IN_PLACE)

        assert run_git(git_repo, "symbolic-ref", "--short", "HEAD") == "main"
        assert (git_repo / "feature.txt").read_text() == "untracked on main\n"


class TestWorktree:
    """Branches checked out in a separate worktree."""

    def test_primary_checkout_untouched(self, repo, git_repo, run_git, tmp_path):
        """The primary HEAD and files stay put; the worktree is populated."""
        head_before = run_git(git_repo, "rev-parse", "HEAD")
        worktree = tmp_path / "42-fix-login-bug"

        result = BranchMaterializer(repo).materialize(
            "develop", "42-fix-login-bug", BranchTarget.WORKTREE, worktree
        )

        assert result.worktree_path == worktree
        assert run_git(git_repo, "symbolic-ref", "--short", "HEAD") == "main"
        assert run_git(git_repo, "rev-parse", "HEAD") == head_before
        assert not (git_repo / "feature.txt").exists()

        assert (worktree / "feature.txt").read_text() == "develop only\n"
        assert run_git(worktree, "symbolic-ref", "--short", "HEAD") == "42-fix-login-bug"

    def test_existing_path(self, repo, git_repo, run_git, tmp_path):
        """An existing directory is never reused, and no branch is left behind."""
        worktree = tmp_path / "taken"
        worktree.mkdir()

        with pytest.raises(WorktreePathExistsError):
            BranchMaterializer(repo).materialize("main", "42-fix", BranchTarget.WORKTREE, worktree)

        assert "42-fix" not in run_git(git_repo, "branch", "--list", "42-fix")

    def test_path_required(self, repo):
        with pytest.raises(ValueError):
            BranchMaterializer(repo).materialize("main", "42-fix", BranchTarget.WORKTREE)


class TestFailures:
    """Errors raised before anything is changed."""

    def test_existing_branch(self, repo, git_repo, run_git):
        """An existing branch is an error, even when it points at the base."""
        run_git(git_repo, "branch", "42-fix", "main")

        with pytest.raises(BranchExistsError) as exc_info:
            BranchMaterializer(repo).materialize("main", "42-fix", BranchTarget.IN_PLACE)

        assert exc_info.value.branch == "42-fix"
        assert run_git(git_repo, "symbolic-ref", "--short", "HEAD") == "main"

    def test_missing_base_branch(self, repo):
        with pytest.raises(BranchNotFoundError) as exc_info:
            BranchMaterializer(repo).materialize("release", "42-fix", BranchTarget.IN_PLACE)

        assert exc_info.value.branch == "release"

    def test_invalid_branch_name(self, repo):
        with pytest.raises(GitOperationError):
            BranchMaterializer(repo).materialize("main", "bad..name", BranchTarget.IN_PLACE)
