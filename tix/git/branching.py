"""Branch and worktree creation.

A new branch always starts at the tip of a local base branch. It is then
either checked out in the primary working directory or given its own
worktree, leaving the primary checkout untouched.
"""

from pathlib import Path

import git
import structlog
from git.exc import GitCommandError

from tix.enums import BranchTarget
from tix.exceptions import GitOperationError
from tix.git.exceptions import (
    BranchExistsError,
    BranchNotFoundError,
    CheckoutError,
    WorktreePathExistsError,
)
from tix.models.domain import MaterializedBranch

log = structlog.get_logger(__name__)


class BranchMaterializer:
    """Creates branches in an opened repository.

    Attributes:
        repo: GitPython repository the branches are created in
    """

    def __init__(self, repo: git.Repo) -> None:
        self.repo = repo

    def materialize(
        self,
        base_branch: str,
        new_branch: str,
        target: BranchTarget,
        worktree_path: Path | None = None,
    ) -> MaterializedBranch:
        """Create ``new_branch`` from ``base_branch`` and check it out.

        Args:
            base_branch: Local branch to fork from
            new_branch: Name of the branch to create
            target: Check out in place, or in a new worktree
            worktree_path: Directory for the worktree (required for worktrees)

        Returns:
            MaterializedBranch describing what was created

        Raises:
            BranchNotFoundError: If the base branch does not exist locally
            BranchExistsError: If ``new_branch`` already exists
            WorktreePathExistsError: If the worktree directory already exists
            CheckoutError: If the in-place checkout fails
            GitOperationError: For any other git failure
        """
        if target is BranchTarget.WORKTREE and worktree_path is None:
            raise ValueError("worktree_path is required for worktree targets")

        try:
            base = self.repo.heads[base_branch]
        except IndexError as e:
            raise BranchNotFoundError(base_branch) from e

        commit = base.commit

        if new_branch in self.repo.heads:
            raise BranchExistsError(new_branch)

        if target is BranchTarget.WORKTREE and worktree_path is not None and worktree_path.exists():
            raise WorktreePathExistsError(worktree_path)

        try:
            self.repo.git.check_ref_format("--branch", new_branch)
            head = self.repo.create_head(new_branch, commit)
        except (ValueError, OSError, GitCommandError) as e:
            raise GitOperationError(f"Failed to create branch {new_branch}: {e}") from e

        log.info("branch_created", branch=new_branch, base=base_branch, commit=commit.hexsha)

        if target is BranchTarget.WORKTREE:
            assert worktree_path is not None
            self._add_worktree(new_branch, worktree_path)
            return MaterializedBranch(name=new_branch, commit=commit.hexsha, worktree_path=worktree_path)

        try:
            head.checkout()
        except GitCommandError as e:
            raise CheckoutError(new_branch, (e.stderr or str(e)).strip()) from e

        log.info("branch_checked_out", branch=new_branch, path=self.repo.working_tree_dir)
        return MaterializedBranch(name=new_branch, commit=commit.hexsha)

    def _add_worktree(self, branch: str, path: Path) -> None:
        """Add a worktree at ``path`` checked out to an existing ``branch``."""
        try:
            self.repo.git.worktree("add", str(path), branch)
        except GitCommandError as e:
            raise GitOperationError(
                f"Failed to create worktree at {path}: {(e.stderr or str(e)).strip()}"
            ) from e

        log.info("worktree_created", branch=branch, path=str(path))
