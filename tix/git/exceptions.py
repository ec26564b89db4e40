"""Git exceptions.

Errors raised while opening a repository, checking its state, and creating
branches or worktrees. Each carries a hint for resolution where one exists.

Example:
    >>> from tix.git.exceptions import BranchExistsError
    >>> raise BranchExistsError("42-fix-login-bug")
    Traceback (most recent call last):
        ...
    BranchExistsError: Branch already exists: 42-fix-login-bug

    Hint: Delete or rename the existing branch, or pick a different issue title.
"""

from pathlib import Path

from tix.exceptions import GitOperationError, RepositoryStateError


class GitError(GitOperationError):
    """Base exception for git errors that carry a resolution hint.

    Attributes:
        message: Error message
        hint: Optional hint for resolution
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class NotGitRepositoryError(GitError):
    """Raised when a configured directory is not a Git repository.

    Attributes:
        path: Directory that could not be opened
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__(
            message=f"Not a Git repository: {path}",
            hint="Check the repository's 'directory' (and worktree settings) in your tix config.",
        )
        self.path = str(path)


class BranchNotFoundError(GitError):
    """Raised when the base branch does not exist locally."""

    def __init__(self, branch: str) -> None:
        super().__init__(
            message=f"Base branch not found: {branch}",
            hint="Create or fetch the branch locally, or fix 'default_branch' in your tix config.",
        )
        self.branch = branch


class BranchExistsError(GitError):
    """Raised when the new branch name is already taken."""

    def __init__(self, branch: str) -> None:
        super().__init__(
            message=f"Branch already exists: {branch}",
            hint="Delete or rename the existing branch, or pick a different issue title.",
        )
        self.branch = branch


class WorktreePathExistsError(GitError):
    """Raised when the worktree directory for a new branch already exists."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(
            message=f"Worktree path already exists: {path}",
            hint="Remove the directory or run 'git worktree prune' if it is stale.",
        )
        self.path = str(path)


class CheckoutError(GitError):
    """Raised when checking out the new branch fails."""

    def __init__(self, branch: str, detail: str) -> None:
        super().__init__(message=f"Failed to check out branch {branch}: {detail}")
        self.branch = branch


class RepositoryNotCleanError(RepositoryStateError):
    """Raised when the repository is in the middle of an operation.

    Attributes:
        state: The in-progress operation (e.g. "merge", "rebase-interactive")
    """

    def __init__(self, path: str | Path, state: str) -> None:
        super().__init__(
            f"Repository at {path} is not clean (in-progress {state}); "
            "finish or abort it before creating a branch"
        )
        self.path = str(path)
        self.state = state
