"""Local git operations for tix.

This package opens the configured repository, verifies it is safe to branch
from, and creates the issue branch either in place or as a worktree.

Example:
    >>> from tix.enums import BranchTarget
    >>> from tix.git import BranchMaterializer, check_clean, open_repository
    >>> repo = open_repository("~/src/api")
    >>> check_clean(repo)
    >>> BranchMaterializer(repo).materialize("main", "42-fix-login-bug", BranchTarget.IN_PLACE)

Error Handling:
    All git failures inherit from GitOperationError (via GitError) and carry
    a hint where one helps. A repository that is mid-merge/rebase raises
    RepositoryNotCleanError, a RepositoryStateError.
"""

from tix.git.branching import BranchMaterializer
from tix.git.exceptions import (
    BranchExistsError,
    BranchNotFoundError,
    CheckoutError,
    GitError,
    NotGitRepositoryError,
    RepositoryNotCleanError,
    WorktreePathExistsError,
)
from tix.git.repository import RepositoryState, check_clean, open_repository, repository_state

__all__ = [
    # Main API
    "BranchMaterializer",
    "check_clean",
    "open_repository",
    "repository_state",
    "RepositoryState",
    # Exceptions
    "BranchExistsError",
    "BranchNotFoundError",
    "CheckoutError",
    "GitError",
    "NotGitRepositoryError",
    "RepositoryNotCleanError",
    "WorktreePathExistsError",
]
