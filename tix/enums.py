"""Enumerations for tix issue hosts and branch targets."""

from enum import Enum


class IssueHost(str, Enum):
    """Issue hosts supported by tix.

    The set is closed: every repository is bound to exactly one of these.
    """

    GITHUB = "github"
    GITLAB = "gitlab"

    def __str__(self) -> str:
        return self.value


class BranchTarget(str, Enum):
    """Where a newly created branch gets checked out.

    - in-place: HEAD of the primary working directory moves to the new branch
    - worktree: a separate working directory is added for the new branch
    """

    IN_PLACE = "in-place"
    WORKTREE = "worktree"

    def __str__(self) -> str:
        return self.value
