"""
Domain models for tix.

These are the normalized internal representations, converted from the
provider-specific payloads returned by GitHub and GitLab.

Example:
    Creating an issue from provider data::

        issue = Issue(
            id=1938475,
            number=42,
            title="Fix login bug",
            url="https://github.com/org/repo/issues/42",
            labels=["bug"],
        )
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Issue:
    """An issue created on a remote host.

    Attributes:
        id: Opaque, host-global identifier. Never used for branch names.
        number: Human-facing sequential number scoped to the repository
            (GitHub ``number``, GitLab ``iid``).
        title: Issue title as stored by the host.
        url: Browser URL of the issue.
        labels: Labels applied to the issue.
    """

    id: int
    number: int
    title: str
    url: str = ""
    labels: list[str] = field(default_factory=list)


@dataclass
class MaterializedBranch:
    """A branch created locally for an issue.

    Attributes:
        name: Branch name
        commit: Hex sha the branch points at
        worktree_path: Directory of the new worktree, or None when the branch
            was checked out in place
    """

    name: str
    commit: str
    worktree_path: Path | None = None


@dataclass
class CreateResult:
    """Outcome of a successful ``create`` run."""

    repository: str
    issue: Issue
    branch: MaterializedBranch
