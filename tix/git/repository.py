"""Opening repositories and checking their operational state.

A repository is only safe to branch from when no merge, rebase, revert,
cherry-pick, bisect or mailbox apply is in progress. Git records these
operations as marker files in the git directory; they are checked in a fixed
order and the first match wins.

Example:
    >>> from tix.git.repository import check_clean, open_repository
    >>> repo = open_repository("~/src/api")
    >>> check_clean(repo)  # raises RepositoryNotCleanError mid-merge
"""

from enum import Enum
from pathlib import Path

import git
import structlog
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from tix.git.exceptions import NotGitRepositoryError, RepositoryNotCleanError

log = structlog.get_logger(__name__)


class RepositoryState(str, Enum):
    """Operational state of a working copy."""

    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revert-sequence"
    CHERRY_PICK = "cherry-pick"
    CHERRY_PICK_SEQUENCE = "cherry-pick-sequence"
    BISECT = "bisect"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebase-interactive"
    REBASE_MERGE = "rebase-merge"
    APPLY_MAILBOX = "apply-mailbox"
    APPLY_MAILBOX_OR_REBASE = "apply-mailbox-or-rebase"

    def __str__(self) -> str:
        return self.value


def open_repository(path: str | Path) -> git.Repo:
    """Open the repository rooted at ``path``.

    Parent directories are not searched: the configured directory must be the
    repository (or worktree) root.

    Raises:
        NotGitRepositoryError: If the path does not exist or is not a repository
    """
    repo_path = Path(path).expanduser()
    try:
        repo = git.Repo(repo_path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise NotGitRepositoryError(repo_path) from e

    log.debug("repository_opened", path=str(repo_path), git_dir=repo.git_dir)
    return repo


def repository_state(repo: git.Repo) -> RepositoryState:
    """Determine which operation, if any, is in progress."""
    git_dir = Path(repo.git_dir)

    rebase_merge = git_dir / "rebase-merge"
    rebase_apply = git_dir / "rebase-apply"

    if rebase_merge.is_dir():
        if (rebase_merge / "interactive").exists():
            return RepositoryState.REBASE_INTERACTIVE
        return RepositoryState.REBASE_MERGE

    if rebase_apply.is_dir():
        if (rebase_apply / "rebasing").exists():
            return RepositoryState.REBASE
        if (rebase_apply / "applying").exists():
            return RepositoryState.APPLY_MAILBOX
        return RepositoryState.APPLY_MAILBOX_OR_REBASE

    if (git_dir / "MERGE_HEAD").exists():
        return RepositoryState.MERGE

    sequencer = (git_dir / "sequencer" / "todo").exists()
    if (git_dir / "REVERT_HEAD").exists():
        return RepositoryState.REVERT_SEQUENCE if sequencer else RepositoryState.REVERT
    if (git_dir / "CHERRY_PICK_HEAD").exists():
        return RepositoryState.CHERRY_PICK_SEQUENCE if sequencer else RepositoryState.CHERRY_PICK

    if (git_dir / "BISECT_LOG").exists():
        return RepositoryState.BISECT

    return RepositoryState.CLEAN


def check_clean(repo: git.Repo) -> None:
    """Ensure no operation is in progress.

    Raises:
        RepositoryNotCleanError: If the repository is mid-operation
    """
    state = repository_state(repo)
    if state is not RepositoryState.CLEAN:
        log.warning("repository_not_clean", path=repo.working_tree_dir, state=state.value)
        raise RepositoryNotCleanError(repo.working_tree_dir or repo.git_dir, state.value)

    log.debug("repository_clean", path=repo.working_tree_dir)
