"""GitHub issue provider using PyGithub."""

import asyncio
from collections.abc import Callable
from typing import TypeVar

import structlog
from github import Github, GithubException  # type: ignore[import-not-found]
from github.Issue import Issue as GHIssue  # type: ignore[import-not-found]

from tix.enums import IssueHost
from tix.exceptions import ConfigurationError, IssueHostError
from tix.models.domain import Issue
from tix.providers.base import IssueProvider, parse_labels

log = structlog.get_logger(__name__)

T = TypeVar("T")


async def _run_sync(func: Callable[[], T]) -> T:
    """Run a synchronous function in a thread pool.

    This prevents blocking the event loop when calling synchronous
    PyGithub methods.
    """
    return await asyncio.to_thread(func)


class GitHubIssueProvider(IssueProvider):
    """Creates issues on GitHub.

    Labels are split on commas and/or whitespace. Issues are not assigned.
    """

    def __init__(
        self,
        repo_path: str,
        token: str | None,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
    ) -> None:
        """Initialize GitHub provider.

        Args:
            repo_path: Repository as ``owner/repo``
            token: GitHub personal access token
            base_url: GitHub API base URL (for GitHub Enterprise)
            timeout: Request timeout in seconds

        Raises:
            ConfigurationError: If the repository path is malformed, the
                token is missing, or the client cannot be built
        """
        parts = repo_path.split("/")
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise ConfigurationError(
                f"Invalid GitHub repository '{repo_path}': expected the form '<owner>/<repo>'"
            )
        if not token or not token.strip():
            raise ConfigurationError("GITHUB_TOKEN environment variable is required")

        self.owner, self.repo = (part.strip() for part in parts)
        self.token = token.strip()
        # Normalize base_url by removing trailing slash
        self.base_url = base_url.rstrip("/")

        try:
            self._client = Github(self.token, base_url=self.base_url, timeout=int(timeout))
        except Exception as e:
            raise ConfigurationError(f"Could not create GitHub API client: {e}") from e

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    async def create_issue(self, title: str, labels: str) -> Issue:
        """Create a new issue."""
        label_names = parse_labels(labels, split_on_whitespace=True)
        log.info("create_issue", host="github", repo=self.full_name, title=title, labels=label_names)

        def _create() -> GHIssue:
            # lazy=True skips the repository GET; the POST is the only request
            gh_repo = self._client.get_repo(self.full_name, lazy=True)
            return gh_repo.create_issue(title=title, labels=label_names)

        try:
            gh_issue = await _run_sync(_create)
        except GithubException as e:
            log.error("github_create_issue_failed", repo=self.full_name, status=e.status, error=str(e))
            raise IssueHostError(
                f"Failed to create GitHub issue in {self.full_name}: {_error_message(e)}",
                host=IssueHost.GITHUB.value,
                status_code=e.status,
                response_text=str(e.data) if e.data else None,
            ) from e

        issue = self._convert_issue(gh_issue)
        log.info("issue_created", host="github", number=issue.number, url=issue.url)
        return issue

    async def close(self) -> None:
        """Close GitHub client."""
        await _run_sync(self._client.close)

    def _convert_issue(self, gh_issue: GHIssue) -> Issue:
        """Convert GitHub Issue to our Issue model."""
        return Issue(
            id=gh_issue.id,
            number=gh_issue.number,
            title=gh_issue.title,
            url=gh_issue.html_url or "",
            labels=[label.name for label in gh_issue.labels],
        )


def _error_message(error: GithubException) -> str:
    """Pull the human-readable message out of a GitHub error payload."""
    data = error.data
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return str(error)
