"""GitLab issue provider using direct REST API calls."""

import urllib.parse
from typing import Any

import httpx
import structlog

from tix.enums import IssueHost
from tix.exceptions import ConfigurationError, IssueHostError
from tix.models.domain import Issue
from tix.providers.base import IssueProvider, parse_labels
from tix.utils.connection_pool import HTTPConnectionPool

log = structlog.get_logger(__name__)


class GitLabIssueProvider(IssueProvider):
    """Creates issues on GitLab via REST API v4.

    GitLab API differences from GitHub:
    - Uses 'iid' (internal ID) for project-scoped issue numbers
    - Labels are sent as a comma-separated string
    - Project path must be URL-encoded in API calls

    Every issue is assigned to the user who owns the token, which costs one
    extra ``GET /user`` request per issue.
    """

    def __init__(
        self,
        project: str,
        token: str | None,
        base_url: str = "https://gitlab.com",
        timeout: float = 30.0,
    ) -> None:
        """Initialize GitLab provider.

        Args:
            project: Project path, e.g. ``group/subgroup/project``
            token: Personal access token with the ``api`` scope
            base_url: GitLab base URL (e.g., https://gitlab.com)
            timeout: Request timeout in seconds

        Raises:
            ConfigurationError: If the project or token is missing, or the
                base URL is not an absolute http(s) URL
        """
        if not project or not project.strip(" /"):
            raise ConfigurationError("GitLab project path must not be empty")
        if not token or not token.strip():
            raise ConfigurationError("GITLAB_TOKEN environment variable is required")

        self.project = project.strip(" /")
        self.token = token.strip()
        self.base_url = base_url.rstrip("/")
        # URL-encode the project path for API calls (GitLab uses encoded path)
        self.project_path = urllib.parse.quote(self.project, safe="")

        try:
            self._pool = HTTPConnectionPool(
                f"{self.base_url}/api/v4",
                timeout=timeout,
                headers={
                    "PRIVATE-TOKEN": self.token,
                    "Content-Type": "application/json",
                },
            )
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid GitLab URL '{base_url}': {e}") from e

        url = self._pool.base_url
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(f"Invalid GitLab URL '{base_url}': expected http(s)://host")

    async def create_issue(self, title: str, labels: str) -> Issue:
        """Create a new issue assigned to the token owner."""
        label_names = parse_labels(labels)
        log.info("create_issue", host="gitlab", project=self.project, title=title, labels=label_names)

        try:
            user = await self._request("GET", "/user")
            payload = {
                "title": title,
                "labels": ",".join(label_names),
                "assignee_ids": [user["id"]],
            }
            data = await self._request("POST", f"/projects/{self.project_path}/issues", json=payload)
            issue = self._parse_issue(data)
        except httpx.HTTPStatusError as e:
            log.error(
                "gitlab_request_failed",
                project=self.project,
                status=e.response.status_code,
                url=str(e.request.url),
            )
            raise IssueHostError(
                f"GitLab request failed for {self.project}: {_error_message(e.response)}",
                host=IssueHost.GITLAB.value,
                status_code=e.response.status_code,
                response_text=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            log.error("gitlab_request_failed", project=self.project, error=str(e))
            raise IssueHostError(
                f"Could not reach GitLab at {self.base_url}: {e}",
                host=IssueHost.GITLAB.value,
            ) from e
        except (KeyError, TypeError, ValueError) as e:
            raise IssueHostError(
                f"Unexpected response from GitLab: {e}",
                host=IssueHost.GITLAB.value,
            ) from e

        log.info("issue_created", host="gitlab", number=issue.number, url=issue.url)
        return issue

    async def close(self) -> None:
        """Close the connection pool."""
        await self._pool.close()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        if method == "GET":
            response = await self._pool.get(path, **kwargs)
        else:
            response = await self._pool.post(path, **kwargs)
        response.raise_for_status()
        return response.json()

    def _parse_issue(self, data: dict[str, Any]) -> Issue:
        """Parse GitLab issue data into Issue model.

        GitLab uses 'iid' for the project-scoped issue number.
        """
        return Issue(
            id=data["id"],
            number=data["iid"],
            title=data["title"],
            url=data.get("web_url", ""),
            labels=list(data.get("labels", [])),
        )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict):
        for key in ("message", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}"
