"""Factory for creating issue provider instances based on configuration."""

import structlog

from tix.config.credentials import HostCredentials
from tix.config.settings import RepositoryConfig
from tix.enums import IssueHost
from tix.providers.base import IssueProvider
from tix.providers.github import GitHubIssueProvider
from tix.providers.gitlab import GitLabIssueProvider

log = structlog.get_logger(__name__)


def create_issue_provider(
    repository: RepositoryConfig,
    credentials: HostCredentials,
    timeout: float = 30.0,
) -> IssueProvider:
    """Create the issue provider for a repository.

    Args:
        repository: Repository whose issue host is used
        credentials: Tokens and endpoints for the issue hosts
        timeout: Request timeout in seconds

    Returns:
        IssueProvider instance (GitHub or GitLab)

    Raises:
        ConfigurationError: If the repository does not name exactly one
            issue host, or the provider rejects its inputs

    Example:
        >>> settings = TixSettings.from_yaml("~/.tix.yml")
        >>> provider = create_issue_provider(settings.repositories[0], HostCredentials())
        >>> async with provider:
        ...     issue = await provider.create_issue("Fix login bug", "bug")
    """
    host = repository.issue_host()

    if host is IssueHost.GITHUB:
        assert repository.github_repo is not None
        log.info("creating_github_provider", repository=repository.name, base_url=credentials.github_api_url)
        return GitHubIssueProvider(
            repo_path=repository.github_repo,
            token=credentials.github,
            base_url=credentials.github_api_url,
            timeout=timeout,
        )

    assert repository.gitlab_repo is not None
    log.info("creating_gitlab_provider", repository=repository.name, base_url=credentials.gitlab_url)
    return GitLabIssueProvider(
        project=repository.gitlab_repo,
        token=credentials.gitlab,
        base_url=credentials.gitlab_url,
        timeout=timeout,
    )
