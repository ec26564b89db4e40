"""Issue host providers."""

from tix.providers.base import IssueProvider, parse_labels
from tix.providers.factory import create_issue_provider
from tix.providers.github import GitHubIssueProvider
from tix.providers.gitlab import GitLabIssueProvider

__all__ = [
    "GitHubIssueProvider",
    "GitLabIssueProvider",
    "IssueProvider",
    "create_issue_provider",
    "parse_labels",
]
