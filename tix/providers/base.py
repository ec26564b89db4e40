"""
Abstract base class for issue providers.

An issue provider creates exactly one issue on a remote host per call and
normalizes the host's response into the ``Issue`` domain model.
"""

import re
from abc import ABC, abstractmethod
from typing import Any

from tix.models.domain import Issue


def parse_labels(labels: str, split_on_whitespace: bool = False) -> list[str]:
    """Split a user-supplied label string into label names.

    Args:
        labels: Comma-separated labels, e.g. ``"bug, backend"``
        split_on_whitespace: Also treat whitespace as a separator

    Returns:
        Label names with surrounding whitespace trimmed and empties dropped
    """
    pattern = r"[,\s]+" if split_on_whitespace else r","
    return [label.strip() for label in re.split(pattern, labels) if label.strip()]


class IssueProvider(ABC):
    """Abstract base class for issue host implementations.

    Implementations handle provider-specific quirks such as:
    - Different ID schemes (GitHub's 'number' vs GitLab's 'iid')
    - Different label parsing rules
    - Authentication header formats (token, PRIVATE-TOKEN)

    Construction never touches the network; it only validates its inputs and
    raises ConfigurationError when they are unusable.
    """

    @abstractmethod
    async def create_issue(self, title: str, labels: str) -> Issue:
        """Create a new issue.

        Args:
            title: Issue title
            labels: Raw label string as typed by the user; may be empty

        Returns:
            Created Issue with the host-assigned number

        Raises:
            IssueHostError: If the request fails for any reason. Never retried.
        """
        pass

    async def close(self) -> None:
        """Release network resources."""
        return None

    async def __aenter__(self) -> "IssueProvider":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
