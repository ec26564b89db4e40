"""Custom exception hierarchy for tix.

Every failure in the ``create`` workflow surfaces as one of these exceptions,
so the CLI can report it uniformly and exit non-zero.

Exception Hierarchy:
    TixError (base)
    ├── ConfigurationError
    ├── RepositoryStateError
    ├── GitOperationError
    └── ExternalServiceError
        └── IssueHostError

Example Usage:
    >>> from tix.exceptions import ConfigurationError
    >>> try:
    ...     settings = TixSettings.from_yaml(path)
    ... except FileNotFoundError as e:
    ...     raise ConfigurationError(f"Config file not found: {path}") from e
"""


class TixError(Exception):
    """Base exception for all tix errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(TixError):
    """Configuration-related errors.

    Raised before any side effect has happened.

    Examples:
        - Configuration file not found or not valid YAML
        - Repository configured with both or neither issue host
        - Malformed ``owner/repo`` identifier
        - Missing GITHUB_TOKEN / GITLAB_TOKEN
    """

    pass


class RepositoryStateError(TixError):
    """The local working copy is in a state that is unsafe to branch from.

    Raised before any remote issue is created.
    """

    pass


class GitOperationError(TixError):
    """Git operation errors.

    See ``tix.git.exceptions`` for the specific error types:
    - NotGitRepositoryError: Directory is not a Git repository
    - BranchNotFoundError: Base branch does not exist locally
    - BranchExistsError: Target branch name is already taken
    - WorktreePathExistsError: Worktree directory already exists
    - CheckoutError: Checking out the new branch failed
    """

    pass


class ExternalServiceError(TixError):
    """External service communication errors.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status code (if applicable)
        response_text: Response body text (if applicable)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            status_code: HTTP status code (if applicable)
            response_text: Response body text (if applicable)
        """
        full_message = message
        if status_code:
            full_message = f"{message} (HTTP {status_code})"

        super().__init__(full_message)
        self.message = message
        self.status_code = status_code
        self.response_text = response_text


class IssueHostError(ExternalServiceError):
    """An issue host (GitHub or GitLab) rejected a request or was unreachable.

    Attributes:
        host: Name of the issue host ("github" or "gitlab")
    """

    def __init__(
        self,
        message: str,
        host: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            host: Issue host that failed
            status_code: HTTP status code (if applicable)
            response_text: Response body text (if applicable)
        """
        self.host = host
        super().__init__(message, status_code=status_code, response_text=response_text)
