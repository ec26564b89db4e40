"""Issue host credentials sourced from the environment.

Credentials are resolved once, by the CLI, and handed to the provider factory
explicitly. Providers never read the environment themselves, so tests can
construct ``HostCredentials`` directly.

Environment variables:
    GITHUB_TOKEN: Personal access token for GitHub repositories
    GITLAB_TOKEN: Personal access token for GitLab projects
    GITHUB_API_URL: GitHub API base URL (GitHub Enterprise)
    GITLAB_URL: GitLab instance URL (self-hosted GitLab)
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class HostCredentials(BaseSettings):
    """Tokens and endpoints for the supported issue hosts."""

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    github_token: SecretStr | None = Field(default=None, description="GitHub access token")
    gitlab_token: SecretStr | None = Field(default=None, description="GitLab access token")
    github_api_url: str = Field(default="https://api.github.com", description="GitHub API base URL")
    gitlab_url: str = Field(default="https://gitlab.com", description="GitLab instance URL")

    @staticmethod
    def _reveal(secret: SecretStr | None) -> str | None:
        return secret.get_secret_value() if secret is not None else None

    @property
    def github(self) -> str | None:
        """Plain GitHub token, if configured."""
        return self._reveal(self.github_token)

    @property
    def gitlab(self) -> str | None:
        """Plain GitLab token, if configured."""
        return self._reveal(self.gitlab_token)
