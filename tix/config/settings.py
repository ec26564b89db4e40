"""
Configuration system using Pydantic for type-safe settings management.

The configuration file lists the repositories tix can create issues and
branches for. Each repository is bound to exactly one issue host.

Example config (``~/.tix.yml``)::

    repositories:
      - name: api
        directory: ~/src/api
        github_repo: acme/api
        default_labels: backend
      - name: infra
        directory: ~/src/infra
        gitlab_repo: acme/platform/infra
        default_branch: develop
        worktree:
          enabled: true
          default_branch: develop
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tix.enums import IssueHost
from tix.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = "~/.tix.yml"


class WorktreeConfig(BaseModel):
    """Worktree layout for a repository.

    When enabled, the primary checkout lives in ``<directory>/<default_branch>``,
    named after the repository's base branch, and every new branch gets its
    own sibling directory ``<directory>/<branch>``. ``default_branch`` here is
    accepted for compatibility with existing config files; the layout does not
    use it.
    """

    enabled: bool = Field(default=False, description="Create a worktree instead of checking out in place")
    default_branch: str = Field(default="main", description="Accepted for compatibility; not used for the layout")


class RepositoryConfig(BaseModel):
    """A repository tix can create issues and branches for."""

    name: str = Field(..., min_length=1, description="Unique name used for selection")
    directory: str = Field(..., min_length=1, description="Base directory of the repository")
    default_branch: str = Field(default="main", description="Branch new branches are created from")
    github_repo: str | None = Field(default=None, description="GitHub repository as owner/repo")
    gitlab_repo: str | None = Field(default=None, description="GitLab project path")
    default_labels: str = Field(default="", description="Labels offered by default (comma separated)")
    worktree: WorktreeConfig = Field(default_factory=WorktreeConfig)

    def issue_host(self) -> IssueHost:
        """Return the issue host this repository is bound to.

        Raises:
            ConfigurationError: If both or neither of github_repo/gitlab_repo are set
        """
        if bool(self.github_repo) == bool(self.gitlab_repo):
            raise ConfigurationError(
                f"Repository '{self.name}' must set exactly one of github_repo or gitlab_repo"
            )
        return IssueHost.GITHUB if self.github_repo else IssueHost.GITLAB

    @property
    def base_directory(self) -> Path:
        """Configured directory with ``~`` expanded."""
        return Path(self.directory).expanduser()

    @property
    def git_basedir(self) -> Path:
        """Directory of the primary checkout."""
        if self.worktree.enabled:
            return self.base_directory / self.default_branch
        return self.base_directory

    def worktree_dir(self, branch: str) -> Path:
        """Directory a worktree for ``branch`` is created in."""
        return self.base_directory / branch


class TixSettings(BaseSettings):
    """Main tix settings.

    Loaded from a YAML file with environment variable interpolation. Scalar
    settings the file leaves out can be supplied with ``TIX_``-prefixed
    environment variables (e.g. ``TIX_REQUEST_TIMEOUT=10``).
    """

    model_config = SettingsConfigDict(
        env_prefix="TIX_",
        case_sensitive=False,
        extra="ignore",
    )

    repositories: list[RepositoryConfig] = Field(default_factory=list)
    request_timeout: float = Field(default=30.0, gt=0, description="Issue host request timeout in seconds")

    @model_validator(mode="after")
    def validate_unique_names(self) -> TixSettings:
        """Repository names are selection keys and must be unique."""
        seen: set[str] = set()
        for repository in self.repositories:
            if repository.name in seen:
                raise ValueError(f"Duplicate repository name: {repository.name}")
            seen.add(repository.name)
        return self

    def repository_names(self) -> list[str]:
        """Names of all configured repositories, in file order."""
        return [repository.name for repository in self.repositories]

    def get_repository(self, name: str) -> RepositoryConfig | None:
        """Look up a repository by name."""
        return next((r for r in self.repositories if r.name == name), None)

    def match_directory(self, path: str | Path) -> RepositoryConfig | None:
        """Find the repository whose directory contains ``path``.

        When several repositories match, the most specific (deepest)
        directory wins.

        Args:
            path: Directory to match, typically the current working directory

        Returns:
            Matching repository or None
        """
        target = Path(path).expanduser().resolve()
        best: RepositoryConfig | None = None
        best_depth = -1

        for repository in self.repositories:
            directory = repository.base_directory.resolve()
            if target == directory or directory in target.parents:
                depth = len(directory.parts)
                if depth > best_depth:
                    best = repository
                    best_depth = depth

        return best

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> TixSettings:
        """Load settings from YAML file with environment variable interpolation.

        Supports ${VAR_NAME} syntax for environment variable substitution.

        Args:
            config_path: Path to YAML configuration file (``~`` is expanded)

        Returns:
            TixSettings instance

        Raises:
            ConfigurationError: If config file is invalid or missing required fields
        """
        config_file = Path(config_path).expanduser()
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file) as f:
                yaml_content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {config_path}") from e

        try:
            yaml_content = cls._interpolate_env_vars(yaml_content)
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment variable reference in config: {e}") from e

        try:
            config_dict = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration must be a YAML object, not a list or scalar")

        try:
            return cls(**config_dict)
        except Exception as e:
            raise ConfigurationError(f"Failed to validate configuration: {e}") from e

    @staticmethod
    def _interpolate_env_vars(content: str) -> str:
        """Interpolate ${VAR_NAME} placeholders with environment variables.

        Supports two syntaxes:
        - ${VAR_NAME} - Required environment variable (raises if not set)
        - ${VAR_NAME:-default} - Optional with default value

        YAML comment lines are left unchanged.

        Raises:
            ValueError: If a required environment variable is not set
        """
        pattern = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2)
            value = os.getenv(var_name)

            if value is not None:
                return value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable {var_name} is not set")

        def process_line(line: str) -> str:
            if line.lstrip().startswith("#"):
                return line
            return pattern.sub(replace_var, line)

        return "\n".join(process_line(line) for line in content.split("\n"))
