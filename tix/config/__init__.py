"""Configuration for tix.

This package provides type-safe configuration management using Pydantic.

Key Components:
    - TixSettings: Repository list with YAML loading support
    - RepositoryConfig: A single repository and its issue host
    - WorktreeConfig: Worktree layout for a repository
    - HostCredentials: Issue host tokens read from the environment

Example:
    >>> from tix.config import TixSettings
    >>> settings = TixSettings.from_yaml("~/.tix.yml")
    >>> settings.repository_names()
    ['api', 'infra']
"""

from tix.config.credentials import HostCredentials
from tix.config.settings import DEFAULT_CONFIG_PATH, RepositoryConfig, TixSettings, WorktreeConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "HostCredentials",
    "RepositoryConfig",
    "TixSettings",
    "WorktreeConfig",
]
