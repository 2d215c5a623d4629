"""Configuration module for git-commit-helper.

This package provides:
- constants: Application constants and defaults
- models: HelperConfig data model
- store: ConfigStore for reading and writing config.json
- exceptions: ConfigError, ConfigNotFoundError
"""

from git_commit_helper.config.constants import (
    API_KEY_ENV_VAR,
    APP_NAME,
    CACHE_DURATION,
    DEFAULT_COMMIT_TYPES,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
)
from git_commit_helper.config.exceptions import ConfigError, ConfigNotFoundError
from git_commit_helper.config.models import HelperConfig
from git_commit_helper.config.store import ConfigStore, get_config_dir


__all__ = [
    # Constants
    "API_KEY_ENV_VAR",
    "APP_NAME",
    "CACHE_DURATION",
    "DEFAULT_COMMIT_TYPES",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_MODEL",
    # Exceptions
    "ConfigError",
    "ConfigNotFoundError",
    # Models
    "HelperConfig",
    # Store
    "ConfigStore",
    "get_config_dir",
]
