"""Configuration-related exception classes.

Contains:
- ConfigError: Base exception for configuration errors
- ConfigNotFoundError: Raised when the config file does not exist
"""


class ConfigError(Exception):
    """Raised when the configuration cannot be read or written."""

    pass


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is missing."""

    pass
