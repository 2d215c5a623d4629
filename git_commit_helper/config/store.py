"""Configuration file management for git-commit-helper.

Handles the user-level JSON configuration stored in the config directory:
- config.json: API key, model, token budget and commit type labels
- cache/: generated messages keyed by diff hash
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from git_commit_helper.config.constants import (
    APP_NAME,
    CACHE_DIR_NAME,
    CONFIG_FILE_NAME,
)
from git_commit_helper.config.exceptions import ConfigError, ConfigNotFoundError
from git_commit_helper.config.models import HelperConfig


def get_config_dir() -> Path:
    """Get the configuration directory.

    Uses $XDG_CONFIG_HOME when it is set, otherwise ~/.config.

    Returns:
        Path to the git-commit-helper configuration directory.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / APP_NAME
    return Path.home() / ".config" / APP_NAME


class ConfigStore:
    """Reads and writes config.json inside a configuration directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the store.

        Args:
            config_dir: Directory holding config.json. Defaults to get_config_dir().
        """
        self.config_dir = Path(config_dir) if config_dir else get_config_dir()

    @property
    def config_file(self) -> Path:
        """Path to config.json."""
        return self.config_dir / CONFIG_FILE_NAME

    @property
    def cache_dir(self) -> Path:
        """Path to the message cache directory."""
        return self.config_dir / CACHE_DIR_NAME

    def exists(self) -> bool:
        return self.config_file.exists()

    def ensure_default(self) -> None:
        """Create the config and cache directories and a default config.json."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.cache_dir.mkdir(exist_ok=True)

        if self.config_file.exists():
            return

        self._write(HelperConfig().model_dump())

    def load(self) -> HelperConfig:
        """Load and validate config.json.

        Returns:
            The validated HelperConfig.

        Raises:
            ConfigNotFoundError: If config.json does not exist.
            ConfigError: If the file is not valid JSON or fails validation.
        """
        data = self._read()
        try:
            return HelperConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_file}: {e}")

    def load_api_key(self) -> str:
        """Return the api_key field of the configuration."""
        return self.load().api_key

    def configure(self, api_key: str) -> None:
        """Store a new API key, leaving every other field untouched.

        Args:
            api_key: The Anthropic API key to save.

        Raises:
            ConfigNotFoundError: If config.json does not exist.
            ConfigError: If the existing file cannot be read or written.
        """
        data = self._read()
        data["api_key"] = api_key
        self._write(data)

    def _read(self) -> Dict[str, Any]:
        if not self.config_file.exists():
            raise ConfigNotFoundError(f"Configuration file not found: {self.config_file}")

        try:
            with open(self.config_file, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Failed to parse {self.config_file}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to read {self.config_file}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a JSON object in {self.config_file}")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        # Write to a sibling file and swap it in so config.json is never half-written
        tmp_file = self.config_file.with_suffix(".json.tmp")
        try:
            with open(tmp_file, "w") as f:
                json.dump(data, f, indent=4)
                f.write("\n")
            os.replace(tmp_file, self.config_file)
        except OSError as e:
            raise ConfigError(f"Failed to save config to {self.config_file}: {e}")
