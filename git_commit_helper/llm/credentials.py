"""API key lookup for the Anthropic provider."""

import os

from git_commit_helper.config.constants import API_KEY_ENV_VAR, APP_NAME
from git_commit_helper.config.models import HelperConfig
from git_commit_helper.llm.exceptions import MissingAPIKeyError


def resolve_api_key(config: HelperConfig) -> str:
    """Get the API key from the config, falling back to the environment.

    Args:
        config: The loaded configuration.

    Returns:
        The API key string.

    Raises:
        MissingAPIKeyError: If no key is configured anywhere.
    """
    api_key = config.api_key.strip()
    if api_key:
        return api_key

    api_key = os.getenv(API_KEY_ENV_VAR, "").strip()
    if api_key:
        return api_key

    raise MissingAPIKeyError(
        f"API key not configured. Set it using:\n"
        f"  1. Run: {APP_NAME} --configure\n"
        f"  2. Environment variable: export {API_KEY_ENV_VAR}=your_key_here"
    )
