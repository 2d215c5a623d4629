"""LLM provider module for git-commit-helper.

This module provides the provider interface, the Anthropic implementation and
the prompt builder.
"""

from dotenv import load_dotenv

from git_commit_helper.llm.base import BaseLLMProvider, LLMResult
from git_commit_helper.llm.exceptions import LLMError, MissingAPIKeyError
from git_commit_helper.llm.anthropic_provider import AnthropicProvider
from git_commit_helper.llm.credentials import resolve_api_key
from git_commit_helper.llm.prompts import USER_PROMPT_TEMPLATE, build_prompt

# Load environment variables from .env file
load_dotenv()


def get_provider(api_key: str, model: str, max_tokens: int) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        api_key: The API key to authenticate with.
        model: The model to use.
        max_tokens: Upper bound on generated tokens.

    Returns:
        An AnthropicProvider.
    """
    return AnthropicProvider(api_key=api_key, model=model, max_tokens=max_tokens)


__all__ = [
    "AnthropicProvider",
    "BaseLLMProvider",
    "LLMError",
    "LLMResult",
    "MissingAPIKeyError",
    "USER_PROMPT_TEMPLATE",
    "build_prompt",
    "get_provider",
    "resolve_api_key",
]
