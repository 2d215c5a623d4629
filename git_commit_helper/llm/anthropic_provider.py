"""Anthropic Claude provider implementation."""

from typing import Any, Optional

from anthropic import Anthropic

from git_commit_helper.llm.base import BaseLLMProvider, LLMResult
from git_commit_helper.llm.exceptions import LLMError, MissingAPIKeyError


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int,
        client: Optional[Any] = None,
    ):
        """Initialize the Anthropic provider.

        Args:
            api_key: Anthropic API key.
            model: The model to use.
            max_tokens: Upper bound on generated tokens.
            client: Pre-built client exposing ``messages.create`` (defaults to Anthropic).
        """
        if not api_key:
            raise MissingAPIKeyError("Anthropic API key is empty.")

        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = Anthropic(api_key=self.api_key)
        return self._client

    def generate(self, prompt: str) -> LLMResult:
        """Generate a commit message using Anthropic Claude.

        The text of the first content block is returned as-is; an empty
        response yields an empty string.

        Args:
            prompt: The full user prompt.

        Returns:
            An LLMResult containing the text and token usage.

        Raises:
            LLMError: If the API call fails.
        """
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as e:
            raise LLMError(f"Anthropic API call failed: {e}")

        content = getattr(message, "content", None) or []
        text = getattr(content[0], "text", None) if content else None

        usage = getattr(message, "usage", None)

        return LLMResult(
            text=text or "",
            model=self.model,
            input_tokens=getattr(usage, "input_tokens", 0) or 0,
            output_tokens=getattr(usage, "output_tokens", 0) or 0,
        )
