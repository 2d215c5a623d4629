"""Base classes shared by LLM providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate(self, prompt: str) -> LLMResult:
        """Send the prompt and return the generated text.

        Args:
            prompt: The full user prompt.

        Returns:
            An LLMResult containing the text and token usage.

        Raises:
            LLMError: If the API call fails.
        """
        pass
