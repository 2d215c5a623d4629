"""Exceptions raised by the LLM layer.

- LLMError: the API call failed
- MissingAPIKeyError: no API key is configured
"""


class LLMError(Exception):
    """Raised when the language model API cannot produce a reply."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when neither the config file nor the environment holds an API key."""

    pass
