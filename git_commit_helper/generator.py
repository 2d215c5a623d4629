"""Commit message generation.

Ties together the configuration, the message cache, the version control
client and the LLM provider.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from git_commit_helper.cache import MessageCache, compute_diff_hash
from git_commit_helper.config import HelperConfig
from git_commit_helper.git import VersionControlClient
from git_commit_helper.llm import BaseLLMProvider, build_prompt, get_provider, resolve_api_key


@dataclass
class GenerationResult:
    """Outcome of a generate() call."""

    message: str
    cache_key: str
    from_cache: bool


class CommitMessageGenerator:
    """Generates commit messages for a staged diff, reusing cached ones."""

    def __init__(
        self,
        config: HelperConfig,
        cache: MessageCache,
        vcs: VersionControlClient,
        provider: Optional[BaseLLMProvider] = None,
    ):
        """Initialize the generator.

        Args:
            config: Loaded configuration (model, max_tokens, api key).
            cache: Message cache keyed by diff hash.
            vcs: Source of recent commit history.
            provider: LLM provider. Built from the config when omitted.
        """
        self.config = config
        self.cache = cache
        self.vcs = vcs
        self.provider = provider

    def build_prompt(self, commit_type: str, scope: Optional[str], diff: str) -> str:
        """Build the prompt for the given type, scope and diff."""
        return build_prompt(
            commit_type=commit_type,
            scope=scope,
            recent_commits=self.vcs.get_recent_commits(),
            diff=diff,
        )

    def generate(
        self,
        diff: str,
        commit_type: str,
        scope: Optional[str] = None,
        regenerate: bool = False,
        on_generate: Optional[Callable[[], None]] = None,
    ) -> GenerationResult:
        """Generate (or reuse) a commit message for the staged diff.

        Args:
            diff: The staged diff.
            commit_type: Conventional commit type.
            scope: Optional commit scope.
            regenerate: Skip the cache lookup and always call the API.
            on_generate: Called right before the API request on a cache miss.

        Returns:
            A GenerationResult with the message and whether it came from cache.

        Raises:
            MissingAPIKeyError: If no API key is configured.
            LLMError: If the API call fails.
        """
        # The key is required even for cache hits
        api_key = resolve_api_key(self.config)

        cache_key = compute_diff_hash(diff)

        if not regenerate:
            cached = self.cache.get(cache_key)
            if cached is not None:
                return GenerationResult(message=cached, cache_key=cache_key, from_cache=True)

        provider = self.provider or get_provider(
            api_key=api_key,
            model=self.config.model,
            max_tokens=self.config.max_tokens,
        )

        prompt = self.build_prompt(commit_type, scope, diff)
        if on_generate is not None:
            on_generate()
        result = provider.generate(prompt)

        self.cache.put(cache_key, result.text)

        return GenerationResult(message=result.text, cache_key=cache_key, from_cache=False)
