"""Message cache interface."""

import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from git_commit_helper.config.constants import CACHE_DURATION


class MessageCache(ABC):
    """Maps a diff hash to a previously generated commit message.

    Entries older than ``max_age`` seconds are treated as missing but are
    never removed.
    """

    def __init__(
        self,
        max_age: float = CACHE_DURATION,
        clock: Callable[[], float] = time.time,
    ):
        self.max_age = max_age
        self.clock = clock

    @abstractmethod
    def _load(self, key: str) -> Optional[tuple[str, float]]:
        """Return (text, stored_at) for key, or None if there is no entry."""
        pass

    @abstractmethod
    def put(self, key: str, text: str) -> None:
        """Store text under key, replacing any existing entry."""
        pass

    def _is_within_window(self, stored_at: float) -> bool:
        return self.clock() - stored_at < self.max_age

    def is_fresh(self, key: str) -> bool:
        """Check whether a non-expired entry exists for key."""
        entry = self._load(key)
        return entry is not None and self._is_within_window(entry[1])

    def get(self, key: str) -> Optional[str]:
        """Return the cached text for key, or None on a miss or stale entry."""
        entry = self._load(key)
        if entry is None:
            return None

        text, stored_at = entry
        if not self._is_within_window(stored_at):
            return None
        return text
