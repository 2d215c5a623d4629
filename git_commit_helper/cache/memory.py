"""In-memory message cache, used where nothing should touch the disk."""

import time
from typing import Callable, Optional

from git_commit_helper.cache.base import MessageCache
from git_commit_helper.config.constants import CACHE_DURATION


class InMemoryMessageCache(MessageCache):
    """Keeps entries in a dict with the clock time they were stored at."""

    def __init__(
        self,
        max_age: float = CACHE_DURATION,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(max_age=max_age, clock=clock)
        self.entries: dict[str, tuple[str, float]] = {}

    def _load(self, key: str) -> Optional[tuple[str, float]]:
        return self.entries.get(key)

    def put(self, key: str, text: str) -> None:
        self.entries[key] = (text, self.clock())
