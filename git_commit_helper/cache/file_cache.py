"""File-backed message cache.

Each entry is a file named after the diff hash, containing the raw message
text. Freshness is taken from the file modification time.
"""

import time
from pathlib import Path
from typing import Callable, Optional

from git_commit_helper.cache.base import MessageCache
from git_commit_helper.config.constants import CACHE_DURATION


class FileMessageCache(MessageCache):
    """Stores generated messages as files under a cache directory."""

    def __init__(
        self,
        cache_dir: Path,
        max_age: float = CACHE_DURATION,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(max_age=max_age, clock=clock)
        self.cache_dir = Path(cache_dir)

    def get_entry_file(self, key: str) -> Path:
        """Return path to the cache file for key.

        Args:
            key: SHA256 hex digest of the diff.

        Returns:
            Path to <cache_dir>/<key>.
        """
        return self.cache_dir / key

    def _load(self, key: str) -> Optional[tuple[str, float]]:
        entry_file = self.get_entry_file(key)
        if not entry_file.is_file():
            return None
        return entry_file.read_text(encoding="utf-8"), entry_file.stat().st_mtime

    def put(self, key: str, text: str) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.get_entry_file(key).write_text(text, encoding="utf-8")
