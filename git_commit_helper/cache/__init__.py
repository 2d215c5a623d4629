"""Cache module for git-commit-helper.

This package provides caching utilities to prevent redundant LLM API calls:
- base: MessageCache interface (get, put, is_fresh)
- file_cache: FileMessageCache storing one file per diff hash
- memory: InMemoryMessageCache
- utils: compute_diff_hash
"""

from git_commit_helper.cache.base import MessageCache
from git_commit_helper.cache.file_cache import FileMessageCache
from git_commit_helper.cache.memory import InMemoryMessageCache
from git_commit_helper.cache.utils import compute_diff_hash


__all__ = [
    "MessageCache",
    "FileMessageCache",
    "InMemoryMessageCache",
    "compute_diff_hash",
]
