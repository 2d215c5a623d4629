"""Cache utility functions."""

import hashlib


def compute_diff_hash(diff: str) -> str:
    """Compute SHA256 hash of the staged diff.

    Args:
        diff: The staged diff text.

    Returns:
        SHA256 hex digest of the diff, used as the cache key.
    """
    return hashlib.sha256(diff.encode("utf-8")).hexdigest()
