"""Tests for git_commit_helper.cache module."""

import os

import pytest

from git_commit_helper.cache import (
    FileMessageCache,
    InMemoryMessageCache,
    compute_diff_hash,
)
from git_commit_helper.config import CACHE_DURATION


class TestComputeDiffHash:
    """Tests for compute_diff_hash function."""

    def test_computes_sha256(self):
        """Test that a SHA256 hex digest is returned."""
        result = compute_diff_hash("test diff")
        assert isinstance(result, str)
        assert len(result) == 64
        int(result, 16)

    def test_known_digest(self):
        assert compute_diff_hash("") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_same_diff_same_hash(self):
        assert compute_diff_hash("diff A") == compute_diff_hash("diff A")

    def test_different_diff_different_hash(self):
        assert compute_diff_hash("diff A") != compute_diff_hash("diff B")


class TestFileMessageCache:
    """Tests for FileMessageCache."""

    def test_miss_when_empty(self, temp_dir):
        cache = FileMessageCache(temp_dir)
        assert cache.get("abc") is None
        assert cache.is_fresh("abc") is False

    def test_put_then_get(self, temp_dir):
        """Test that a fresh entry is returned verbatim."""
        cache = FileMessageCache(temp_dir)
        message = "feat(api): add export endpoint\n\n- Add CSV writer"

        cache.put("abc", message)

        assert cache.get("abc") == message
        assert cache.is_fresh("abc") is True

    def test_entry_file_named_after_key(self, temp_dir):
        cache = FileMessageCache(temp_dir)
        key = compute_diff_hash("some diff")

        cache.put(key, "fix: something")

        assert (temp_dir / key).read_text() == "fix: something"

    def test_creates_cache_dir(self, temp_dir):
        cache = FileMessageCache(temp_dir / "nested" / "cache")
        cache.put("abc", "text")
        assert (temp_dir / "nested" / "cache" / "abc").exists()

    def test_stale_entry_is_miss_but_kept(self, temp_dir):
        """Test that entries past the window are ignored, not deleted."""
        cache = FileMessageCache(temp_dir)
        cache.put("abc", "old message")

        entry_file = cache.get_entry_file("abc")
        old = entry_file.stat().st_mtime - CACHE_DURATION - 10
        os.utime(entry_file, (old, old))

        assert cache.get("abc") is None
        assert cache.is_fresh("abc") is False
        assert entry_file.exists()

    def test_freshness_uses_clock(self, temp_dir, fake_clock):
        cache = FileMessageCache(temp_dir, clock=fake_clock)
        cache.put("abc", "message")
        mtime = cache.get_entry_file("abc").stat().st_mtime

        fake_clock.now = mtime + CACHE_DURATION - 1
        assert cache.get("abc") == "message"

        fake_clock.now = mtime + CACHE_DURATION
        assert cache.get("abc") is None

    def test_put_overwrites(self, temp_dir):
        cache = FileMessageCache(temp_dir)
        cache.put("abc", "first")
        cache.put("abc", "second")
        assert cache.get("abc") == "second"


class TestInMemoryMessageCache:
    """Tests for InMemoryMessageCache."""

    def test_put_then_get(self, fake_clock):
        cache = InMemoryMessageCache(clock=fake_clock)
        cache.put("abc", "message")
        assert cache.get("abc") == "message"
        assert cache.is_fresh("abc") is True

    def test_expires_after_window(self, fake_clock):
        cache = InMemoryMessageCache(clock=fake_clock)
        cache.put("abc", "message")

        fake_clock.advance(CACHE_DURATION)

        assert cache.get("abc") is None
        assert cache.is_fresh("abc") is False
        assert "abc" in cache.entries

    def test_custom_max_age(self, fake_clock):
        cache = InMemoryMessageCache(max_age=10, clock=fake_clock)
        cache.put("abc", "message")

        fake_clock.advance(9)
        assert cache.get("abc") == "message"

        fake_clock.advance(1)
        assert cache.get("abc") is None

    @pytest.mark.parametrize("text", ["", "   ", "line\n"])
    def test_returns_text_unchanged(self, fake_clock, text):
        cache = InMemoryMessageCache(clock=fake_clock)
        cache.put("abc", text)
        assert cache.get("abc") == text
