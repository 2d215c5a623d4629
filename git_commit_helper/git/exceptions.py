"""Exceptions raised while reading from git.

- GitError: git failed or is not available
- NoStagedChangesError: the index holds nothing to commit
"""


class GitError(Exception):
    """Raised when a git command fails or git cannot be run."""

    pass


class NoStagedChangesError(GitError):
    """Raised when the staged diff is empty."""

    pass
