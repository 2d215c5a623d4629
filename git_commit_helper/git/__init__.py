"""Git access for git-commit-helper.

This package provides:
- exceptions: GitError, NoStagedChangesError
- runner: run_git_command
- client: VersionControlClient, GitClient
"""

from git_commit_helper.git.exceptions import (
    GitError,
    NoStagedChangesError,
)
from git_commit_helper.git.runner import run_git_command
from git_commit_helper.git.client import GitClient, VersionControlClient


__all__ = [
    "GitError",
    "NoStagedChangesError",
    "run_git_command",
    "GitClient",
    "VersionControlClient",
]
