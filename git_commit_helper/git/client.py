"""Version control clients.

Contains:
- VersionControlClient: Interface for reading the staged diff and history
- GitClient: Implementation that shells out to git
"""

from abc import ABC, abstractmethod
from typing import Optional

from git_commit_helper.config.constants import RECENT_COMMITS_COUNT
from git_commit_helper.git.exceptions import GitError, NoStagedChangesError
from git_commit_helper.git.runner import run_git_command


class VersionControlClient(ABC):
    """Source of the staged diff and recent commit history."""

    @abstractmethod
    def get_staged_diff(self) -> str:
        """Return the staged diff.

        Raises:
            NoStagedChangesError: If nothing is staged.
            GitError: If the diff cannot be read.
        """
        pass

    @abstractmethod
    def get_recent_commits(self, n: int = RECENT_COMMITS_COUNT) -> str:
        """Return the full messages of the last n commits."""
        pass


class GitClient(VersionControlClient):
    """Reads the index and log of a git repository."""

    def __init__(self, cwd: Optional[str] = None):
        self.cwd = cwd

    def get_staged_diff(self) -> str:
        """Get the staged diff computed with the minimal diff algorithm.

        Returns:
            The staged diff string.

        Raises:
            NoStagedChangesError: If there are no staged changes.
            GitError: If git fails (e.g. not inside a repository).
        """
        diff = run_git_command(["diff", "--cached", "--diff-algorithm=minimal"], cwd=self.cwd)

        if not diff.strip():
            raise NoStagedChangesError(
                "No staged changes found. Stage your changes first with: git add <files>"
            )

        return diff

    def get_recent_commits(self, n: int = RECENT_COMMITS_COUNT) -> str:
        """Get the last n commit messages.

        Args:
            n: Number of commits to retrieve.

        Returns:
            The full commit messages, or an empty string when there is no history.
        """
        try:
            return run_git_command(["log", f"-{n}", "--pretty=format:%B"], cwd=self.cwd)
        except GitError:
            # No commits yet in the repo
            return ""
