"""Git command runner."""

import subprocess
from typing import Optional

from git_commit_helper.git.exceptions import GitError


def run_git_command(args: list[str], cwd: Optional[str] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Working directory for the command (defaults to the current one).

    Returns:
        The stdout of the git command, without trailing whitespace.

    Raises:
        GitError: If the command fails or git is missing.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            cwd=cwd,
        )
        return result.stdout.rstrip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
