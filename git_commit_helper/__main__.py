"""Allow running as ``python -m git_commit_helper``."""

from git_commit_helper.cli import run

if __name__ == "__main__":
    run()
