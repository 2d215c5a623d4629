"""AI-assisted Conventional Commits message generator."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("git-commit-helper")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
