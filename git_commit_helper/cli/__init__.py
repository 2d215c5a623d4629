"""CLI entry point for git-commit-helper.

This module provides the typer application. It is a single command: the
direct, interactive and configure modes are selected by flags.
"""

import typer
from typer.core import TyperCommand

from git_commit_helper.cli.main import main_command

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class HelperCommand(TyperCommand):
    """Command that exits with status 1 (not 2) on usage errors.

    Depending on the typer release, usage errors come from click or from the
    copy of click vendored inside typer, so they are matched by exit code.
    """

    def parse_args(self, ctx, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except Exception as e:
            if getattr(e, "exit_code", None) == 2:
                e.exit_code = 1
            raise


# Main application
app = typer.Typer(
    name="git-commit-helper",
    help="git-commit-helper: AI-generated conventional commit messages",
    add_completion=False,
    context_settings=CONTEXT_SETTINGS,
)

app.command(cls=HelperCommand, context_settings=CONTEXT_SETTINGS)(main_command)


def run() -> None:
    """Console script entry point."""
    app(prog_name="git-commit-helper")


__all__ = [
    "app",
    "main_command",
    "run",
    "HelperCommand",
]
