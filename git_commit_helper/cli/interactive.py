"""Interactive prompts for choosing the commit type and scope."""

from typing import Optional

import typer


def select_commit_type(commit_types: list[str]) -> str:
    """Show a numbered menu of commit types and return the chosen one.

    Keeps asking until a number within the menu is entered.

    Args:
        commit_types: Ordered commit type labels from the config.

    Returns:
        The selected commit type.
    """
    typer.echo("Select commit type:", err=True)
    for i, commit_type in enumerate(commit_types, 1):
        typer.echo(f"  {i}) {commit_type}", err=True)

    while True:
        choice = typer.prompt(f"Select a type (1-{len(commit_types)})", type=int, err=True)
        if 1 <= choice <= len(commit_types):
            return commit_types[choice - 1]
        typer.echo("Invalid choice.", err=True)


def prompt_scope() -> Optional[str]:
    """Ask for an optional scope.

    Returns:
        The stripped scope, or None if the user pressed enter.
    """
    scope = typer.prompt(
        "Enter scope (optional, press enter to skip)",
        default="",
        show_default=False,
        err=True,
    )
    return scope.strip() or None
