"""CLI action for storing the API key."""

import typer

from git_commit_helper.config import ConfigError, ConfigStore


def configure_api_key(store: ConfigStore) -> None:
    """Prompt for the Anthropic API key and save it to config.json."""
    api_key = typer.prompt("Enter your Anthropic API key", hide_input=True, err=True)

    try:
        store.configure(api_key.strip())
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("API key configured successfully!")
