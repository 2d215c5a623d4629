"""Main CLI command for generating commit messages."""

from typing import Optional

import typer

from git_commit_helper import __version__
from git_commit_helper.cache import FileMessageCache
from git_commit_helper.cli.configure import configure_api_key
from git_commit_helper.cli.interactive import prompt_scope, select_commit_type
from git_commit_helper.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigStore,
    get_config_dir,
)
from git_commit_helper.generator import CommitMessageGenerator
from git_commit_helper.git import GitClient, GitError, NoStagedChangesError
from git_commit_helper.llm import LLMError, MissingAPIKeyError


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-commit-helper {__version__}")
        raise typer.Exit()


def main_command(
    commit_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Specify commit type (feat, fix, etc.)",
    ),
    scope: Optional[str] = typer.Option(
        None,
        "--scope",
        "-s",
        help="Specify commit scope",
    ),
    configure: bool = typer.Option(
        False,
        "--configure",
        help="Configure API key",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        help="Run in interactive mode (default)",
    ),
    regenerate: bool = typer.Option(
        False,
        "--regenerate",
        "-r",
        help="Ignore the cached message and call the API again",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a conventional commit message for the staged changes."""
    store = ConfigStore(get_config_dir())

    try:
        store.ensure_default()
    except (ConfigError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if configure:
        configure_api_key(store)
        return

    try:
        config = store.load()
    except ConfigNotFoundError:
        typer.echo("Error: Configuration file not found", err=True)
        raise typer.Exit(1)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    # Default to interactive mode if no type specified
    if interactive or not commit_type:
        commit_type = select_commit_type(config.commit_types)
        scope = prompt_scope()

    vcs = GitClient()
    generator = CommitMessageGenerator(
        config=config,
        cache=FileMessageCache(store.cache_dir),
        vcs=vcs,
    )

    try:
        diff = vcs.get_staged_diff()

        result = generator.generate(
            diff,
            commit_type,
            scope,
            regenerate=regenerate,
            on_generate=lambda: typer.echo("Generating commit message...", err=True),
        )
        if result.from_cache:
            typer.echo("Using cached commit message...", err=True)

    except NoStagedChangesError:
        typer.echo("Error: No staged changes found", err=True)
        typer.echo("Stage your changes first with: git add <file>...", err=True)
        raise typer.Exit(1)
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(result.message)
