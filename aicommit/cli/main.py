"""Main CLI command for generating and committing a message."""

from typing import Optional

import typer

from aicommit import __version__
from aicommit.changes.exceptions import ClassificationError, NoStagedChangesError
from aicommit.changes.models import CommitMode
from aicommit.cli.utils import TerminalInputSource, describe_error, echo_status
from aicommit.config import load_config
from aicommit.errors import PreconditionError
from aicommit.git.boundary import GitBoundary
from aicommit.git.exceptions import GitError
from aicommit.llm import get_provider_for_settings
from aicommit.llm.exceptions import LLMError
from aicommit.pipeline import Outcome, run_pipeline


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ai-commit {__version__}")
        raise typer.Exit()


def main_command(
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Choose between several suggestions before committing",
    ),
    amend: bool = typer.Option(
        False,
        "--amend",
        "-a",
        help="Replace the message of the last commit (and add staged changes to it)",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        help="LLM provider (google, anthropic, openai)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model id to use instead of the provider default",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show the prompt and the raw candidates returned by the model",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a conventional commit message for the staged changes and commit it."""
    mode = CommitMode.AMEND if amend else CommitMode.NEW

    try:
        settings = load_config(provider=provider, model=model)
        llm = get_provider_for_settings(settings)

        # The API key is checked before git is run
        llm.get_api_key()
        vcs = GitBoundary.discover()

        result = run_pipeline(
            vcs,
            llm,
            settings,
            mode=mode,
            interactive=interactive,
            input_source=TerminalInputSource() if interactive else None,
            echo=echo_status,
            debug=debug,
        )

    except NoStagedChangesError:
        typer.echo("Nothing to commit: no changes staged (use 'git add <file>...').", err=True)
        raise typer.Exit(1)
    except PreconditionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except ClassificationError as e:
        typer.echo(f"Unsupported git output: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(describe_error(e), err=True)
        raise typer.Exit(1)

    if result.outcome == Outcome.CANCELLED:
        typer.echo("Commit cancelled.", err=True)
        return

    typer.echo(f"Committed: {result.message}", err=True)
    if result.output:
        typer.echo(result.output)
