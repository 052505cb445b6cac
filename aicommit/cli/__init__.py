"""CLI entry point for ai-commit."""

import typer

from aicommit.cli.main import main_command, version_callback
from aicommit.cli.utils import (
    PRESENTING_KEYS,
    RETRY_KEYS,
    TerminalInputSource,
    describe_error,
    parse_choice,
    render_batch,
)

app = typer.Typer(
    name="ai-commit",
    help="ai-commit: AI-generated conventional commit messages for staged changes",
    add_completion=False,
)

app.command()(main_command)


__all__ = [
    "app",
    "main_command",
    "version_callback",
    "PRESENTING_KEYS",
    "RETRY_KEYS",
    "TerminalInputSource",
    "describe_error",
    "parse_choice",
    "render_batch",
]
