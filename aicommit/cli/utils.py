"""Shared utility functions for the CLI."""

from typing import Optional, Union

import typer

from aicommit.selection.states import Action, AwaitingRetry, Presenting

# Keys accepted while a batch is presented; "" is a bare Enter
PRESENTING_KEYS = {
    "": Action.CONFIRM,
    "y": Action.CONFIRM,
    "n": Action.NEXT,
    "p": Action.PREVIOUS,
    "r": Action.REGENERATE,
    "q": Action.CANCEL,
}

RETRY_KEYS = {
    "r": Action.REGENERATE,
    "q": Action.CANCEL,
}

PRESENTING_HINT = "[Enter/y] commit  [n] next  [p] previous  [r] regenerate  [q] quit"
RETRY_HINT = "[r] regenerate  [q] quit"


def echo_status(line: str) -> None:
    """Print a progress or debug line to stderr."""
    typer.echo(line, err=True)


def describe_error(error: Exception) -> str:
    """One-line description of an AI error, including its kind."""
    kind = getattr(error, "kind", None)
    if kind is not None:
        return f"LLM error ({kind.value}): {error}"
    return f"LLM error: {error}"


def render_batch(state: Presenting) -> str:
    """Render the suggestions with a marker on the one under the cursor."""
    lines = []
    for index, suggestion in enumerate(state.batch):
        marker = ">" if index == state.cursor else " "
        lines.append(f"{marker} {index + 1}. {suggestion.message}")
    return "\n".join(lines)


def parse_choice(raw: str, keys: dict[str, Action]) -> Optional[Action]:
    """Map a typed answer to an Action, or None if it is not recognized."""
    return keys.get(raw.strip().lower())


class TerminalInputSource:
    """Read selection actions from the terminal with typer.prompt.

    Ctrl-C and end of input are reported as CANCEL.
    """

    def choose(self, state: Union[Presenting, AwaitingRetry]) -> Action:
        if isinstance(state, Presenting):
            typer.echo("")
            typer.echo(render_batch(state))
            return self._ask(PRESENTING_HINT, PRESENTING_KEYS)

        typer.echo(describe_error(state.error), err=True)
        return self._ask(RETRY_HINT, RETRY_KEYS)

    def _ask(self, hint: str, keys: dict[str, Action]) -> Action:
        while True:
            try:
                raw = typer.prompt(hint, default="", show_default=False)
            except typer.Abort:
                return Action.CANCEL
            action = parse_choice(raw, keys)
            if action is not None:
                return action
            typer.echo(f"Unknown choice: {raw!r}", err=True)
