"""States, actions and transitions of the suggestion selection flow.

Contains:
- Loading, Presenting, Regenerating, AwaitingRetry: Non-terminal states
- Committed, Cancelled, Failed: Terminal states
- Action: User inputs accepted while presenting
- transition: Pure next-state function for user actions
- on_batch_loaded, on_load_failed: Next state after an AI round
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from aicommit.errors import PreconditionError
from aicommit.llm.exceptions import LLMError
from aicommit.selection.exceptions import InvalidTransitionError
from aicommit.suggestions.models import Suggestion, SuggestionBatch


@dataclass(frozen=True)
class Loading:
    """An AI round is in progress."""


@dataclass(frozen=True)
class Presenting:
    """A batch is shown with the cursor on one suggestion."""

    batch: SuggestionBatch
    cursor: int = 0

    def __post_init__(self):
        if not 0 <= self.cursor < len(self.batch):
            raise InvalidTransitionError(
                f"Cursor {self.cursor} is outside a batch of {len(self.batch)}"
            )

    @property
    def current(self) -> Suggestion:
        return self.batch[self.cursor]


@dataclass(frozen=True)
class Regenerating:
    """The user asked for a new batch; `discarded` will not be shown again."""

    discarded: SuggestionBatch


@dataclass(frozen=True)
class AwaitingRetry:
    """An interactive AI round failed; the user may regenerate or give up."""

    error: LLMError


@dataclass(frozen=True)
class Committed:
    message: str


@dataclass(frozen=True)
class Cancelled:
    pass


@dataclass(frozen=True)
class Failed:
    error: Exception


SelectionState = Union[Loading, Presenting, Regenerating, AwaitingRetry, Committed, Cancelled, Failed]

TERMINAL_STATES = (Committed, Cancelled, Failed)


class Action(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    CONFIRM = "confirm"
    REGENERATE = "regenerate"
    CANCEL = "cancel"


def is_terminal(state: SelectionState) -> bool:
    return isinstance(state, TERMINAL_STATES)


def transition(state: SelectionState, action: Action) -> SelectionState:
    """Compute the state that follows a user action.

    Args:
        state: Presenting or AwaitingRetry.
        action: The user's input.

    Returns:
        The next state. The input state is never modified.

    Raises:
        InvalidTransitionError: If the state does not accept user input.
    """
    if isinstance(state, Presenting):
        size = len(state.batch)
        if action == Action.NEXT:
            return Presenting(state.batch, (state.cursor + 1) % size)
        if action == Action.PREVIOUS:
            return Presenting(state.batch, (state.cursor - 1) % size)
        if action == Action.CONFIRM:
            return Committed(state.current.message)
        if action == Action.REGENERATE:
            return Regenerating(state.batch)
        if action == Action.CANCEL:
            return Cancelled()

    elif isinstance(state, AwaitingRetry):
        if action == Action.REGENERATE:
            return Loading()
        if action == Action.CANCEL:
            return Failed(state.error)
        # Nothing to move or confirm without a batch
        return state

    raise InvalidTransitionError(f"{type(state).__name__} does not accept {action.name}")


def on_batch_loaded(batch: SuggestionBatch) -> Presenting:
    """A finished round always starts at the first suggestion."""
    return Presenting(batch, 0)


def on_load_failed(error: Exception, interactive: bool) -> SelectionState:
    """Next state after a failed round.

    Only AI failures in interactive mode can be retried, and only by the user.
    """
    if interactive and isinstance(error, LLMError) and not isinstance(error, PreconditionError):
        return AwaitingRetry(error)
    return Failed(error)
