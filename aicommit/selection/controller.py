"""SelectionController: drive the selection states to a terminal state."""

from typing import Callable, Optional, Protocol, Union

from aicommit.errors import AICommitError
from aicommit.selection.exceptions import InvalidTransitionError
from aicommit.selection.states import (
    Action,
    AwaitingRetry,
    Cancelled,
    Loading,
    Presenting,
    Regenerating,
    SelectionState,
    is_terminal,
    on_batch_loaded,
    on_load_failed,
    transition,
)
from aicommit.suggestions.models import SuggestionBatch


class InputSource(Protocol):
    """Where interactive actions come from (a terminal, or a script in tests)."""

    def choose(self, state: Union[Presenting, AwaitingRetry]) -> Action:
        """Show `state` to the user and return the chosen action."""
        ...


class SelectionController:
    """Run the selection flow until it commits, cancels or fails.

    Args:
        load_batch: Runs one AI round. Called once per Loading state.
        input_source: Interactive input, or None for auto mode where the
            first suggestion is confirmed as soon as it is presented.
    """

    def __init__(
        self,
        load_batch: Callable[[], SuggestionBatch],
        input_source: Optional[InputSource] = None,
    ):
        self.load_batch = load_batch
        self.input_source = input_source
        self.visited: list[SelectionState] = []

    @property
    def interactive(self) -> bool:
        return self.input_source is not None

    def run(self) -> SelectionState:
        """Run from Loading to a terminal state and return it."""
        state: SelectionState = Loading()
        self.visited = [state]
        while not is_terminal(state):
            state = self.step(state)
            self.visited.append(state)
        return state

    def step(self, state: SelectionState) -> SelectionState:
        if isinstance(state, Loading):
            return self._load()
        if isinstance(state, Regenerating):
            return Loading()
        if isinstance(state, Presenting):
            if not self.interactive:
                return transition(state, Action.CONFIRM)
            return transition(state, self._read_action(state))
        if isinstance(state, AwaitingRetry):
            return transition(state, self._read_action(state))
        raise InvalidTransitionError(f"{type(state).__name__} is terminal")

    def _load(self) -> SelectionState:
        try:
            batch = self.load_batch()
        except KeyboardInterrupt:
            return Cancelled()
        except AICommitError as e:
            return on_load_failed(e, self.interactive)
        return on_batch_loaded(batch)

    def _read_action(self, state: Union[Presenting, AwaitingRetry]) -> Action:
        try:
            return self.input_source.choose(state)
        except (KeyboardInterrupt, EOFError):
            return Action.CANCEL
