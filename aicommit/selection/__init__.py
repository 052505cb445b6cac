"""Suggestion selection for aicommit.

- states: selection states, Action, transition
- controller: SelectionController, InputSource
"""

from aicommit.selection.exceptions import InvalidTransitionError
from aicommit.selection.states import (
    TERMINAL_STATES,
    Action,
    AwaitingRetry,
    Cancelled,
    Committed,
    Failed,
    Loading,
    Presenting,
    Regenerating,
    SelectionState,
    is_terminal,
    on_batch_loaded,
    on_load_failed,
    transition,
)
from aicommit.selection.controller import InputSource, SelectionController


__all__ = [
    "InvalidTransitionError",
    "TERMINAL_STATES",
    "Action",
    "AwaitingRetry",
    "Cancelled",
    "Committed",
    "Failed",
    "Loading",
    "Presenting",
    "Regenerating",
    "SelectionState",
    "is_terminal",
    "on_batch_loaded",
    "on_load_failed",
    "transition",
    "InputSource",
    "SelectionController",
]
