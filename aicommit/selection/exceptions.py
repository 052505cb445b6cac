"""Selection-related exception classes."""

from aicommit.errors import AICommitError


class InvalidTransitionError(AICommitError):
    """Raised when an action is not valid in the current state."""

    pass
