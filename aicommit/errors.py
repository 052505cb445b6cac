"""Root exception classes shared by every aicommit package.

Contains:
- AICommitError: Base exception for all aicommit errors
- PreconditionError: Fatal startup conditions (nothing staged, missing API key, ...)
"""


class AICommitError(Exception):
    """Base exception for all aicommit errors."""

    pass


class PreconditionError(AICommitError):
    """Raised when a run cannot start at all.

    Precondition failures are never retried; the CLI reports them and exits.
    """

    pass
