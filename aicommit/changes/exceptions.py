"""Classification exception classes.

- ClassificationError: VCS output could not be turned into a ChangeSet
- NoStagedChangesError: The staged set is empty
"""

from aicommit.errors import AICommitError, PreconditionError


class ClassificationError(AICommitError):
    """Raised when VCS output is in a format the classifier does not support."""

    pass


class NoStagedChangesError(ClassificationError, PreconditionError):
    """Raised when there are no staged changes."""

    pass
