"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- GitNotFoundError: Raised when the git executable is missing
- NotARepositoryError: Raised outside of a git repository
- NoCommitsError: Raised when a previous commit is required but HEAD is unborn
"""

from aicommit.errors import AICommitError, PreconditionError


class GitError(AICommitError):
    """Custom exception for git-related errors."""

    pass


class GitNotFoundError(GitError, PreconditionError):
    """Raised when git is not installed or not in PATH."""

    pass


class NotARepositoryError(GitError, PreconditionError):
    """Raised when the working directory is not inside a git repository."""

    pass


class NoCommitsError(GitError, PreconditionError):
    """Raised when amending in a repository that has no commits yet."""

    pass
