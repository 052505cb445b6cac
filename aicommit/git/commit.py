"""Commit history and commit creation.

Contains:
- get_last_commit_message: Read the message of HEAD
- commit: Create a commit from the index
- amend: Replace HEAD with the index and a new message
"""

from pathlib import Path

from aicommit.git.exceptions import GitError, GitNotFoundError, NoCommitsError
from aicommit.git.runner import _run_git_command


def get_last_commit_message(cwd: Path | None = None) -> str:
    """Get the full message of the most recent commit.

    Returns:
        The commit message with surrounding whitespace removed.

    Raises:
        NoCommitsError: If the repository has no commits yet.
    """
    try:
        _run_git_command(["rev-parse", "--verify", "--quiet", "HEAD"], cwd=cwd)
    except GitNotFoundError:
        raise
    except GitError:
        raise NoCommitsError("Cannot amend: the repository has no commits yet.")
    return _run_git_command(["log", "-1", "--pretty=%B"], cwd=cwd)


def commit(message: str, cwd: Path | None = None) -> str:
    """Commit the staged changes with the given message.

    Returns:
        git's output for the new commit.

    Raises:
        GitError: If the message is empty or git fails.
    """
    if not message.strip():
        raise GitError("Commit message cannot be empty.")
    return _run_git_command(["commit", "-m", message], cwd=cwd)


def amend(message: str, cwd: Path | None = None) -> str:
    """Amend the last commit with the staged changes and a new message.

    Returns:
        git's output for the amended commit.

    Raises:
        GitError: If the message is empty or git fails.
    """
    if not message.strip():
        raise GitError("Commit message for amend cannot be empty.")
    return _run_git_command(["commit", "--amend", "-m", message], cwd=cwd)
