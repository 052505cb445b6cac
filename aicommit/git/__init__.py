"""Git boundary for aicommit.

This package wraps the git executable:
- exceptions: GitError, GitNotFoundError, NotARepositoryError, NoCommitsError
- runner: _run_git_command, get_repo_root
- status: StatusEntry, get_staged_status, parse_name_status
- diff: get_staged_diff
- commit: get_last_commit_message, commit, amend
- boundary: VcsBoundary, GitBoundary
"""

# Exceptions
from aicommit.git.exceptions import (
    GitError,
    GitNotFoundError,
    NotARepositoryError,
    NoCommitsError,
)

# Runner utilities
from aicommit.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Status and diff
from aicommit.git.status import (
    StatusEntry,
    get_staged_status,
    parse_name_status,
)
from aicommit.git.diff import get_staged_diff

# Commit operations
from aicommit.git.commit import (
    amend,
    commit,
    get_last_commit_message,
)

# Boundary
from aicommit.git.boundary import GitBoundary, VcsBoundary


__all__ = [
    # Exceptions
    "GitError",
    "GitNotFoundError",
    "NotARepositoryError",
    "NoCommitsError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Status and diff
    "StatusEntry",
    "get_staged_status",
    "parse_name_status",
    "get_staged_diff",
    # Commit
    "get_last_commit_message",
    "commit",
    "amend",
    # Boundary
    "VcsBoundary",
    "GitBoundary",
]
