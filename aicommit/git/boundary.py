"""VCS boundary interface.

The rest of the pipeline only talks to version control through VcsBoundary,
so classification and the selection flow can run against canned output.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from aicommit.git.commit import amend as _amend
from aicommit.git.commit import commit as _commit
from aicommit.git.commit import get_last_commit_message as _get_last_commit_message
from aicommit.git.diff import get_staged_diff
from aicommit.git.runner import get_repo_root
from aicommit.git.status import StatusEntry, get_staged_status


class VcsBoundary(ABC):
    """Operations the pipeline needs from version control."""

    @abstractmethod
    def get_staged_status(self) -> list[StatusEntry]:
        """Return staged paths in a stable order."""

    @abstractmethod
    def get_staged_diff(self) -> str:
        """Return the staged changes as a unified diff."""

    @abstractmethod
    def get_last_commit_message(self) -> str:
        """Return the message of the most recent commit."""

    @abstractmethod
    def commit(self, message: str) -> str:
        """Create a commit from the index."""

    @abstractmethod
    def amend(self, message: str) -> str:
        """Replace the most recent commit."""


class GitBoundary(VcsBoundary):
    """VcsBoundary backed by the git executable."""

    def __init__(self, repo_root: Path):
        self.repo_root = repo_root

    @classmethod
    def discover(cls, cwd: Path | None = None) -> "GitBoundary":
        """Locate the repository containing cwd.

        Raises:
            GitNotFoundError: If git is not installed.
            NotARepositoryError: If cwd is not inside a repository.
        """
        return cls(get_repo_root(cwd))

    def get_staged_status(self) -> list[StatusEntry]:
        return get_staged_status(cwd=self.repo_root)

    def get_staged_diff(self) -> str:
        return get_staged_diff(cwd=self.repo_root)

    def get_last_commit_message(self) -> str:
        return _get_last_commit_message(cwd=self.repo_root)

    def commit(self, message: str) -> str:
        return _commit(message, cwd=self.repo_root)

    def amend(self, message: str) -> str:
        return _amend(message, cwd=self.repo_root)
