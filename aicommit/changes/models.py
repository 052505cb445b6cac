"""Data models for staged changes.

Contains:
- FileStatus, FileKind, LineMarker, CommitMode: enumerations
- HunkRange, Hunk: one block of a text diff
- FileChange: one staged path
- ChangeSet: everything handed to prompt construction
- CommitContext: a ChangeSet plus the commit mode
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FileStatus(Enum):
    """Staged status of a path."""

    ADDED = "Added"
    MODIFIED = "Modified"
    DELETED = "Deleted"
    RENAMED = "Renamed"
    COPIED = "Copied"

    @property
    def is_move(self) -> bool:
        return self in (FileStatus.RENAMED, FileStatus.COPIED)


class FileKind(Enum):
    TEXT = "Text"
    BINARY = "Binary"


class LineMarker(Enum):
    """Role of a line inside a hunk, keyed by its diff prefix."""

    CONTEXT = " "
    ADDED = "+"
    REMOVED = "-"


class CommitMode(Enum):
    NEW = "new"
    AMEND = "amend"


@dataclass(frozen=True)
class HunkRange:
    """A (start, length) pair from a hunk header."""

    start: int
    length: int

    def __str__(self) -> str:
        return f"{self.start},{self.length}"


@dataclass(frozen=True)
class Hunk:
    """A contiguous block of changed lines with its surrounding context."""

    old_range: HunkRange
    new_range: HunkRange
    lines: tuple[tuple[LineMarker, str], ...]

    @property
    def header(self) -> str:
        return f"@@ -{self.old_range} +{self.new_range} @@"

    def count(self, marker: LineMarker) -> int:
        return sum(1 for m, _ in self.lines if m is marker)


@dataclass(frozen=True)
class FileChange:
    """One staged path.

    previous_path is set exactly when the status is Renamed or Copied.
    text_hunks is empty for binary files and for changes without content
    (pure moves, mode changes).
    """

    path: str
    status: FileStatus
    kind: FileKind = FileKind.TEXT
    previous_path: Optional[str] = None
    text_hunks: tuple[Hunk, ...] = ()

    def __post_init__(self):
        if self.status.is_move != (self.previous_path is not None):
            raise ValueError(
                f"previous_path must be set iff status is Renamed or Copied "
                f"(path={self.path!r}, status={self.status.value})"
            )
        if self.kind is FileKind.BINARY and self.text_hunks:
            raise ValueError(f"Binary file {self.path!r} cannot carry text hunks")

    @property
    def display_path(self) -> str:
        if self.previous_path is not None:
            return f"{self.previous_path} -> {self.path}"
        return self.path


@dataclass(frozen=True)
class ChangeSet:
    """The staged changes of one invocation, in VCS-reported order."""

    files: tuple[FileChange, ...]
    structural_summary: tuple[str, ...] = ()
    binary_summary: tuple[str, ...] = ()

    def __post_init__(self):
        if not self.files:
            raise ValueError("A ChangeSet must contain at least one file")

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]


@dataclass(frozen=True)
class CommitContext:
    """Read-only input to prompt construction."""

    change_set: ChangeSet
    mode: CommitMode = CommitMode.NEW
    previous_message: Optional[str] = field(default=None)

    def __post_init__(self):
        if self.mode is CommitMode.AMEND and self.previous_message is None:
            raise ValueError("previous_message is required when amending")
        if self.mode is CommitMode.NEW and self.previous_message is not None:
            raise ValueError("previous_message is only allowed when amending")
