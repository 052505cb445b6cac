"""Staged change analysis for aicommit.

- models: FileStatus, FileKind, LineMarker, CommitMode, HunkRange, Hunk,
          FileChange, ChangeSet, CommitContext
- exceptions: ClassificationError, NoStagedChangesError
- diff_parser: parse_unified_diff
- classifier: classify, parse_status_code
"""

from aicommit.changes.exceptions import ClassificationError, NoStagedChangesError
from aicommit.changes.models import (
    ChangeSet,
    CommitContext,
    CommitMode,
    FileChange,
    FileKind,
    FileStatus,
    Hunk,
    HunkRange,
    LineMarker,
)
from aicommit.changes.diff_parser import DiffSegment, parse_unified_diff
from aicommit.changes.classifier import classify, parse_status_code


__all__ = [
    "ClassificationError",
    "NoStagedChangesError",
    "ChangeSet",
    "CommitContext",
    "CommitMode",
    "FileChange",
    "FileKind",
    "FileStatus",
    "Hunk",
    "HunkRange",
    "LineMarker",
    "DiffSegment",
    "parse_unified_diff",
    "classify",
    "parse_status_code",
]
