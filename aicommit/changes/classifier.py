"""Change classification.

Turns the staged status listing and the staged diff into a ChangeSet:
- classify: Build the ChangeSet
- parse_status_code: Map a git status code onto a FileStatus
"""

from typing import Iterable, Optional, Sequence

from aicommit.changes.diff_parser import DiffSegment, parse_unified_diff
from aicommit.changes.exceptions import ClassificationError, NoStagedChangesError
from aicommit.changes.models import ChangeSet, FileChange, FileKind, FileStatus

_STATUS_LETTERS = {
    "A": FileStatus.ADDED,
    "M": FileStatus.MODIFIED,
    "D": FileStatus.DELETED,
    "R": FileStatus.RENAMED,
    "C": FileStatus.COPIED,
    # A type change (file <-> symlink) keeps its path; report it as modified
    "T": FileStatus.MODIFIED,
}

# Second column of `git status --porcelain` (worktree state) may follow the
# index letter; it does not affect what is staged.
_WORKTREE_COLUMN = {" ", "M", "T", "D"}


def parse_status_code(code: str) -> FileStatus:
    """Map a status code onto a FileStatus.

    Accepts ``--name-status`` codes (``M``, ``A``, ``R100``, ``C075``) and
    two-letter porcelain codes (``M ``, ``AM``, ``R ``).

    Raises:
        ClassificationError: If the code is not one of the supported statuses.
    """
    if not code or code[0] not in _STATUS_LETTERS:
        raise ClassificationError(f"Unsupported status code: {code!r}")

    status = _STATUS_LETTERS[code[0]]
    rest = code[1:]
    if rest == "":
        return status
    if status.is_move and rest.isdigit():
        return status
    if len(rest) == 1 and rest in _WORKTREE_COLUMN:
        return status
    raise ClassificationError(f"Unsupported status code: {code!r}")


def _split_entry(entry: Sequence) -> tuple[str, str, Optional[str]]:
    """Accept (code, path) or (code, path, previous_path) records."""
    if len(entry) == 2:
        code, path = entry
        return code, path, None
    if len(entry) == 3:
        code, path, previous_path = entry
        return code, path, previous_path or None
    raise ClassificationError(f"Malformed status record: {entry!r}")


def _build_file_change(
    code: str, path: str, previous_path: Optional[str], segment: Optional[DiffSegment]
) -> FileChange:
    status = parse_status_code(code)

    if status.is_move and previous_path is None:
        raise ClassificationError(f"{status.value} entry without a source path: {path!r}")
    if not status.is_move and previous_path is not None:
        raise ClassificationError(
            f"Unexpected source path {previous_path!r} for {status.value} entry {path!r}"
        )

    # Files missing from the diff (mode-only changes) are still listed, as
    # text with no hunks.
    if segment is not None and segment.is_binary:
        return FileChange(
            path=path, status=status, kind=FileKind.BINARY, previous_path=previous_path
        )

    hunks = tuple(segment.hunks) if segment is not None else ()
    return FileChange(
        path=path,
        status=status,
        kind=FileKind.TEXT,
        previous_path=previous_path,
        text_hunks=hunks,
    )


def classify(raw_status_lines: Iterable[Sequence], raw_diff_text: str) -> ChangeSet:
    """Build the ChangeSet for the staged changes.

    Args:
        raw_status_lines: (code, path, previous_path) records in VCS order.
        raw_diff_text: The staged unified diff.

    Returns:
        The ChangeSet; ``files`` keeps the order of raw_status_lines.

    Raises:
        NoStagedChangesError: If raw_status_lines is empty.
        ClassificationError: If a record or the diff cannot be parsed.
    """
    entries = [_split_entry(entry) for entry in raw_status_lines]
    if not entries:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    segments: dict[str, DiffSegment] = {}
    for segment in parse_unified_diff(raw_diff_text):
        segments.setdefault(segment.path, segment)

    files: list[FileChange] = []
    structural_summary: list[str] = []
    binary_summary: list[str] = []

    for code, path, previous_path in entries:
        change = _build_file_change(code, path, previous_path, segments.get(path))
        files.append(change)

        if change.kind is FileKind.BINARY:
            binary_summary.append(f"{change.status.value} {change.path}")
        if change.status.is_move:
            structural_summary.append(
                f"{change.status.value} {change.previous_path} -> {change.path}"
            )

    return ChangeSet(
        files=tuple(files),
        structural_summary=tuple(structural_summary),
        binary_summary=tuple(binary_summary),
    )
