"""Unified diff parser.

Contains functions for splitting ``git diff`` output:
- parse_unified_diff: Split a diff into per-file segments
- _unquote_path: Decode a path git wrote as a C-style quoted string
- _parse_file_block: Parse a single file block from the diff
- _parse_hunks: Parse hunks from the hunk portion of a file diff
- _create_hunk: Create a Hunk from parsed hunk data
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from aicommit.changes.exceptions import ClassificationError
from aicommit.changes.models import Hunk, HunkRange, LineMarker

_HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_DIFF_HEADER = "diff --git "
_QUOTED = r'"(?:[^"\\]|\\.)*"'
_QUOTED_HEADER_RE = re.compile(rf"^(?P<old>{_QUOTED}|a/.*?) (?P<new>{_QUOTED}|b/.*)$")
_OCTAL_RE = re.compile(r"[0-7]{3}")
_C_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}


@dataclass
class DiffSegment:
    """The part of a diff that belongs to one file."""

    path: str
    header_lines: list[str]
    hunks: list[Hunk] = field(default_factory=list)
    is_binary: bool = False


def parse_unified_diff(diff_output: str) -> list[DiffSegment]:
    """Split unified diff output into per-file segments.

    Args:
        diff_output: Raw output from git diff.

    Returns:
        Segments in diff order.

    Raises:
        ClassificationError: If a hunk header is malformed.
    """
    segments: list[DiffSegment] = []

    if not diff_output.strip():
        return segments

    # Each file starts with 'diff --git a/... b/...'
    file_blocks = re.split(r"(?=^diff --git )", diff_output, flags=re.MULTILINE)

    for block in file_blocks:
        if not block.startswith(_DIFF_HEADER):
            continue
        segments.append(_parse_file_block(block.split("\n")))

    return segments


def _unquote_path(text: str) -> str:
    """Decode a path git wrote as a C-style quoted string.

    Git quotes paths containing '"', '\\', control characters and (unless
    core.quotePath is false) non-ASCII bytes, which it writes as octal
    escapes. Unquoted paths are returned unchanged.

    Raises:
        ClassificationError: If the quoted string has an unknown escape.
    """
    if len(text) < 2 or not (text.startswith('"') and text.endswith('"')):
        return text

    body = text[1:-1]
    decoded = bytearray()
    i = 0
    while i < len(body):
        char = body[i]
        if char != "\\":
            decoded.extend(char.encode("utf-8"))
            i += 1
            continue
        escape = body[i + 1:i + 2]
        if escape in _C_ESCAPES:
            decoded.extend(_C_ESCAPES[escape].encode("utf-8"))
            i += 2
        elif _OCTAL_RE.match(body, i + 1):
            decoded.append(int(body[i + 1:i + 4], 8))
            i += 4
        else:
            raise ClassificationError(f"Invalid escape in quoted path: {text!r}")
    return decoded.decode("utf-8", errors="replace")


def _header_target(value: str) -> str:
    """Path named on a ---/+++ line, without git's trailing tab or quoting."""
    # Git ends the line with a tab when the path contains a space
    if value.endswith("\t"):
        value = value[:-1]
    return _unquote_path(value)


def _path_from_header(header: str) -> str:
    """Recover the path from 'diff --git a/<old> b/<new>'.

    Only used when no ---/+++ or rename/copy lines name the file (mode-only
    changes, binary files). Those cases always have old == new, which makes
    the split unambiguous even when the path contains spaces.
    """
    rest = header[len(_DIFF_HEADER):]
    if '"' in rest:
        match = _QUOTED_HEADER_RE.match(rest)
        if match:
            new = _unquote_path(match.group("new"))
            if new.startswith("b/"):
                return new[2:]
        raise ClassificationError(f"Unrecognized diff header: {header!r}")

    half = (len(rest) - 1) // 2
    if len(rest) % 2 == 1 and rest[half] == " ":
        old, new = rest[:half], rest[half + 1:]
        if old.startswith("a/") and new.startswith("b/") and old[2:] == new[2:]:
            return new[2:]
    match = re.match(r"a/(.*) b/(.*)$", rest)
    if match:
        return match.group(2)
    raise ClassificationError(f"Unrecognized diff header: {header!r}")


def _parse_file_block(lines: list[str]) -> DiffSegment:
    """Parse a single file block from the diff."""
    header_lines: list[str] = []
    new_path: Optional[str] = None
    old_path: Optional[str] = None
    moved_to: Optional[str] = None
    is_binary = False
    hunk_start_idx: Optional[int] = None

    for i, line in enumerate(lines):
        if line.startswith("@@"):
            hunk_start_idx = i
            break
        header_lines.append(line)

        if line.startswith("Binary files ") and line.endswith(" differ"):
            is_binary = True
        elif line.startswith("GIT binary patch"):
            is_binary = True
        elif line.startswith("rename to ") or line.startswith("copy to "):
            moved_to = _unquote_path(line.split(" to ", 1)[1])
        elif line.startswith("+++ "):
            target = _header_target(line[4:])
            if target.startswith("b/"):
                new_path = target[2:]
        elif line.startswith("--- "):
            source = _header_target(line[4:])
            if source.startswith("a/"):
                old_path = source[2:]

    path = moved_to or new_path or old_path or _path_from_header(lines[0])

    hunks: list[Hunk] = []
    if hunk_start_idx is not None and not is_binary:
        hunk_lines = lines[hunk_start_idx:]
        # The split leaves the block's final newline as an empty string
        while hunk_lines and hunk_lines[-1] == "":
            hunk_lines.pop()
        hunks = _parse_hunks(hunk_lines, path)

    return DiffSegment(path=path, header_lines=header_lines, hunks=hunks, is_binary=is_binary)


def _parse_hunks(lines: list[str], path: str) -> list[Hunk]:
    """Parse hunks from the lines starting at the first @@ header."""
    hunks: list[Hunk] = []
    current_header: Optional[str] = None
    current_lines: list[tuple[LineMarker, str]] = []

    for line in lines:
        if line.startswith("@@"):
            if current_header is not None:
                hunks.append(_create_hunk(current_header, current_lines, path))
            current_header = line
            current_lines = []
        elif current_header is None:
            continue
        elif line.startswith("+"):
            current_lines.append((LineMarker.ADDED, line[1:]))
        elif line.startswith("-"):
            current_lines.append((LineMarker.REMOVED, line[1:]))
        elif line.startswith(" "):
            current_lines.append((LineMarker.CONTEXT, line[1:]))
        elif line.startswith("\\"):
            # "\ No newline at end of file"
            continue
        elif line == "":
            # Context line whose single space was stripped by an editor
            current_lines.append((LineMarker.CONTEXT, ""))

    if current_header is not None:
        hunks.append(_create_hunk(current_header, current_lines, path))

    return hunks


def _create_hunk(header: str, lines: list[tuple[LineMarker, str]], path: str) -> Hunk:
    """Create a Hunk from a @@ -a,b +c,d @@ header and its lines.

    Raises:
        ClassificationError: If the header cannot be parsed.
    """
    match = _HUNK_HEADER_RE.match(header)
    if not match:
        raise ClassificationError(f"Malformed hunk header in {path}: {header!r}")

    old_start = int(match.group(1))
    old_len = int(match.group(2)) if match.group(2) is not None else 1
    new_start = int(match.group(3))
    new_len = int(match.group(4)) if match.group(4) is not None else 1

    return Hunk(
        old_range=HunkRange(old_start, old_len),
        new_range=HunkRange(new_start, new_len),
        lines=tuple(lines),
    )
