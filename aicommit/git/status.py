"""Staged status listing.

Contains:
- StatusEntry: One staged path as reported by git
- get_staged_status: List staged paths with their status codes
- parse_name_status: Parse NUL-separated --name-status output
"""

from pathlib import Path
from typing import NamedTuple, Optional

from aicommit.git.exceptions import GitError
from aicommit.git.runner import _run_git_command

# Rename and copy detection must match the flags used for the diff so that
# both listings describe the same paths.
RENAME_FLAGS = ["-M", "-C"]


class StatusEntry(NamedTuple):
    """One staged path: git status code, current path, and source path for moves."""

    code: str
    path: str
    previous_path: Optional[str] = None


def parse_name_status(output: str) -> list[StatusEntry]:
    """Parse the output of ``git diff --cached --name-status -z``.

    Records are NUL separated. Renames and copies carry two paths
    (``R100 NUL old NUL new``), everything else carries one.

    Args:
        output: Raw NUL-separated output.

    Returns:
        Status entries in the order git reported them.

    Raises:
        GitError: If the output is truncated mid-record.
    """
    fields = output.split("\0")
    # -z output ends with a terminating NUL
    if fields and fields[-1] == "":
        fields.pop()

    entries: list[StatusEntry] = []
    i = 0
    while i < len(fields):
        code = fields[i].strip()
        if not code:
            i += 1
            continue
        if code[0] in ("R", "C"):
            if i + 2 >= len(fields):
                raise GitError(f"Truncated status record for code {code!r}")
            entries.append(StatusEntry(code, fields[i + 2], fields[i + 1]))
            i += 3
        else:
            if i + 1 >= len(fields):
                raise GitError(f"Truncated status record for code {code!r}")
            entries.append(StatusEntry(code, fields[i + 1]))
            i += 2
    return entries


def get_staged_status(cwd: Path | None = None) -> list[StatusEntry]:
    """Get the staged files and their status codes.

    Returns:
        Ordered status entries (git's path order); empty when nothing is staged.
    """
    output = _run_git_command(
        ["diff", "--cached", "--name-status", "-z"] + RENAME_FLAGS,
        strip=False,
        cwd=cwd,
    )
    return parse_name_status(output)
