"""Git diff utilities.

Contains:
- get_staged_diff: Get the full staged diff
"""

from pathlib import Path

from aicommit.git.runner import _run_git_command
from aicommit.git.status import RENAME_FLAGS


def get_staged_diff(cwd: Path | None = None) -> str:
    """Get the staged diff as unified text.

    Paths are not quoted and external diff drivers and colors are disabled so
    the output is stable for parsing. The diff is never truncated.

    Returns:
        The staged diff string (empty when nothing is staged).
    """
    return _run_git_command(
        ["-c", "core.quotePath=false", "diff", "--cached", "--no-color", "--no-ext-diff"]
        + RENAME_FLAGS,
        strip=False,
        cwd=cwd,
    )
