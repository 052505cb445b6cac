"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path

from aicommit.git.exceptions import GitError, GitNotFoundError, NotARepositoryError


def _run_git_command(args: list[str], strip: bool = True, cwd: Path | None = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace from stdout. Disable for -z output.
        cwd: Directory to run git in (defaults to the current directory).

    Returns:
        The stdout of the git command.

    Raises:
        GitNotFoundError: If git is not installed.
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitNotFoundError("Git is not installed or not in PATH.")
    return result.stdout.strip() if strip else result.stdout


def get_repo_root(cwd: Path | None = None) -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitNotFoundError: If git is not installed.
        NotARepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd)
    except GitNotFoundError:
        raise
    except GitError:
        raise NotARepositoryError(
            "Not in a git repository. Please run this command from within a git repo."
        )
    return Path(root)
