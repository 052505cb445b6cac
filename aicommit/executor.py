"""CommitExecutor: apply the chosen message to the repository."""

from aicommit.changes.models import CommitMode
from aicommit.git.boundary import VcsBoundary


def execute_commit(vcs: VcsBoundary, message: str, mode: CommitMode) -> str:
    """Create a new commit or amend the last one with `message`.

    Args:
        vcs: The VCS boundary.
        message: The confirmed commit message.
        mode: NEW commits the index, AMEND replaces the most recent commit.

    Returns:
        The git output of the commit command.

    Raises:
        GitError: If git refuses the commit.
    """
    if mode == CommitMode.AMEND:
        return vcs.amend(message)
    return vcs.commit(message)
