"""Commit type conventions.

The convention table drives both the prompt instructions and the validation
of generated messages:
- CommitType: The enumerated commit type tags
- ConventionEntry: A type tag with its meaning and prompt priority
- DEFAULT_CONVENTIONS: The table used by the CLI
"""

from dataclasses import dataclass
from enum import Enum


class CommitType(str, Enum):
    """Allowed <type> tags of a commit message."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    TEST = "test"
    CHORE = "chore"
    BUILD = "build"
    CI = "ci"
    PERF = "perf"
    REVERT = "revert"
    README = "readme"


@dataclass(frozen=True)
class ConventionEntry:
    """One row of the convention table."""

    type: CommitType
    description: str
    # Higher priority types are listed first in the prompt
    priority: int

    def render(self) -> str:
        return f"{self.type.value}: {self.description}"


ConventionTable = tuple[ConventionEntry, ...]


DEFAULT_CONVENTIONS: ConventionTable = (
    ConventionEntry(
        CommitType.FEAT,
        "A new feature or significant functionality addition (e.g., new endpoints, UI components, initial project setup).",
        9,
    ),
    ConventionEntry(
        CommitType.FIX,
        "A bug fix (e.g., correcting calculation errors, addressing crashes, security vulnerabilities).",
        8,
    ),
    ConventionEntry(
        CommitType.PERF,
        "A code change that improves performance without adding features or fixing bugs.",
        7,
    ),
    ConventionEntry(
        CommitType.REFACTOR,
        "A code change that neither fixes a bug nor adds a feature (e.g., renaming, restructuring, reorganizing files).",
        6,
    ),
    ConventionEntry(
        CommitType.BUILD,
        "Changes that affect the build system or external dependencies (e.g., package manifests, bundler config).",
        5,
    ),
    ConventionEntry(
        CommitType.CI,
        "Changes to CI configuration files and scripts (e.g., GitHub Actions, deployment pipelines).",
        5,
    ),
    ConventionEntry(
        CommitType.TEST,
        "Adding missing tests or correcting existing tests without changing application logic.",
        4,
    ),
    ConventionEntry(
        CommitType.DOCS,
        "Documentation only changes that don't affect code (e.g., API docs, comments, guides).",
        3,
    ),
    ConventionEntry(
        CommitType.CHORE,
        "Maintenance tasks, dependency bumps, or tooling changes that don't modify application code.",
        3,
    ),
    ConventionEntry(
        CommitType.STYLE,
        "Changes that do not affect the meaning of the code (white-space, formatting, missing semicolons).",
        2,
    ),
    ConventionEntry(
        CommitType.REVERT,
        "Reverts a previous commit.",
        8,
    ),
    ConventionEntry(
        CommitType.README,
        "Standalone changes to the README file only.",
        2,
    ),
)


def ordered_conventions(table: ConventionTable) -> list[ConventionEntry]:
    """Return the table in prompt order: priority descending, then name."""
    return sorted(table, key=lambda entry: (-entry.priority, entry.type.value))
