"""Prompt construction for commit message generation.

build_prompt renders a CommitContext into the single prompt string sent to
the model. The section order is fixed; the model is sensitive to where
instructions are placed. The output depends only on the arguments.
"""

from aicommit.changes.models import (
    ChangeSet,
    CommitContext,
    CommitMode,
    FileChange,
    LineMarker,
)
from aicommit.config import MAX_DESCRIPTION_CHARS, MIN_DESCRIPTION_CHARS
from aicommit.prompts.conventions import (
    DEFAULT_CONVENTIONS,
    ConventionTable,
    ordered_conventions,
)

SECTION_RULE = "---"
EMPTY_SECTION = "(none)"
NO_TEXTUAL_CHANGES = "(no textual changes)"

TYPE_SELECTION_GUIDANCE = """Type selection (pick the PRIMARY purpose of the whole commit):
1. New functionality, features, or initial project setup -> feat
2. Bug, error, or security fixes -> fix
3. Performance improvements without new features -> perf
4. Restructuring without behavior change -> refactor
5. Build configuration or dependency changes -> build
6. CI/CD pipeline changes -> ci
7. Only tests -> test
8. Only documentation -> docs
9. Only formatting -> style
10. Maintenance tasks -> chore
A README or manifest that is part of a larger change does not decide the type."""

_LINE_PREFIXES = {
    LineMarker.ADDED: "[ADDED_LINE]: ",
    LineMarker.REMOVED: "[REMOVED_LINE]: ",
    LineMarker.CONTEXT: " ",
}


def _render_file_diff(change: FileChange) -> list[str]:
    lines = [f"File: {change.display_path} ({change.status.value})"]
    for hunk in change.text_hunks:
        lines.append(hunk.header)
        for marker, text in hunk.lines:
            lines.append(f"{_LINE_PREFIXES[marker]}{text}")
    return lines


def render_diff(change_set: ChangeSet) -> str:
    """Concatenate the text hunks of every file, each introduced by a File: line."""
    blocks = [
        "\n".join(_render_file_diff(change))
        for change in change_set.files
        if change.text_hunks
    ]
    if not blocks:
        return NO_TEXTUAL_CHANGES
    return "\n".join(blocks)


def _render_summary(entries: tuple[str, ...]) -> str:
    return "\n".join(entries) if entries else EMPTY_SECTION


def build_prompt(
    context: CommitContext,
    convention_table: ConventionTable = DEFAULT_CONVENTIONS,
    suggestion_count: int = 1,
    min_chars: int = MIN_DESCRIPTION_CHARS,
    max_chars: int = MAX_DESCRIPTION_CHARS,
) -> str:
    """Build the prompt for one AI round.

    Args:
        context: The change set and commit mode.
        convention_table: Commit types and their meanings.
        suggestion_count: Number of messages to ask for.
        min_chars: Minimum description length.
        max_chars: Maximum description length.

    Returns:
        The prompt string. The diff is never truncated.
    """
    plural = "s" if suggestion_count != 1 else ""
    parts = [
        "Analyze the following code changes and repository structure modifications.",
        f"Generate {suggestion_count} commit message{plural}.",
    ]
    if suggestion_count > 1:
        parts.append(
            f"All {suggestion_count} messages must be alternative phrasings of a single commit "
            "covering all of the changes below, and must share the same <type>."
        )
    parts.append("Each MUST follow: <type>: <description>")
    parts.extend(entry.render() for entry in ordered_conventions(convention_table))
    parts.append(TYPE_SELECTION_GUIDANCE)
    parts.append(
        "Description rules: imperative mood preferred; "
        f"length between {min_chars} and {max_chars} characters."
    )
    if context.mode is CommitMode.AMEND:
        parts.append(
            f"The previous commit message was: '{context.previous_message}'. "
            "Generate a new, improved message."
        )
    parts.append(f"Output only the commit message{plural}, one per line, with no other text.")

    change_set = context.change_set
    parts.extend([
        "Diff:",
        SECTION_RULE,
        render_diff(change_set),
        SECTION_RULE,
        "Binary file changes:",
        _render_summary(change_set.binary_summary),
        SECTION_RULE,
        "Folder structure changes:",
        _render_summary(change_set.structural_summary),
        SECTION_RULE,
    ])
    return "\n".join(parts)
