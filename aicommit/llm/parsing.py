"""Raw response handling.

Contains:
- strip_code_fences: Remove a markdown fence wrapped around a response
- split_candidates: Turn raw candidate texts into individual candidate lines
"""

import re

_FENCE_LINE_RE = re.compile(r"^```[\w-]*$")


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences the model added despite instructions."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        first = lines[0].strip()
        if _FENCE_LINE_RE.match(first):
            # ```lang on its own line
            lines = lines[1:]
        else:
            # ```feat: ... on the same line
            lines[0] = first[3:]
        cleaned = "\n".join(lines)
    cleaned = cleaned.rstrip()
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def split_candidates(raw_texts: list[str]) -> list[str]:
    """Split each raw candidate into non-empty lines.

    A provider may return one message per candidate or several messages,
    one per line, in a single candidate.

    Args:
        raw_texts: Raw candidate texts in provider order.

    Returns:
        Candidate lines in order of appearance.
    """
    lines: list[str] = []
    for text in raw_texts:
        if not text:
            continue
        for line in strip_code_fences(text).split("\n"):
            stripped = line.strip()
            if stripped and not _FENCE_LINE_RE.match(stripped):
                lines.append(stripped)
    return lines
