"""Prompt construction for aicommit.

- conventions: CommitType, ConventionEntry, DEFAULT_CONVENTIONS
- builder: build_prompt
"""

from aicommit.prompts.conventions import (
    DEFAULT_CONVENTIONS,
    CommitType,
    ConventionEntry,
    ConventionTable,
    ordered_conventions,
)
from aicommit.prompts.builder import build_prompt, render_diff


__all__ = [
    "CommitType",
    "ConventionEntry",
    "ConventionTable",
    "DEFAULT_CONVENTIONS",
    "ordered_conventions",
    "build_prompt",
    "render_diff",
]
