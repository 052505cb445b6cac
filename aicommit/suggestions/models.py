"""Suggestion data models.

Contains:
- Suggestion: A validated "<type>: <description>" commit message
- SuggestionBatch: The non-empty, ordered result of one AI round
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from aicommit.config import MAX_DESCRIPTION_CHARS, MIN_DESCRIPTION_CHARS
from aicommit.prompts.conventions import CommitType

# "- ", "* ", "1. ", "1) " in front of a candidate
_LIST_MARKER_RE = re.compile(r"^(?:[-*•]|\d+[.)])\s+")
_SUGGESTION_RE = re.compile(r"^(?P<type>[A-Za-z]+):\s+(?P<description>\S.*)$")
_WRAPPING_CHARS = "\"'`"


def normalize_candidate(line: str) -> str:
    """Strip list markers and wrapping quotes or backticks from a candidate line."""
    text = _LIST_MARKER_RE.sub("", line.strip(), count=1)
    while len(text) >= 2 and text[0] == text[-1] and text[0] in _WRAPPING_CHARS:
        text = text[1:-1].strip()
    return text


class Suggestion(BaseModel):
    """A commit message candidate that passed validation.

    Attributes:
        type: Conventional commit type from the convention table.
        description: Free text after "<type>: ", within the length bounds.

    The length bounds are passed as validation context
    ({"min_len": ..., "max_len": ...}) and default to the config constants.
    """

    model_config = ConfigDict(frozen=True)

    type: CommitType
    description: str

    @field_validator("description")
    @classmethod
    def description_within_bounds(cls, v: str, info: ValidationInfo) -> str:
        """Ensure the description length is within [min_len, max_len]."""
        bounds = info.context or {}
        min_len = bounds.get("min_len", MIN_DESCRIPTION_CHARS)
        max_len = bounds.get("max_len", MAX_DESCRIPTION_CHARS)
        v = v.strip()
        if not min_len <= len(v) <= max_len:
            raise ValueError(f"Description must be {min_len}-{max_len} characters, got {len(v)}")
        return v

    @property
    def message(self) -> str:
        return f"{self.type.value}: {self.description}"

    def __str__(self) -> str:
        return self.message

    @classmethod
    def parse(
        cls,
        line: str,
        min_len: int = MIN_DESCRIPTION_CHARS,
        max_len: int = MAX_DESCRIPTION_CHARS,
    ) -> Optional["Suggestion"]:
        """Parse one candidate line.

        Args:
            line: Raw candidate line from the model.
            min_len: Minimum description length, inclusive.
            max_len: Maximum description length, inclusive.

        Returns:
            The Suggestion, or None if the line is not a valid
            "<type>: <description>" message.
        """
        match = _SUGGESTION_RE.match(normalize_candidate(line))
        if not match:
            return None
        try:
            return cls.model_validate(
                {"type": match.group("type").lower(), "description": match.group("description")},
                context={"min_len": min_len, "max_len": max_len},
            )
        except ValidationError:
            return None


@dataclass(frozen=True)
class SuggestionBatch:
    """Ordered, non-empty suggestions from a single AI round."""

    suggestions: tuple[Suggestion, ...]

    def __post_init__(self):
        if not self.suggestions:
            raise ValueError("SuggestionBatch cannot be empty")

    def __len__(self) -> int:
        return len(self.suggestions)

    def __getitem__(self, index: int) -> Suggestion:
        return self.suggestions[index]

    def __iter__(self) -> Iterator[Suggestion]:
        return iter(self.suggestions)

    @property
    def messages(self) -> list[str]:
        return [s.message for s in self.suggestions]
