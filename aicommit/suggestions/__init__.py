"""Commit message suggestions for aicommit.

- models: Suggestion, SuggestionBatch, normalize_candidate
- engine: SuggestionEngine
"""

from aicommit.suggestions.models import Suggestion, SuggestionBatch, normalize_candidate
from aicommit.suggestions.engine import SuggestionEngine


__all__ = [
    "Suggestion",
    "SuggestionBatch",
    "normalize_candidate",
    "SuggestionEngine",
]
