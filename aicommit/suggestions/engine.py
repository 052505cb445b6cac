"""SuggestionEngine: turn one AI round into a SuggestionBatch."""

from typing import Callable, Optional

from aicommit.config import MAX_DESCRIPTION_CHARS, MIN_DESCRIPTION_CHARS
from aicommit.llm.base import BaseLLMProvider
from aicommit.llm.exceptions import NoValidSuggestionsError
from aicommit.llm.parsing import split_candidates
from aicommit.suggestions.models import Suggestion, SuggestionBatch


class SuggestionEngine:
    """Request, validate and deduplicate commit message candidates.

    Each request is independent. Nothing is remembered between rounds and
    nothing is retried here; regenerating is the caller's decision.
    """

    def __init__(
        self,
        provider: BaseLLMProvider,
        min_len: int = MIN_DESCRIPTION_CHARS,
        max_len: int = MAX_DESCRIPTION_CHARS,
        debug: Optional[Callable[[str], None]] = None,
    ):
        self.provider = provider
        self.min_len = min_len
        self.max_len = max_len
        self.debug = debug

    def request(self, prompt: str, count: int) -> SuggestionBatch:
        """Ask the provider for `count` messages and keep the valid ones.

        Args:
            prompt: The prompt built for the current CommitContext.
            count: Number of messages requested; the batch never exceeds it.

        Returns:
            Valid suggestions in order of first appearance, without
            duplicate (type, description) pairs.

        Raises:
            LLMError: If the provider call fails.
            NoValidSuggestionsError: If no candidate passes validation.
        """
        raw_texts = self.provider.generate(prompt, count)
        lines = split_candidates(raw_texts)
        if self.debug:
            self.debug(f"Raw candidates ({len(lines)}):")
            for line in lines:
                self.debug(f"  {line}")

        accepted: list[Suggestion] = []
        seen: set[tuple[str, str]] = set()
        for line in lines:
            suggestion = Suggestion.parse(line, self.min_len, self.max_len)
            if suggestion is None:
                continue
            key = (suggestion.type.value, suggestion.description)
            if key in seen:
                continue
            seen.add(key)
            accepted.append(suggestion)
            if len(accepted) == count:
                break

        if not accepted:
            raise NoValidSuggestionsError(
                f"None of the {len(lines)} candidate(s) matched '<type>: <description>' "
                f"with a {self.min_len}-{self.max_len} character description"
            )
        return SuggestionBatch(tuple(accepted))
