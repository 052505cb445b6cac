"""Tests for aicommit.suggestions package."""

import pytest

from aicommit.llm import AiErrorKind, NetworkError, NoValidSuggestionsError
from aicommit.prompts import CommitType
from aicommit.suggestions import Suggestion, SuggestionBatch, SuggestionEngine, normalize_candidate

from doubles import FakeProvider

MIN_LEN = 10
MAX_LEN = 72


class TestNormalizeCandidate:
    """Tests for normalize_candidate function."""

    @pytest.mark.parametrize(
        "raw",
        [
            "feat: add login page",
            "- feat: add login page",
            "* feat: add login page",
            "1. feat: add login page",
            "2) feat: add login page",
            '"feat: add login page"',
            "`feat: add login page`",
            "  - 'feat: add login page'  ",
        ],
    )
    def test_strips_markers_and_quotes(self, raw):
        """Test tolerated decorations around a candidate."""
        assert normalize_candidate(raw) == "feat: add login page"


class TestSuggestionParse:
    """Tests for Suggestion.parse."""

    def test_valid_line(self):
        """Test parsing a well-formed message."""
        suggestion = Suggestion.parse("feat: add login page")

        assert suggestion.type is CommitType.FEAT
        assert suggestion.description == "add login page"
        assert suggestion.message == "feat: add login page"
        assert str(suggestion) == "feat: add login page"

    def test_type_token_is_case_insensitive(self):
        """Test that an uppercase type is normalized."""
        assert Suggestion.parse("FIX: handle empty password").type is CommitType.FIX

    @pytest.mark.parametrize(
        "line",
        [
            "feature: add login page",
            "add login page",
            "feat add login page",
            "feat:",
            "feat(auth): add login page",
            "",
        ],
    )
    def test_rejects_invalid_format_or_type(self, line):
        """Test lines that are not '<type>: <description>' with a known type."""
        assert Suggestion.parse(line) is None

    def test_length_bounds_are_inclusive(self):
        """Test min_len and max_len are accepted and the neighbours rejected."""
        for length, accepted in [
            (MIN_LEN - 1, False),
            (MIN_LEN, True),
            (MAX_LEN, True),
            (MAX_LEN + 1, False),
        ]:
            line = "fix: " + "a" * length
            assert (Suggestion.parse(line, MIN_LEN, MAX_LEN) is not None) is accepted, length

    def test_length_excludes_type_prefix(self):
        """Test the bound applies to the description only."""
        suggestion = Suggestion.parse("refactor: " + "b" * MAX_LEN, MIN_LEN, MAX_LEN)

        assert suggestion is not None
        assert len(suggestion.description) == MAX_LEN

    def test_custom_bounds(self):
        """Test bounds passed as validation context."""
        assert Suggestion.parse("docs: short", 3, 5) is not None
        assert Suggestion.parse("docs: too long", 3, 5) is None


class TestSuggestionBatch:
    """Tests for SuggestionBatch."""

    def test_cannot_be_empty(self):
        """Test that an empty batch is refused."""
        with pytest.raises(ValueError):
            SuggestionBatch(())

    def test_sequence_behaviour(self):
        """Test len, indexing and iteration."""
        first = Suggestion.parse("feat: add login page")
        second = Suggestion.parse("fix: handle empty password")
        batch = SuggestionBatch((first, second))

        assert len(batch) == 2
        assert batch[1] == second
        assert list(batch) == [first, second]
        assert batch.messages == ["feat: add login page", "fix: handle empty password"]


class TestSuggestionEngine:
    """Tests for SuggestionEngine."""

    def test_filters_invalid_lengths_and_keeps_order(self):
        """Test 5 candidates with 2 failing length validation."""
        provider = FakeProvider(rounds=[[
            "feat: add login page",
            "feat: short",
            "feat: introduce a login page for returning users",
            "feat: " + "x" * (MAX_LEN + 1),
            "feat: add a dedicated login page",
        ]])
        engine = SuggestionEngine(provider, MIN_LEN, MAX_LEN)

        batch = engine.request("prompt", 5)

        assert batch.messages == [
            "feat: add login page",
            "feat: introduce a login page for returning users",
            "feat: add a dedicated login page",
        ]

    def test_removes_exact_duplicates(self):
        """Test that repeated (type, description) pairs appear once."""
        provider = FakeProvider(rounds=[[
            "feat: add login page",
            "- feat: add login page",
            "fix: add login page",
        ]])

        batch = SuggestionEngine(provider).request("prompt", 5)

        assert batch.messages == ["feat: add login page", "fix: add login page"]

    def test_splits_multi_line_candidates(self):
        """Test a single raw completion holding several messages."""
        provider = FakeProvider(rounds=[["1. feat: add login page\n2. fix: handle empty password"]])

        batch = SuggestionEngine(provider).request("prompt", 2)

        assert batch.messages == ["feat: add login page", "fix: handle empty password"]

    def test_truncates_to_requested_count(self):
        """Test that the batch never exceeds the requested count."""
        provider = FakeProvider(rounds=[["feat: add login page", "fix: handle empty password"]])

        batch = SuggestionEngine(provider).request("prompt", 1)

        assert batch.messages == ["feat: add login page"]

    def test_forwards_prompt_and_count(self):
        """Test the provider call."""
        provider = FakeProvider(rounds=[["feat: add login page"]])

        SuggestionEngine(provider).request("the prompt", 5)

        assert provider.prompts == ["the prompt"]
        assert provider.counts == [5]

    def test_invalid_type_only_fails(self):
        """Test that a single candidate with an unknown type is a failure."""
        provider = FakeProvider(rounds=[["feature: add login page"]])

        with pytest.raises(NoValidSuggestionsError) as exc_info:
            SuggestionEngine(provider).request("prompt", 1)

        assert exc_info.value.kind is AiErrorKind.NO_VALID_SUGGESTIONS

    def test_provider_errors_propagate(self):
        """Test that provider failures are not swallowed or retried."""
        provider = FakeProvider(rounds=[NetworkError("unreachable"), ["feat: add login page"]])

        with pytest.raises(NetworkError):
            SuggestionEngine(provider).request("prompt", 1)

        assert len(provider.prompts) == 1

    def test_is_stateless_between_rounds(self):
        """Test that a second round may repeat the first one."""
        provider = FakeProvider(rounds=[["feat: add login page"], ["feat: add login page"]])
        engine = SuggestionEngine(provider)

        first = engine.request("prompt", 1)
        second = engine.request("prompt", 1)

        assert first == second

    def test_debug_receives_raw_candidates(self):
        """Test the debug sink."""
        lines = []
        provider = FakeProvider(rounds=[["feat: add login page\nnot a message"]])

        SuggestionEngine(provider, debug=lines.append).request("prompt", 1)

        assert "  not a message" in lines
