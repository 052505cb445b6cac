"""End-to-end commit flow.

Contains:
- Outcome: How an invocation ended
- PipelineResult: Outcome, committed message and git output
- run_pipeline: Preconditions, classification, selection and commit
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from aicommit.changes.classifier import classify
from aicommit.changes.models import CommitContext, CommitMode
from aicommit.config import AUTO_SUGGESTION_COUNT, INTERACTIVE_SUGGESTION_COUNT, Settings
from aicommit.executor import execute_commit
from aicommit.git.boundary import VcsBoundary
from aicommit.llm.base import BaseLLMProvider
from aicommit.prompts.builder import build_prompt
from aicommit.prompts.conventions import DEFAULT_CONVENTIONS, ConventionTable
from aicommit.selection.controller import InputSource, SelectionController
from aicommit.selection.states import Cancelled, Committed, Failed
from aicommit.suggestions.engine import SuggestionEngine
from aicommit.suggestions.models import SuggestionBatch


class Outcome(Enum):
    COMMITTED = "committed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PipelineResult:
    """Result of a pipeline run that did not fail.

    Attributes:
        outcome: COMMITTED or CANCELLED.
        message: The committed message, None when cancelled.
        output: git's output for the commit, empty when cancelled.
    """

    outcome: Outcome
    message: Optional[str] = None
    output: str = ""


def _noop(_: str) -> None:
    pass


def run_pipeline(
    vcs: VcsBoundary,
    provider: BaseLLMProvider,
    settings: Settings,
    mode: CommitMode = CommitMode.NEW,
    interactive: bool = False,
    input_source: Optional[InputSource] = None,
    echo: Optional[Callable[[str], None]] = None,
    debug: bool = False,
    convention_table: ConventionTable = DEFAULT_CONVENTIONS,
) -> PipelineResult:
    """Run one commit flow.

    The API key is checked before git is touched. In amend mode the previous
    message is read before classification so a repository without commits
    fails early.

    Args:
        vcs: The VCS boundary.
        provider: The LLM provider.
        settings: Effective settings (description bounds).
        mode: NEW or AMEND.
        interactive: Present several suggestions and let the user choose.
        input_source: Required when interactive.
        echo: Sink for progress lines (and the prompt when debug is set).
        debug: Also echo the prompt and the raw candidates.
        convention_table: Commit types offered to the model.

    Returns:
        A PipelineResult for a commit or a user cancellation.

    Raises:
        PreconditionError: Missing API key, nothing staged, no commit to amend.
        GitError: If a git call fails.
        ClassificationError: If git output cannot be parsed.
        LLMError: If the final AI round failed.
    """
    echo = echo or _noop
    if interactive and input_source is None:
        raise ValueError("Interactive mode needs an input source")

    # Fails with MissingAPIKeyError before any git call
    provider.get_api_key()

    previous_message = None
    if mode == CommitMode.AMEND:
        previous_message = vcs.get_last_commit_message().strip()

    change_set = classify(vcs.get_staged_status(), vcs.get_staged_diff())
    context = CommitContext(change_set=change_set, mode=mode, previous_message=previous_message)

    count = INTERACTIVE_SUGGESTION_COUNT if interactive else AUTO_SUGGESTION_COUNT
    engine = SuggestionEngine(
        provider,
        min_len=settings.min_description_chars,
        max_len=settings.max_description_chars,
        debug=echo if debug else None,
    )

    def load_batch() -> SuggestionBatch:
        # Rebuilt for every round from the same context
        prompt = build_prompt(
            context,
            convention_table=convention_table,
            suggestion_count=count,
            min_chars=settings.min_description_chars,
            max_chars=settings.max_description_chars,
        )
        if debug:
            echo("LLM Prompt:")
            echo(prompt)
        plural = "s" if count != 1 else ""
        echo(f"Generating {count} commit message{plural} with {settings.model}...")
        return engine.request(prompt, count)

    controller = SelectionController(load_batch, input_source if interactive else None)
    final_state = controller.run()

    if isinstance(final_state, Failed):
        raise final_state.error
    if isinstance(final_state, Cancelled):
        return PipelineResult(Outcome.CANCELLED)
    if not isinstance(final_state, Committed):
        raise RuntimeError(f"Selection ended in a non-terminal state: {final_state}")

    echo("Committing..." if mode == CommitMode.NEW else "Amending last commit...")
    output = execute_commit(vcs, final_state.message, mode)
    return PipelineResult(Outcome.COMMITTED, final_state.message, output)
