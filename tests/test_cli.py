"""Tests for aicommit.cli module."""

import pytest
from typer.testing import CliRunner

from aicommit.cli import PRESENTING_KEYS, app, describe_error, parse_choice, render_batch
from aicommit.config import ConfigError, Settings
from aicommit.git import GitError, NotARepositoryError
from aicommit.llm import AuthError, MissingAPIKeyError, NetworkError
from aicommit.selection import Action, Presenting
from aicommit.suggestions import Suggestion, SuggestionBatch

from doubles import FakeProvider, FakeVcs, MODIFIED_DIFF

runner = CliRunner()


@pytest.fixture
def wire(mocker, fake_vcs):
    """Patch configuration, provider and repository discovery for the CLI."""

    def _wire(provider, vcs=fake_vcs, settings=None):
        mocker.patch("aicommit.cli.main.load_config", return_value=settings or Settings(model="fake-model"))
        mocker.patch("aicommit.cli.main.get_provider_for_settings", return_value=provider)
        discover = mocker.patch("aicommit.cli.main.GitBoundary.discover", return_value=vcs)
        return discover

    return _wire


class TestMainCommand:
    """Tests for the ai-commit command."""

    def test_auto_mode_commits(self, wire, fake_vcs):
        """Test the default invocation."""
        wire(FakeProvider(rounds=[["feat: add greeting output"]]))

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Committed: feat: add greeting output" in result.output
        assert fake_vcs.committed == [("commit", "feat: add greeting output")]

    def test_amend_flag(self, wire, fake_vcs):
        """Test -a amends the last commit."""
        wire(FakeProvider(rounds=[["fix: print greeting on startup"]]))

        result = runner.invoke(app, ["-a"])

        assert result.exit_code == 0
        assert fake_vcs.committed == [("amend", "fix: print greeting on startup")]

    def test_interactive_next_then_commit(self, wire, fake_vcs):
        """Test choosing the second suggestion."""
        wire(FakeProvider(rounds=[["feat: add greeting output", "feat: print a greeting"]]))

        result = runner.invoke(app, ["-i"], input="n\ny\n")

        assert result.exit_code == 0
        assert "> 1. feat: add greeting output" in result.output
        assert "> 2. feat: print a greeting" in result.output
        assert fake_vcs.committed == [("commit", "feat: print a greeting")]

    def test_interactive_enter_commits_current(self, wire, fake_vcs):
        """Test that a bare Enter confirms."""
        wire(FakeProvider(rounds=[["feat: add greeting output"]]))

        result = runner.invoke(app, ["--interactive"], input="\n")

        assert result.exit_code == 0
        assert fake_vcs.committed == [("commit", "feat: add greeting output")]

    def test_interactive_quit_is_success(self, wire, fake_vcs):
        """Test that cancelling exits 0 without committing."""
        wire(FakeProvider(rounds=[["feat: add greeting output"]]))

        result = runner.invoke(app, ["-i"], input="q\n")

        assert result.exit_code == 0
        assert "Commit cancelled." in result.output
        assert not fake_vcs.mutated

    def test_interactive_end_of_input_cancels(self, wire, fake_vcs):
        """Test that EOF at the prompt cancels."""
        wire(FakeProvider(rounds=[["feat: add greeting output"]]))

        result = runner.invoke(app, ["-i"], input="")

        assert result.exit_code == 0
        assert not fake_vcs.mutated

    def test_interactive_unknown_key_reprompts(self, wire, fake_vcs):
        """Test that unknown keys are reported and ignored."""
        wire(FakeProvider(rounds=[["feat: add greeting output"]]))

        result = runner.invoke(app, ["-i"], input="x\ny\n")

        assert result.exit_code == 0
        assert "Unknown choice" in result.output
        assert fake_vcs.mutated

    def test_interactive_retry_after_ai_error(self, wire, fake_vcs):
        """Test regenerate after a failed round."""
        wire(FakeProvider(rounds=[NetworkError("unreachable"), ["feat: add greeting output"]]))

        result = runner.invoke(app, ["-i"], input="r\ny\n")

        assert result.exit_code == 0
        assert "LLM error (network): unreachable" in result.output
        assert fake_vcs.committed == [("commit", "feat: add greeting output")]

    def test_missing_api_key_before_git(self, wire):
        """Test that the key is checked before the repository is located."""
        discover = wire(FakeProvider(api_key=""))

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "FAKE_API_KEY" in result.output
        discover.assert_not_called()

    def test_nothing_staged(self, wire):
        """Test the nothing-staged message."""
        wire(FakeProvider(), vcs=FakeVcs(status=[], diff=""))

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "no changes staged" in result.output

    def test_not_a_repository(self, wire, mocker):
        """Test running outside a repository."""
        wire(FakeProvider())
        mocker.patch(
            "aicommit.cli.main.GitBoundary.discover",
            side_effect=NotARepositoryError("Not in a git repository."),
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Not in a git repository" in result.output

    def test_commit_failure(self, wire, mocker):
        """Test that git's failure text is shown."""
        vcs = FakeVcs(status=[("M", "src/a.rs")], diff=MODIFIED_DIFF)
        mocker.patch.object(vcs, "commit", side_effect=GitError("pre-commit hook failed"))
        wire(FakeProvider(rounds=[["feat: add greeting output"]]), vcs=vcs)

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Git error: pre-commit hook failed" in result.output

    def test_auth_error(self, wire, fake_vcs):
        """Test the one-line message for a rejected key."""
        wire(FakeProvider(rounds=[AuthError("key rejected")]))

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "LLM error (auth): key rejected" in result.output
        assert not fake_vcs.mutated

    def test_invalid_provider(self, mocker):
        """Test a bad --provider value."""
        mocker.patch("aicommit.cli.main.load_config", side_effect=ConfigError("Unknown provider 'x'"))

        result = runner.invoke(app, ["--provider", "x"])

        assert result.exit_code == 1
        assert "Unknown provider" in result.output

    def test_provider_and_model_flags_reach_config(self, wire, mocker):
        """Test that flags are passed to load_config."""
        wire(FakeProvider(rounds=[["feat: add greeting output"]]))
        load = mocker.patch("aicommit.cli.main.load_config", return_value=Settings())

        runner.invoke(app, ["--provider", "openai", "--model", "gpt-4o"])

        load.assert_called_once_with(provider="openai", model="gpt-4o")

    def test_version(self):
        """Test --version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "ai-commit" in result.output


class TestCliUtils:
    """Tests for CLI helpers."""

    def test_parse_choice(self):
        """Test key mapping."""
        assert parse_choice("", PRESENTING_KEYS) is Action.CONFIRM
        assert parse_choice(" Y ", PRESENTING_KEYS) is Action.CONFIRM
        assert parse_choice("r", PRESENTING_KEYS) is Action.REGENERATE
        assert parse_choice("z", PRESENTING_KEYS) is None

    def test_render_batch_marks_cursor(self):
        """Test the cursor marker."""
        batch = SuggestionBatch((
            Suggestion.parse("feat: add greeting output"),
            Suggestion.parse("feat: print a greeting"),
        ))

        rendered = render_batch(Presenting(batch, 1))

        assert rendered == "  1. feat: add greeting output\n> 2. feat: print a greeting"

    def test_describe_error(self):
        """Test that the error kind is part of the message."""
        assert describe_error(NetworkError("down")) == "LLM error (network): down"
        assert describe_error(MissingAPIKeyError("no key")) == "LLM error: no key"
