"""Shared test fixtures and configuration."""

import pytest

from aicommit.config import Settings
from aicommit.git.status import StatusEntry

from doubles import MODIFIED_DIFF, FakeVcs


@pytest.fixture
def modified_status():
    return [StatusEntry("M", "src/a.rs")]


@pytest.fixture
def rename_status():
    return [StatusEntry("R100", "src/new.rs", "src/old.rs")]


@pytest.fixture
def fake_vcs(modified_status):
    """A repository with one modified file and a previous commit 'wip'."""
    return FakeVcs(status=modified_status, diff=MODIFIED_DIFF, last_message="wip")


@pytest.fixture
def settings():
    return Settings(model="fake-model")
