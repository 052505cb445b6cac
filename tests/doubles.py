"""Test doubles for the VCS and AI boundaries."""

from aicommit.git.boundary import VcsBoundary
from aicommit.git.exceptions import NoCommitsError
from aicommit.llm.base import BaseLLMProvider
from aicommit.llm.exceptions import MissingAPIKeyError


MODIFIED_DIFF = """diff --git a/src/a.rs b/src/a.rs
index 1234567..89abcde 100644
--- a/src/a.rs
+++ b/src/a.rs
@@ -1,2 +1,4 @@
 fn main() {
+    let greeting = "hello";
+    println!("{}", greeting);
 }
"""

RENAME_DIFF = """diff --git a/src/old.rs b/src/new.rs
similarity index 100%
rename from src/old.rs
rename to src/new.rs
"""

BINARY_DIFF = """diff --git a/assets/logo.png b/assets/logo.png
new file mode 100644
index 0000000..d2a1f3c
Binary files /dev/null and b/assets/logo.png differ
"""


class FakeVcs(VcsBoundary):
    """In-memory VcsBoundary that records every call."""

    def __init__(self, status=None, diff="", last_message=None, commit_output="[main abc1234] ok"):
        self.status = list(status or [])
        self.diff = diff
        self.last_message = last_message
        self.commit_output = commit_output
        self.calls: list[str] = []
        self.committed: list[tuple[str, str]] = []

    def get_staged_status(self):
        self.calls.append("get_staged_status")
        return self.status

    def get_staged_diff(self):
        self.calls.append("get_staged_diff")
        return self.diff

    def get_last_commit_message(self):
        self.calls.append("get_last_commit_message")
        if self.last_message is None:
            raise NoCommitsError("Cannot amend: the repository has no commits yet.")
        return self.last_message

    def commit(self, message):
        self.calls.append("commit")
        self.committed.append(("commit", message))
        return self.commit_output

    def amend(self, message):
        self.calls.append("amend")
        self.committed.append(("amend", message))
        return self.commit_output

    @property
    def mutated(self) -> bool:
        return bool(self.committed)


class FakeProvider(BaseLLMProvider):
    """Provider returning scripted rounds; an Exception in the script is raised."""

    default_model = "fake-model"

    def __init__(self, rounds=None, api_key="test-key"):
        super().__init__()
        self.rounds = list(rounds or [])
        self.api_key = api_key
        self.prompts: list[str] = []
        self.counts: list[int] = []

    def get_api_key(self):
        if not self.api_key:
            raise MissingAPIKeyError("Fake API key not found. Set it with: export FAKE_API_KEY=your_key_here")
        return self.api_key

    def generate(self, prompt, count):
        self.prompts.append(prompt)
        self.counts.append(count)
        result = self.rounds.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class ScriptedInput:
    """InputSource that replays actions and records the states it was shown."""

    def __init__(self, actions):
        self.actions = list(actions)
        self.shown = []

    def choose(self, state):
        self.shown.append(state)
        action = self.actions.pop(0)
        if isinstance(action, BaseException):
            raise action
        return action
