"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from git_commit_helper.git import NoStagedChangesError, VersionControlClient
from git_commit_helper.llm import BaseLLMProvider, LLMResult


class FakeVersionControlClient(VersionControlClient):
    """In-memory stand-in for GitClient."""

    def __init__(self, diff: str = "", recent_commits: str = ""):
        self.diff = diff
        self.recent_commits = recent_commits

    def get_staged_diff(self) -> str:
        if not self.diff:
            raise NoStagedChangesError("No staged changes found.")
        return self.diff

    def get_recent_commits(self, n: int = 3) -> str:
        return self.recent_commits


class FakeProvider(BaseLLMProvider):
    """Provider that records prompts and returns a canned reply."""

    def __init__(self, reply: str = "feat: add greeting helpers"):
        self.reply = reply
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> LLMResult:
        self.prompts.append(prompt)
        return LLMResult(text=self.reply, model="fake-model", input_tokens=10, output_tokens=5)


class FakeClock:
    """Manually advanced clock for freshness tests."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch):
    """Keep a developer's ANTHROPIC_API_KEY out of the tests."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, monkeypatch):
    """Point XDG_CONFIG_HOME at a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir))
    return temp_dir / "git-commit-helper"


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def sample_diff():
    """Sample staged diff for testing."""
    return """diff --git a/greet.py b/greet.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/greet.py
@@ -0,0 +1,5 @@
+def hello():
+    print("Hello, world!")
+
+def goodbye():
+    print("Goodbye!")
"""


@pytest.fixture
def sample_recent_commits():
    return "fix(auth): handle expired tokens\n\nchore: bump dependencies\n\nfeat: add export command"


@pytest.fixture
def fake_vcs(sample_diff, sample_recent_commits):
    return FakeVersionControlClient(diff=sample_diff, recent_commits=sample_recent_commits)


@pytest.fixture
def provider_factory():
    """Build FakeProvider instances with a chosen reply."""
    return FakeProvider
