"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


class ScriptedPrompter:
    """Prompter that replays canned responses per question name."""

    def __init__(self, responses: dict):
        self.responses = {name: list(values) for name, values in responses.items()}
        self.asked = []
        self.choices = {}
        self.rejections = []

    def ask(self, question, choices, answers):
        self.asked.append(question.name)
        self.choices[question.name] = choices
        try:
            return self.responses[question.name].pop(0)
        except (KeyError, IndexError):
            raise AssertionError(f"Unexpected question: {question.name}")

    def reject(self, question, message):
        self.rejections.append((question.name, message))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def make_prompter():
    """Factory for scripted prompters."""
    return ScriptedPrompter


@pytest.fixture
def sample_config_dict():
    """Sample configuration using commitizen-style camelCase keys."""
    return {
        "types": [
            {"value": "feat", "name": "feat:     A new feature"},
            {"value": "fix", "name": "fix:      A bug fix"},
            {"value": "docs", "name": "docs:     Documentation only changes"},
            {"value": "WIP", "name": "WIP:      Work in progress"},
        ],
        "scopes": [{"name": "accounts"}, {"name": "admin"}, {"name": "exampleScope"}],
        "scopeOverrides": {
            "fix": [{"name": "merge"}, {"name": "style"}, {"name": "e2eTest"}],
        },
        "allowCustomScopes": True,
        "allowBreakingChanges": ["feat", "fix"],
        "subjectLimit": 72,
    }


@pytest.fixture
def prepared_commit_text():
    """A prepared commit message left over from an aborted commit."""
    return (
        "feat: add x\n"
        "\n"
        "more detail\n"
        "second line\n"
        "# Please enter the commit message for your changes.\n"
        "# Lines starting with '#' will be ignored.\n"
    )
