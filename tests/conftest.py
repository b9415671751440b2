"""Shared fixtures for catalog tests."""

import pytest

from design_tools_website.models import ExtractedMetadata


class ScriptedPrompter:
    """Prompter double that replays queued answers and records what was asked."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []
        self.messages = []

    def _next(self, kind, message):
        self.asked.append((kind, message))
        if not self.answers:
            raise AssertionError(f"Unexpected {kind} prompt: {message}")
        return self.answers.pop(0)

    def text(self, message, validate=None, placeholder=None):
        answer = self._next("text", message)
        if validate is not None and isinstance(answer, str):
            return validate(answer)
        return answer

    def confirm(self, message, default=True):
        return self._next("confirm", message)

    def select(self, message, options):
        self.asked.append(("options", [value for value, _ in options]))
        return self._next("select", message)

    def info(self, message):
        self.messages.append(("info", message))

    def success(self, message):
        self.messages.append(("success", message))

    def warn(self, message):
        self.messages.append(("warn", message))

    def error(self, message):
        self.messages.append(("error", message))


@pytest.fixture
def content_dir(tmp_path, monkeypatch):
    """Empty category directory, also used as the configured default."""
    directory = tmp_path / "tools"
    directory.mkdir()
    monkeypatch.setenv("TOOLS_CONTENT_DIR", str(directory))
    return directory


def fixed_extractor(title=None, description=None):
    calls = []

    def extract(url):
        calls.append(url)
        return ExtractedMetadata(title=title, description=description)

    extract.calls = calls
    return extract
