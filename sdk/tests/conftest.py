"""Shared test fixtures for conditional logging tests."""

import pytest

from conditional_logging.config import Settings
from conditional_logging.types import Interaction


class MockUsage:
    """Mock OpenAI usage object."""
    def __init__(self, prompt_tokens=12, completion_tokens=30, total_tokens=42):
        self.prompt_tokens = prompt_tokens
        self.completion_tokens = completion_tokens
        self.total_tokens = total_tokens


class MockMessage:
    def __init__(self, content):
        self.content = content


class MockChoice:
    def __init__(self, content):
        self.message = MockMessage(content)


class MockCompletion:
    """Mock OpenAI ChatCompletion response."""
    def __init__(self, content="pong", choices=None, usage=None):
        self.choices = [MockChoice(content)] if choices is None else choices
        self.usage = MockUsage() if usage is None else usage


class FakeOpenAI:
    """Stands in for openai.OpenAI; records create() calls."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else MockCompletion()
        self.error = error
        self.calls = []
        self.chat = self
        self.completions = self

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeSpan:
    def __init__(self, client):
        self._client = client
        self.id = "span-1"

    def log(self, **fields):
        self._client.calls.append("log")
        self._client.logged.append(fields)

    def end(self):
        self._client.calls.append("end")


class FakeTelemetryClient:
    """Records every call made by the publisher, in order."""

    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.calls = []
        self.spans = []
        self.logged = []
        self.feedback = []

    def start_span(self, name=None, type=None):
        self.calls.append("start_span")
        self.spans.append({"name": name, "type": type})
        return FakeSpan(self)

    def log_feedback(self, **record):
        self.calls.append("log_feedback")
        if self.fail_on == "log_feedback":
            raise RuntimeError("feedback rejected")
        self.feedback.append(record)

    def flush(self):
        self.calls.append("flush")
        if self.fail_on == "flush":
            raise RuntimeError("backend unavailable")


class RecordingFactory:
    """Client factory that records whether a client was ever constructed."""

    def __init__(self, client=None, error=None):
        self.client = client or FakeTelemetryClient()
        self.error = error
        self.constructed = 0

    def __call__(self):
        self.constructed += 1
        if self.error is not None:
            raise self.error
        return self.client


class ScriptedInput:
    """input() replacement that returns queued lines and records prompts."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test", telemetry_api_key="bt-test", project="test-project")


@pytest.fixture
def interaction():
    """A sample Interaction for testing."""
    return Interaction(
        prompt="ping",
        response="pong",
        model="gpt-4o-mini",
        temperature=0.7,
        max_tokens=300,
        start_time=1_700_000_000.0,
        end_time=1_700_000_001.5,
        prompt_tokens=12,
        completion_tokens=30,
        total_tokens=42,
    )


@pytest.fixture
def recording_factory():
    return RecordingFactory()


@pytest.fixture
def printed():
    """print() replacement that collects output lines."""
    lines = []

    def _print(*args, **kwargs):
        lines.append(" ".join(str(a) for a in args))

    _print.lines = lines
    return _print
