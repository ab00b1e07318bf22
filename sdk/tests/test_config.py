"""Tests for environment-driven settings."""

import pytest

from conditional_logging.config import DEFAULT_MODEL, Settings
from conditional_logging.errors import ConfigError

ENV_VARS = [
    "OPENAI_API_KEY",
    "BRAINTRUST_API_KEY",
    "BRAINTRUST_APP_URL",
    "CONDITIONAL_LOGGING_PROJECT",
    "CONDITIONAL_LOGGING_MODEL",
    "CONDITIONAL_LOGGING_TEMPERATURE",
    "CONDITIONAL_LOGGING_MAX_TOKENS",
    "CONDITIONAL_LOGGING_PROMPT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings.from_env and validate."""

    def test_defaults(self):
        settings = Settings.from_env(dotenv=False)
        assert settings.model == DEFAULT_MODEL
        assert settings.temperature == 0.7
        assert settings.max_tokens == 300
        assert settings.app_url is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-1")
        monkeypatch.setenv("BRAINTRUST_API_KEY", "bt-1")
        monkeypatch.setenv("CONDITIONAL_LOGGING_TEMPERATURE", "0.2")
        monkeypatch.setenv("CONDITIONAL_LOGGING_MAX_TOKENS", "64")
        monkeypatch.setenv("BRAINTRUST_APP_URL", "https://bt.example.com")
        settings = Settings.from_env(dotenv=False)

        assert settings.openai_api_key == "sk-1"
        assert settings.telemetry_api_key == "bt-1"
        assert settings.temperature == 0.2
        assert settings.max_tokens == 64
        assert settings.app_url == "https://bt.example.com"
        settings.validate()

    def test_missing_telemetry_key(self):
        settings = Settings(openai_api_key="sk-1")
        with pytest.raises(ConfigError, match="BRAINTRUST_API_KEY"):
            settings.validate()

    def test_missing_both_keys_names_both(self):
        with pytest.raises(ConfigError) as exc_info:
            Settings().validate()
        assert "BRAINTRUST_API_KEY" in str(exc_info.value)
        assert "OPENAI_API_KEY" in str(exc_info.value)

    def test_malformed_number(self, monkeypatch):
        monkeypatch.setenv("CONDITIONAL_LOGGING_MAX_TOKENS", "lots")
        with pytest.raises(ConfigError, match="CONDITIONAL_LOGGING_MAX_TOKENS"):
            Settings.from_env(dotenv=False)
