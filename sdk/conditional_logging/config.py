"""Environment-driven settings for the conditional logging workflow."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_PROJECT = "conditional-logging"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 300
DEFAULT_PROMPT = "Explain quantum computing in simple terms for a 10-year-old."


@dataclass(frozen=True)
class Settings:
    """Credentials and generation parameters for one run."""

    openai_api_key: str = ""
    telemetry_api_key: str = ""
    app_url: Optional[str] = None
    project: str = DEFAULT_PROJECT
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Read settings from the process environment.

        Loads a ``.env`` file first unless ``dotenv`` is False. Credentials
        are not checked here; call ``validate()`` before any network call.
        """
        if dotenv:
            load_dotenv()

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            telemetry_api_key=os.getenv("BRAINTRUST_API_KEY", ""),
            app_url=os.getenv("BRAINTRUST_APP_URL") or None,
            project=os.getenv("CONDITIONAL_LOGGING_PROJECT", DEFAULT_PROJECT),
            model=os.getenv("CONDITIONAL_LOGGING_MODEL", DEFAULT_MODEL),
            temperature=_parse_number(
                "CONDITIONAL_LOGGING_TEMPERATURE", float, DEFAULT_TEMPERATURE
            ),
            max_tokens=_parse_number(
                "CONDITIONAL_LOGGING_MAX_TOKENS", int, DEFAULT_MAX_TOKENS
            ),
            prompt=os.getenv("CONDITIONAL_LOGGING_PROMPT", DEFAULT_PROMPT),
        )

    def validate(self) -> None:
        """Raise ConfigError naming every missing credential."""
        missing = []
        if not self.telemetry_api_key:
            missing.append("BRAINTRUST_API_KEY")
        if not self.openai_api_key:
            missing.append("OPENAI_API_KEY")
        if missing:
            raise ConfigError(
                f"Missing required environment variables: {', '.join(missing)}"
            )


def _parse_number(name: str, kind: type, default):
    raw: Optional[str] = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a {kind.__name__}, got {raw!r}") from e
