"""Type definitions for the conditional logging workflow."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from .errors import ConditionalLoggingError, PublishError

NO_RESPONSE = "No response received"


def utc_timestamp() -> str:
    """Current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Interaction:
    """One prompt/response exchange with the completion service."""

    prompt: str
    response: str
    model: str
    temperature: float
    max_tokens: int
    start_time: float  # epoch seconds
    end_time: float
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    system_prompt: Optional[str] = None

    @property
    def messages(self) -> list[dict[str, str]]:
        """The chat messages exactly as sent to the completion service."""
        messages = []
        if self.system_prompt:
            messages.append({"role": "system", "content": self.system_prompt})
        messages.append({"role": "user", "content": self.prompt})
        return messages

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def estimated_cost(self) -> float:
        return calculate_cost(self.model, self.prompt_tokens, self.completion_tokens)


@dataclass(frozen=True)
class Judgment:
    """A human's thumbs up/down on a response, with an optional comment."""

    positive: bool
    comment: Optional[str] = None

    @property
    def score(self) -> int:
        return 1 if self.positive else 0


@dataclass(frozen=True)
class TelemetryEvent:
    """
    Publish-ready projection of an Interaction and its Judgment.

    Only exists when a judgment was given: constructing one with
    ``judgment=None`` raises ValueError.
    """

    span_id: str
    interaction: Interaction
    judgment: Judgment
    timestamp: str = field(default_factory=utc_timestamp)

    def __post_init__(self) -> None:
        if self.judgment is None:
            raise ValueError("TelemetryEvent requires a judgment")

    def interaction_record(self) -> dict[str, Any]:
        """Fields for the single span log call."""
        interaction = self.interaction
        return {
            "input": interaction.messages,
            "output": interaction.response,
            "metadata": {
                "model": interaction.model,
                "temperature": interaction.temperature,
                "max_tokens": interaction.max_tokens,
                "estimated_cost": interaction.estimated_cost,
                "timestamp": self.timestamp,
            },
            "metrics": {
                "start": interaction.start_time,
                "end": interaction.end_time,
                "prompt_tokens": interaction.prompt_tokens,
                "completion_tokens": interaction.completion_tokens,
                "total_tokens": interaction.total_tokens,
            },
        }

    def feedback_record(self) -> dict[str, Any]:
        """Fields for the feedback call, keyed to the span id."""
        record: dict[str, Any] = {
            "id": self.span_id,
            "scores": {"quality": self.judgment.score},
            "metadata": {"timestamp": self.timestamp},
        }
        if self.judgment.comment is not None:
            record["comment"] = self.judgment.comment
        return record


@dataclass(frozen=True)
class PublishResult:
    """Result of one publish attempt."""

    span_id: Optional[str] = None
    error: Optional[PublishError] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Outcome:
    """Terminal result of one workflow run."""

    success: bool
    message: str
    response: Optional[str] = None
    judgment: Optional[Judgment] = None
    cause: Optional[ConditionalLoggingError] = None


# Pricing per 1M tokens
# Format: (input_price_per_1m, output_price_per_1m)
MODEL_PRICING: dict[str, tuple[float, float]] = {
    "gpt-5": (2.00, 8.00),
    "gpt-5-mini": (0.10, 0.40),
    "gpt-4o": (2.50, 10.00),
    "gpt-4o-mini": (0.15, 0.60),
    "gpt-4.1": (2.00, 8.00),
    "gpt-4.1-mini": (0.40, 1.60),
    "gpt-3.5-turbo": (0.50, 1.50),
}


def calculate_cost(model: str, tokens_in: int, tokens_out: int) -> float:
    """
    Estimate cost in USD for a model and token counts.

    Versioned model names (e.g. gpt-4o-mini-2024-07-18) match the longest
    base name in the pricing table. Unknown models cost 0.
    """
    pricing = MODEL_PRICING.get(model)

    if pricing is None:
        model_lower = model.lower()
        for base_model in sorted(MODEL_PRICING.keys(), key=len, reverse=True):
            if model_lower.startswith(base_model.lower()):
                pricing = MODEL_PRICING[base_model]
                break

    if pricing is None:
        return 0.0

    input_price, output_price = pricing
    cost = (tokens_in * input_price / 1_000_000) + (tokens_out * output_price / 1_000_000)
    return round(cost, 6)
