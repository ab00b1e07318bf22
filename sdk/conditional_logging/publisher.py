"""Feedback-gated publishing of one interaction to the telemetry backend."""

import logging
from typing import Callable, Optional

from .errors import PublishError
from .telemetry import ClientFactory
from .types import Interaction, Judgment, PublishResult, TelemetryEvent

logger = logging.getLogger(__name__)


class ConditionalPublisher:
    """
    Builds the telemetry logger and publishes one interaction plus its feedback.

    The client factory is only called from publish(), so no telemetry logger
    exists before a judgment does.
    """

    def __init__(
        self,
        client_factory: ClientFactory,
        span_name: str = "Manual LLM Call",
        print_func: Callable[..., None] = print,
    ):
        self._client_factory = client_factory
        self.span_name = span_name
        self._print = print_func

    def publish(self, interaction: Interaction, judgment: Judgment) -> PublishResult:
        """
        Log the interaction and judgment on one span and flush.

        Never raises for backend failures: they come back as a failed
        PublishResult carrying a PublishError.
        """
        if judgment is None:
            raise ValueError("publish() requires a judgment")

        span_id: Optional[str] = None
        try:
            client = self._client_factory()
            self._print("✅ Telemetry logger initialized with async_flush=False")

            span = client.start_span(name=self.span_name, type="llm")
            span_id = span.id
            try:
                event = TelemetryEvent(span_id=span.id, interaction=interaction, judgment=judgment)

                span.log(**event.interaction_record())
                self._print("📊 Logged input/output/metrics (buffered)")

                client.log_feedback(**event.feedback_record())
                suffix = f' - "{judgment.comment}"' if judgment.comment else ""
                self._print(f"👤 User feedback logged: {'👍' if judgment.positive else '👎'}{suffix}")
            finally:
                span.end()

            self._print("🚀 Flushing data to telemetry backend...")
            client.flush()
            self._print("✅ Data successfully flushed!")
        except Exception as e:
            logger.warning("Failed to publish interaction: %s", e)
            error = PublishError(str(e) or type(e).__name__)
            error.__cause__ = e
            return PublishResult(span_id=span_id, error=error)

        return PublishResult(span_id=span_id)
