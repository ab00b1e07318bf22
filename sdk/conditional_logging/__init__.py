"""Conditional Logging - send telemetry only for responses a user judged."""

from .completion import CompletionClient
from .config import Settings
from .errors import ConfigError, PublishError, UpstreamError
from .feedback import FeedbackCollector
from .publisher import ConditionalPublisher
from .telemetry import logger_factory
from .types import Interaction, Judgment, Outcome
from .workflow import ConditionalLoggingRun, RunState, run_conditional_logging

__all__ = [
    "CompletionClient",
    "ConditionalLoggingRun",
    "ConditionalPublisher",
    "ConfigError",
    "FeedbackCollector",
    "Interaction",
    "Judgment",
    "Outcome",
    "PublishError",
    "RunState",
    "Settings",
    "UpstreamError",
    "logger_factory",
    "run_conditional_logging",
]
__version__ = "0.1.0"
