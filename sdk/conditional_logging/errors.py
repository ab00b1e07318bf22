"""Error taxonomy for the conditional logging workflow."""


class ConditionalLoggingError(Exception):
    """Base class for errors reported as a failed run outcome."""


class ConfigError(ConditionalLoggingError):
    """A required setting is missing or malformed."""


class UpstreamError(ConditionalLoggingError):
    """The completion call failed."""


class PublishError(ConditionalLoggingError):
    """Constructing the telemetry client, logging, or flushing failed."""
