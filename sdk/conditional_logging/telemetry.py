"""Deferred construction of the Braintrust logger."""

import logging
from typing import Callable

import braintrust
from braintrust.logger import Logger

from .config import Settings

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], Logger]


def logger_factory(settings: Settings) -> ClientFactory:
    """
    Return a callable that builds the Braintrust logger when invoked.

    Building the logger is what gets gated: nothing here runs until the
    returned factory is called. The logger is created with
    ``async_flush=False`` so records only leave the process on flush().
    """

    def factory() -> Logger:
        logger.debug("Initializing Braintrust logger for project %s", settings.project)
        return braintrust.init_logger(
            project=settings.project,
            api_key=settings.telemetry_api_key,
            app_url=settings.app_url,
            async_flush=False,
        )

    return factory
