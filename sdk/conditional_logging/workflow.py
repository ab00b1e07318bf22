"""
Orchestration of one conditional logging run.

A run moves through a fixed set of states:

    AWAITING_RESPONSE -> AWAITING_FEEDBACK | FAILED
    AWAITING_FEEDBACK -> PUBLISHING | SKIPPED
    PUBLISHING        -> DONE | FAILED

The publisher is only built on the AWAITING_FEEDBACK -> PUBLISHING
transition, and that transition requires a judgment.
"""

import enum
import logging
from typing import Callable, Optional

from .completion import CompletionClient
from .config import Settings
from .errors import ConditionalLoggingError, UpstreamError
from .feedback import FeedbackCollector
from .publisher import ConditionalPublisher
from .telemetry import ClientFactory, logger_factory
from .types import Interaction, Judgment, Outcome

logger = logging.getLogger(__name__)

SKIPPED_MESSAGE = "No user feedback provided. No data logged."
SUCCESS_MESSAGE = "Data logged and flushed successfully"


class RunState(enum.Enum):
    AWAITING_RESPONSE = "awaiting_response"
    AWAITING_FEEDBACK = "awaiting_feedback"
    PUBLISHING = "publishing"
    DONE = "done"
    SKIPPED = "skipped"
    FAILED = "failed"


TRANSITIONS: dict[RunState, frozenset[RunState]] = {
    RunState.AWAITING_RESPONSE: frozenset({RunState.AWAITING_FEEDBACK, RunState.FAILED}),
    RunState.AWAITING_FEEDBACK: frozenset({RunState.PUBLISHING, RunState.SKIPPED}),
    RunState.PUBLISHING: frozenset({RunState.DONE, RunState.FAILED}),
    RunState.DONE: frozenset(),
    RunState.SKIPPED: frozenset(),
    RunState.FAILED: frozenset(),
}

PublisherFactory = Callable[[], ConditionalPublisher]


class ConditionalLoggingRun:
    """
    One pass through the workflow. Not reusable: build a new run per prompt.
    """

    def __init__(
        self,
        settings: Settings,
        completion: CompletionClient,
        collector: FeedbackCollector,
        publisher_factory: PublisherFactory,
        print_func: Callable[..., None] = print,
    ):
        self.settings = settings
        self.completion = completion
        self.collector = collector
        self._publisher_factory = publisher_factory
        self._print = print_func

        self.state = RunState.AWAITING_RESPONSE
        self.interaction: Optional[Interaction] = None
        self.judgment: Optional[Judgment] = None
        self._started = False

    def run(self, prompt: str, system_prompt: Optional[str] = None) -> Outcome:
        if self._started:
            raise RuntimeError("A ConditionalLoggingRun can only be run once")
        self._started = True

        try:
            self.settings.validate()
        except ConditionalLoggingError as e:
            self._transition(RunState.FAILED)
            return Outcome(success=False, message=str(e), cause=e)

        self._print(f'🤖 Sending prompt to {self.completion.model}: "{prompt}"')
        try:
            self.interaction = self.completion.complete(prompt, system_prompt=system_prompt)
        except UpstreamError as e:
            logger.warning("Completion call failed: %s", e)
            self._transition(RunState.FAILED)
            return Outcome(success=False, message=str(e), cause=e)
        self._transition(RunState.AWAITING_FEEDBACK)

        response = self.interaction.response
        self._print(f'📤 Response: "{response}"')
        self._print(f"⏱️ LLM call took {self.interaction.duration:.2f} seconds.")

        self._print("\n⏳ Waiting for user feedback...")
        self.judgment = self.collector.collect()
        if self.judgment is None:
            self._transition(RunState.SKIPPED)
            self._print("⚠️ No user feedback provided. Nothing sent to telemetry.")
            return Outcome(success=False, message=SKIPPED_MESSAGE, response=response)

        return self._publish(self.interaction, self.judgment)

    def _publish(self, interaction: Interaction, judgment: Judgment) -> Outcome:
        self._transition(RunState.PUBLISHING, judgment=judgment)
        self._print("✅ User provided feedback - logging to telemetry...")

        result = self._publisher_factory().publish(interaction, judgment)
        if not result.success:
            self._transition(RunState.FAILED)
            return Outcome(
                success=False,
                message=str(result.error),
                response=interaction.response,
                judgment=judgment,
                cause=result.error,
            )

        self._transition(RunState.DONE)
        return Outcome(
            success=True,
            message=SUCCESS_MESSAGE,
            response=interaction.response,
            judgment=judgment,
        )

    def _transition(self, target: RunState, judgment: Optional[Judgment] = None) -> None:
        if target not in TRANSITIONS[self.state]:
            raise RuntimeError(f"Illegal transition {self.state.name} -> {target.name}")
        if target is RunState.PUBLISHING and judgment is None:
            raise RuntimeError("Cannot publish without a judgment")
        logger.debug("Run state %s -> %s", self.state.name, target.name)
        self.state = target


def run_conditional_logging(
    settings: Optional[Settings] = None,
    prompt: Optional[str] = None,
    system_prompt: Optional[str] = None,
    completion: Optional[CompletionClient] = None,
    collector: Optional[FeedbackCollector] = None,
    client_factory: Optional[ClientFactory] = None,
    print_func: Callable[..., None] = print,
) -> Outcome:
    """
    Run the workflow once with default collaborators built from settings.

    Configuration errors come back as a failed Outcome before any network
    call is made.
    """
    try:
        settings = settings or Settings.from_env()
    except ConditionalLoggingError as e:
        return Outcome(success=False, message=str(e), cause=e)

    completion = completion or CompletionClient(
        api_key=settings.openai_api_key,
        model=settings.model,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
    )
    collector = collector or FeedbackCollector(print_func=print_func)
    factory = client_factory or logger_factory(settings)

    run = ConditionalLoggingRun(
        settings=settings,
        completion=completion,
        collector=collector,
        publisher_factory=lambda: ConditionalPublisher(factory, print_func=print_func),
        print_func=print_func,
    )
    return run.run(prompt or settings.prompt, system_prompt=system_prompt)
