"""Single round-trip client for the chat completion service."""

import logging
import time
from typing import Any, Optional

from openai import OpenAI, OpenAIError

from .config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, DEFAULT_TEMPERATURE
from .errors import UpstreamError
from .types import NO_RESPONSE, Interaction

logger = logging.getLogger(__name__)


class CompletionClient:
    """
    Calls the completion API once per prompt and returns an Interaction.

    Deliberately not wrapped by any telemetry: nothing about the call is
    recorded until the user has judged the response.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        client: Optional[Any] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = client

    def complete(self, prompt: str, system_prompt: Optional[str] = None) -> Interaction:
        """
        Send one chat completion request.

        Raises UpstreamError if the request fails. An empty reply is not an
        error: the response becomes the "No response received" placeholder.
        """
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        logger.debug("Requesting completion from %s", self.model)
        start_time = time.time()
        try:
            completion = self._get_client().chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except OpenAIError as e:
            raise UpstreamError(str(e)) from e
        end_time = time.time()

        prompt_tokens, completion_tokens, total_tokens = _extract_usage(completion)

        return Interaction(
            prompt=prompt,
            response=_extract_text(completion),
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            start_time=start_time,
            end_time=end_time,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=total_tokens,
            system_prompt=system_prompt,
        )

    def _get_client(self) -> Any:
        if self._client is None:
            # One attempt per run
            self._client = OpenAI(api_key=self.api_key, max_retries=0)
        return self._client


def _extract_text(completion: Any) -> str:
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return NO_RESPONSE
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content or NO_RESPONSE


def _extract_usage(completion: Any) -> tuple[int, int, int]:
    """
    Read token counts from a completion response.

    Supports both OpenAI and Anthropic usage formats.
    """
    tokens_in = 0
    tokens_out = 0
    total = None

    usage = getattr(completion, "usage", None)
    if usage is not None:
        # OpenAI format
        if getattr(usage, "prompt_tokens", None) is not None:
            tokens_in = usage.prompt_tokens
        if getattr(usage, "completion_tokens", None) is not None:
            tokens_out = usage.completion_tokens
        if getattr(usage, "total_tokens", None) is not None:
            total = usage.total_tokens
        # Anthropic format
        if getattr(usage, "input_tokens", None) is not None:
            tokens_in = usage.input_tokens
        if getattr(usage, "output_tokens", None) is not None:
            tokens_out = usage.output_tokens

    if total is None:
        total = tokens_in + tokens_out
    return tokens_in, tokens_out, total
