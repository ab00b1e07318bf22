"""Terminal prompt that asks the user to judge a response."""

import logging
from typing import Callable, Optional

from .types import Judgment

logger = logging.getLogger(__name__)

MENU = (
    "\n🤔 How was this response?",
    "1. 👍 Thumbs up (good response)",
    "2. 👎 Thumbs down (bad response)",
    "3. 💬 Add comment and thumbs up",
    "4. 💬 Add comment and thumbs down",
    "Press Enter to skip feedback.",
)
CHOICE_PROMPT = "Enter your choice (1-4, or Enter to skip): "
COMMENT_PROMPT = "Enter your comment: "

# choice -> (positive, asks for a comment)
CHOICES: dict[str, tuple[bool, bool]] = {
    "1": (True, False),
    "2": (False, False),
    "3": (True, True),
    "4": (False, True),
}


class FeedbackCollector:
    """
    Shows a fixed menu and blocks until the user picks an option.

    Empty input is an explicit skip. Anything unrecognized is treated the
    same way; there is no reprompt.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        print_func: Callable[..., None] = print,
    ):
        self._input = input_func
        self._print = print_func

    def collect(self) -> Optional[Judgment]:
        """Return the user's Judgment, or None if no feedback was given."""
        for line in MENU:
            self._print(line)

        choice = self._read(CHOICE_PROMPT)
        if choice is None:
            return None
        choice = choice.strip()

        if choice == "":
            return None

        if choice not in CHOICES:
            self._print("Invalid choice, skipping feedback.")
            logger.warning("Unrecognized feedback choice %r, treating as skip", choice)
            return None

        positive, wants_comment = CHOICES[choice]
        if not wants_comment:
            return Judgment(positive=positive)

        comment = self._read(COMMENT_PROMPT)
        if comment is None:
            return None
        return Judgment(positive=positive, comment=comment)

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt)
        except EOFError:
            logger.info("Input closed, skipping feedback")
            return None
