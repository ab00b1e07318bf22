"""
Run the conditional logging workflow once from the terminal.

Usage:
    export OPENAI_API_KEY="sk-..."
    export BRAINTRUST_API_KEY="..."
    conditional-logging
"""

import logging
import os
import sys

from dotenv import load_dotenv

from .workflow import run_conditional_logging


def main() -> int:
    load_dotenv()
    level_name = os.getenv("CONDITIONAL_LOGGING_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("🧠 Conditional Logging Test")
    print("=" * 37 + "\n")

    try:
        outcome = run_conditional_logging()
    except Exception as e:
        print(f"❌ A critical error occurred: {e}", file=sys.stderr)
        return 1

    if outcome.cause is not None:
        print(f"❌ {outcome.message}")
    print(f"\n📋 Final Result: {'SUCCESS' if outcome.success else 'FAILURE'}")
    print(f"Message: {outcome.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
