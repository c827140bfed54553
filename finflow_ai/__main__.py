"""
FinFlow AI command-line entry point.

Sends the configured prompt once and prints the reply:

    OPENROUTER_API_KEY=sk-or-... python -m finflow_ai
"""

import asyncio
import logging
import sys

from pydantic import ValidationError

from finflow_ai.client import OpenRouterClient
from finflow_ai.config import ClientConfig, Settings, get_settings
from finflow_ai.requester import CompletionRequester

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr so stdout carries only the completion."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # Set separately so an unknown level raises even when handlers already exist
    logging.getLogger().setLevel(settings.log_level.upper())


async def main(settings: Settings | None = None) -> None:
    """Run one completion request with the configured model and prompt."""
    settings = settings or get_settings()
    try:
        async with OpenRouterClient(ClientConfig.from_settings(settings)) as client:
            requester = CompletionRequester(
                client,
                model=settings.finflow_model,
                prompt=settings.finflow_prompt,
            )
            await requester.run()
    except Exception as e:
        logger.exception("Completion run aborted")
        print(f"Error: {e}", file=sys.stderr)


def run() -> None:
    """Console script entry point."""
    try:
        settings = get_settings()
        configure_logging(settings)
    except (ValidationError, ValueError) as e:
        logging.basicConfig(stream=sys.stderr)
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return
    asyncio.run(main(settings))


if __name__ == "__main__":
    run()
