"""Single-shot completion requester."""

import logging
import sys
from typing import TextIO

from finflow_ai.client import CompletionClient
from finflow_ai.constants import DEFAULT_MODEL, DEFAULT_PROMPT
from finflow_ai.exceptions import CompletionError
from finflow_ai.models import CompletionRequest

logger = logging.getLogger(__name__)


class CompletionRequester:
    """Send one prompt and print the first choice.

    Example:
        async with OpenRouterClient(config) as client:
            await CompletionRequester(client).run()
    """

    def __init__(
        self,
        client: CompletionClient,
        model: str = DEFAULT_MODEL,
        prompt: str = DEFAULT_PROMPT,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.client = client
        self.model = model
        self.prompt = prompt
        self._stdout = stdout
        self._stderr = stderr

    def build_request(self) -> CompletionRequest:
        """Build the single-user-message, non-streaming request."""
        return CompletionRequest.from_prompt(self.prompt, model=self.model)

    async def run(self) -> str | None:
        """Perform the request and print its outcome.

        Only CompletionError variants are reported here. Anything else is a
        bug in the client and propagates to the entry point, which logs it.

        Returns:
            The printed content, or None if the completion failed.
        """
        request = self.build_request()
        try:
            completion = await self.client.send_completion(request)
            content = completion.first_content()
        except CompletionError as e:
            logger.error(f"Completion failed ({type(e).__name__}): {e}")
            print(f"Error: {e}", file=self._stderr or sys.stderr)
            return None

        print(content, file=self._stdout or sys.stdout)
        return content
