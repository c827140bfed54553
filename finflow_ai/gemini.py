"""Completion client for Gemini models via the Google GenAI SDK."""

import logging

import httpx
from google import genai
from google.genai import errors, types
from google.genai.types import HttpOptions

from finflow_ai.client import CompletionClient, error_for_status
from finflow_ai.constants import GEMINI_TIMEOUT_MS
from finflow_ai.exceptions import NetworkError
from finflow_ai.models import (
    Choice,
    ChoiceMessage,
    Completion,
    CompletionRequest,
    UsageInfo,
)

logger = logging.getLogger(__name__)


class GeminiClient(CompletionClient):
    """Completion client that talks to Gemini directly instead of through OpenRouter."""

    def __init__(self, api_key: str, timeout_ms: int = GEMINI_TIMEOUT_MS) -> None:
        """
        Initialize Gemini client.

        Args:
            api_key: Google API key.
            timeout_ms: SDK request timeout in milliseconds.

        Raises:
            ValueError: If no API key is configured.
        """
        if not api_key:
            raise ValueError(
                "Gemini API key not configured. Set the GEMINI_API_KEY environment variable."
            )
        self._client = genai.Client(
            api_key=api_key,
            http_options=HttpOptions(timeout=timeout_ms),
        )

    def _build_request(
        self, request: CompletionRequest
    ) -> tuple[list[types.Content], str | None]:
        """Split messages into Gemini contents and a system instruction."""
        system_parts = []
        contents = []
        for message in request.messages:
            if message.role == "system":
                system_parts.append(message.content)
            else:
                # Gemini calls the assistant role "model"
                role = "model" if message.role == "assistant" else "user"
                contents.append(types.Content(role=role, parts=[types.Part(text=message.content)]))
        system_instruction = "\n\n".join(system_parts) if system_parts else None
        return contents, system_instruction

    async def send_completion(self, request: CompletionRequest) -> Completion:
        """Send one non-streaming completion to Gemini.

        Raises:
            ValueError: If the request asks for streaming.
            AuthenticationError: If the API key is rejected.
            RateLimitError: If the quota is exhausted.
            ServerError: If Gemini fails.
            NetworkError: If the endpoint cannot be reached.
            CompletionError: For other API errors.
        """
        if request.stream:
            raise ValueError(
                f"Streaming is not supported for model '{request.model}'. "
                "Send the request with stream=False."
            )

        contents, system_instruction = self._build_request(request)
        config = types.GenerateContentConfig()
        if system_instruction:
            config.system_instruction = system_instruction

        try:
            response = await self._client.aio.models.generate_content(
                model=request.model,
                contents=contents,
                config=config,
            )
        except errors.APIError as e:
            logger.error(f"Gemini API error: {e.code} {e.message}")
            raise error_for_status(e.code, e.message or str(e)) from e
        except httpx.TransportError as e:
            logger.error(f"Gemini connection error: {e}")
            raise NetworkError(f"Could not reach Gemini: {e}") from e

        return self._to_completion(request.model, response)

    def _to_completion(self, model: str, response: types.GenerateContentResponse) -> Completion:
        """Convert a Gemini response into the shared Completion shape."""
        choices = []
        text = response.text
        if text is not None:
            finish_reason = None
            if response.candidates and response.candidates[0].finish_reason:
                finish_reason = str(response.candidates[0].finish_reason)
            choices.append(
                Choice(
                    message=ChoiceMessage(role="assistant", content=text),
                    finish_reason=finish_reason,
                )
            )

        usage = None
        if response.usage_metadata:
            prompt_tokens = response.usage_metadata.prompt_token_count or 0
            completion_tokens = response.usage_metadata.candidates_token_count or 0
            usage = UsageInfo(
                prompt_tokens=prompt_tokens,
                completion_tokens=completion_tokens,
                total_tokens=prompt_tokens + completion_tokens,
            )

        return Completion(model=model, choices=choices, usage=usage)
