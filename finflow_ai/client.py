"""Completion client capability and its OpenRouter implementation."""

import contextlib
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx
import openai
from pydantic import ValidationError

from finflow_ai.config import ClientConfig, mask_secret
from finflow_ai.exceptions import (
    AuthenticationError,
    CompletionError,
    InsufficientCreditsError,
    MalformedResponseError,
    NetworkError,
    RateLimitError,
    ServerError,
)
from finflow_ai.models import Completion, CompletionRequest

logger = logging.getLogger(__name__)


def _parse_retry_after(response: httpx.Response | None) -> float | None:
    """Read the Retry-After header in seconds, if present and numeric."""
    if response is None:
        return None
    retry_after_str = response.headers.get("retry-after")
    if retry_after_str:
        with contextlib.suppress(ValueError):
            return float(retry_after_str)
    return None


def error_for_status(status: int, detail: str, retry_after: float | None = None) -> CompletionError:
    """Build the error variant matching an HTTP status code."""
    if status == 401:
        return AuthenticationError(f"Authentication failed: {detail}", status_code=401)
    elif status == 402:
        return InsufficientCreditsError(f"Insufficient credits: {detail}")
    elif status == 429:
        return RateLimitError(f"Rate limit exceeded: {detail}", retry_after=retry_after)
    elif status >= 500:
        return ServerError(f"Server error: {detail}", status_code=status)
    else:
        return CompletionError(f"Request failed: {detail}", status_code=status)


class CompletionClient(ABC):
    """Capability for sending one chat completion request.

    Implementations raise only CompletionError variants for remote failures,
    so callers and test doubles share a single contract.
    """

    @abstractmethod
    async def send_completion(self, request: CompletionRequest) -> Completion:
        """
        Send a completion request and return the parsed response.

        Args:
            request: Model, messages and stream flag to forward unchanged

        Returns:
            Completion with zero or more choices

        Raises:
            CompletionError: If the request fails
        """
        ...

    async def close(self) -> None:
        """Release underlying resources."""
        return None

    async def __aenter__(self) -> "CompletionClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


class OpenRouterClient(CompletionClient):
    """Completion client for OpenRouter via the OpenAI-compatible SDK.

    Example:
        config = ClientConfig(api_key="sk-or-...", default_headers={"X-Title": "FinFlow AI"})
        async with OpenRouterClient(config) as client:
            completion = await client.send_completion(
                CompletionRequest.from_prompt("Hello!", model="openai/gpt-4o")
            )
            print(completion.first_content())
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the client.

        Args:
            config: Connection settings. The API key must be non-empty.

        Raises:
            ValueError: If no API key is configured.
        """
        if not config.api_key:
            raise ValueError(
                "OpenRouter API key not configured. "
                "Set the OPENROUTER_API_KEY environment variable."
            )
        self.config = config
        self._client = openai.AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            default_headers=dict(config.default_headers),
            timeout=httpx.Timeout(config.timeout, connect=config.connect_timeout),
            max_retries=config.max_retries,
        )
        logger.info(
            f"OpenRouter client configured for {config.base_url} "
            f"(API key ending in {mask_secret(config.api_key)})"
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()

    async def send_completion(self, request: CompletionRequest) -> Completion:
        """Send one non-streaming chat completion to OpenRouter.

        Raises:
            ValueError: If the request asks for streaming.
            AuthenticationError: If the API key is rejected.
            InsufficientCreditsError: If the account is out of credits.
            RateLimitError: If the rate limit is exceeded.
            ServerError: If OpenRouter or the upstream provider fails.
            NetworkError: If the endpoint cannot be reached.
            MalformedResponseError: If the body is not a chat completion.
            CompletionError: For other HTTP errors.
        """
        if request.stream:
            raise ValueError(
                f"Streaming is not supported for model '{request.model}'. "
                "Send the request with stream=False."
            )

        logger.debug(f"Sending completion: model={request.model} messages={len(request.messages)}")
        try:
            raw = await self._client.chat.completions.with_raw_response.create(
                **request.to_payload()
            )
        except openai.AuthenticationError as e:
            logger.error(f"OpenRouter auth error: {e}")
            raise AuthenticationError(f"Authentication failed: {e.message}") from e
        except openai.RateLimitError as e:
            logger.warning(f"OpenRouter rate limit: {e}")
            raise RateLimitError(
                f"Rate limit exceeded: {e.message}",
                retry_after=_parse_retry_after(e.response),
            ) from e
        except openai.APIStatusError as e:
            logger.error(f"OpenRouter API error: {e.status_code} {e.message}")
            raise error_for_status(e.status_code, e.message) from e
        except openai.APIConnectionError as e:
            logger.error(f"OpenRouter connection error: {e}")
            raise NetworkError(f"Could not reach {self.config.base_url}: {e}") from e

        return self._parse(raw.http_response)

    def _parse(self, response: httpx.Response) -> Completion:
        """Parse a 2xx body, surfacing in-band errors OpenRouter reports with status 200."""
        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response is not JSON: {response.text[:200]}") from e

        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected a JSON object, got {type(data).__name__}")

        error = data.get("error")
        if error:
            detail = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            code = error.get("code") if isinstance(error, dict) else None
            if isinstance(code, str):
                with contextlib.suppress(ValueError):
                    code = int(code)
            logger.error(f"OpenRouter returned an error body: {code} {detail}")
            if isinstance(code, int):
                raise error_for_status(code, detail, _parse_retry_after(response))
            raise CompletionError(f"Request failed: {detail}")

        try:
            completion = Completion.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected completion shape: {e}") from e

        if completion.usage:
            logger.info(
                f"Completion received: model={completion.model} "
                f"tokens={completion.usage.total_tokens}"
            )
        return completion
