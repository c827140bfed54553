"""Shared pytest fixtures.

No test talks to OpenRouter: client tests fake the HTTP layer with
pytest-httpx and everything else uses StubCompletionClient.
"""

from typing import Any

import pytest

from finflow_ai.client import CompletionClient
from finflow_ai.config import ClientConfig, get_settings
from finflow_ai.models import Completion, CompletionRequest

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"

ENV_VARS = [
    "OPENROUTER_API_KEY",
    "OPENROUTER_BASE_URL",
    "OPENROUTER_HTTP_REFERER",
    "OPENROUTER_APP_TITLE",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "FINFLOW_MODEL",
    "FINFLOW_INSIGHTS_MODEL",
    "FINFLOW_INSIGHTS_PROVIDER",
    "FINFLOW_PROMPT",
    "REQUEST_TIMEOUT",
    "CONNECT_TIMEOUT",
    "MAX_RETRIES",
    "LOG_LEVEL",
]


class StubCompletionClient(CompletionClient):
    """Test double that records requests and replays a fixed outcome."""

    def __init__(
        self,
        completion: Completion | None = None,
        error: Exception | None = None,
    ) -> None:
        self.completion = completion
        self.error = error
        self.requests: list[CompletionRequest] = []
        self.closed = False

    async def send_completion(self, request: CompletionRequest) -> Completion:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        assert self.completion is not None
        return self.completion

    async def close(self) -> None:
        self.closed = True


def completion_body(content: str | None = "Hello!", **overrides: Any) -> dict[str, Any]:
    """OpenRouter-style chat completion JSON body."""
    body: dict[str, Any] = {
        "id": "gen-123",
        "model": "openai/gpt-4o",
        "object": "chat.completion",
        "created": 1735689600,
        "provider": "OpenAI",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 14, "completion_tokens": 5, "total_tokens": 19},
    }
    body.update(overrides)
    return body


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment variables out of settings under test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client_config() -> ClientConfig:
    """Client config with a test key and no SDK retries."""
    return ClientConfig(
        api_key="sk-or-test-key-1234",
        default_headers={"HTTP-Referer": "http://localhost:8080", "X-Title": "FinFlow AI"},
        max_retries=0,
    )


@pytest.fixture
def make_completion():
    """Factory for Completion fixtures."""

    def _make(content: str | None = "42", **overrides: Any) -> Completion:
        return Completion.model_validate(completion_body(content, **overrides))

    return _make
