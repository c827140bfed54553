"""FinFlow AI completion client.

Sends chat completions to OpenRouter through the OpenAI-compatible SDK.

Example usage:

    import asyncio
    import os

    from finflow_ai import ClientConfig, CompletionRequester, OpenRouterClient

    async def main():
        config = ClientConfig(
            api_key=os.environ["OPENROUTER_API_KEY"],
            default_headers={"HTTP-Referer": "http://localhost:8080", "X-Title": "FinFlow AI"},
        )
        async with OpenRouterClient(config) as client:
            await CompletionRequester(client, prompt="What is 2 + 2?").run()

    asyncio.run(main())

    # Financial insights
    async with OpenRouterClient(config) as client:
        service = FinancialInsightsService(client)
        print(await service.get_financial_insights(1, "Income 5000, expenses 4200"))
"""

from finflow_ai.client import CompletionClient, OpenRouterClient
from finflow_ai.config import ClientConfig, Settings, get_settings
from finflow_ai.constants import (
    DEFAULT_MODEL,
    DEFAULT_PROMPT,
    GEMINI_FLASH,
    GPT_4O,
    INSIGHTS_MODEL,
    LLAMA_3_2_3B_FREE,
    OPENROUTER_BASE_URL,
)
from finflow_ai.exceptions import (
    AuthenticationError,
    CompletionError,
    EmptyCompletionError,
    InsufficientCreditsError,
    MalformedResponseError,
    NetworkError,
    RateLimitError,
    ServerError,
)
from finflow_ai.gemini import GeminiClient
from finflow_ai.insights import FinancialInsightsService, create_insights_service
from finflow_ai.models import (
    ChatMessage,
    Choice,
    ChoiceMessage,
    Completion,
    CompletionRequest,
    UsageInfo,
)
from finflow_ai.requester import CompletionRequester

__version__ = "0.1.0"
__all__ = [
    # Clients
    "CompletionClient",
    "OpenRouterClient",
    "GeminiClient",
    "CompletionRequester",
    "FinancialInsightsService",
    "create_insights_service",
    # Configuration
    "ClientConfig",
    "Settings",
    "get_settings",
    # Model constants
    "DEFAULT_MODEL",
    "DEFAULT_PROMPT",
    "GEMINI_FLASH",
    "GPT_4O",
    "INSIGHTS_MODEL",
    "LLAMA_3_2_3B_FREE",
    "OPENROUTER_BASE_URL",
    # Models
    "ChatMessage",
    "Choice",
    "ChoiceMessage",
    "Completion",
    "CompletionRequest",
    "UsageInfo",
    # Exceptions
    "AuthenticationError",
    "CompletionError",
    "EmptyCompletionError",
    "InsufficientCreditsError",
    "MalformedResponseError",
    "NetworkError",
    "RateLimitError",
    "ServerError",
]
