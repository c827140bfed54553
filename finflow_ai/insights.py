"""Financial insights generated from a user's financial summary."""

import logging
from typing import Any

from finflow_ai.client import CompletionClient, OpenRouterClient
from finflow_ai.config import ClientConfig, Settings
from finflow_ai.constants import FINANCIAL_ANALYST_PROMPT, INSIGHTS_MODEL
from finflow_ai.exceptions import (
    AuthenticationError,
    CompletionError,
    EmptyCompletionError,
    InsufficientCreditsError,
)
from finflow_ai.gemini import GeminiClient
from finflow_ai.models import CompletionRequest

logger = logging.getLogger(__name__)

NO_INSIGHTS_MESSAGE = "No insights generated."


class FinancialInsightsService:
    """Ask the completion service for insights on a financial summary.

    Failures never propagate: the caller always gets displayable text,
    either the insights or a short explanation of why there are none.
    """

    def __init__(self, client: CompletionClient, model: str = INSIGHTS_MODEL) -> None:
        self.client = client
        self.model = model

    async def close(self) -> None:
        """Close the underlying completion client."""
        await self.client.close()

    async def __aenter__(self) -> "FinancialInsightsService":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get_financial_insights(self, user_id: int, context: str) -> str:
        """Generate insights for one user.

        Args:
            user_id: User the summary belongs to (used for logging).
            context: Financial summary text sent as the user message.

        Returns:
            Insight text, or a fallback message describing the failure.

        Raises:
            ValueError: If context is empty.
        """
        if not context.strip():
            raise ValueError("context must not be empty")

        logger.info(f"Requesting AI insights for user {user_id} with model {self.model}")
        request = CompletionRequest.from_prompt(
            context, model=self.model, system_prompt=FINANCIAL_ANALYST_PROMPT
        )

        try:
            completion = await self.client.send_completion(request)
            insights = completion.first_content()
        except EmptyCompletionError:
            logger.warning(f"No insights returned for user {user_id}")
            return NO_INSIGHTS_MESSAGE
        except (AuthenticationError, InsufficientCreditsError) as e:
            logger.error(f"AI service unavailable for user {user_id}: {e}")
            return (
                "AI Service Unavailable: Insufficient credits or invalid key "
                f"({e.status_code})."
            )
        except CompletionError as e:
            logger.error(f"Error calling AI service for user {user_id}: {e}")
            if e.status_code is not None:
                return f"AI Service Error: {e.status_code}"
            return f"Failed to generate insights: {e.message}"

        logger.info(f"Successfully received AI insights for user {user_id}")
        return insights


def create_insights_service(settings: Settings) -> FinancialInsightsService:
    """Build the insights service for the configured provider.

    Raises:
        ValueError: If the selected provider has no API key.
    """
    if settings.finflow_insights_provider == "gemini":
        logger.info(f"Insights provider: gemini ({settings.gemini_model})")
        return FinancialInsightsService(
            GeminiClient(settings.gemini_api_key), model=settings.gemini_model
        )

    logger.info(f"Insights provider: openrouter ({settings.finflow_insights_model})")
    return FinancialInsightsService(
        OpenRouterClient(ClientConfig.from_settings(settings)),
        model=settings.finflow_insights_model,
    )
