#!/usr/bin/env python3
"""Basic completion example using the FinFlow AI client."""

import asyncio

from finflow_ai import ClientConfig, CompletionRequest, OpenRouterClient, get_settings


async def main() -> None:
    """Demonstrate one completion with usage reporting."""
    config = ClientConfig.from_settings(get_settings())
    async with OpenRouterClient(config) as client:
        completion = await client.send_completion(
            CompletionRequest.from_prompt("What is 2 + 2?", model="openai/gpt-4o-mini")
        )

        print(f"Response: {completion.first_content()}")
        print(f"Model: {completion.model}")
        if completion.usage:
            print(f"Tokens: {completion.usage.total_tokens}")


if __name__ == "__main__":
    asyncio.run(main())
