#!/usr/bin/env python3
"""Financial insights example using the FinFlow AI client.

Set FINFLOW_INSIGHTS_PROVIDER=gemini and GEMINI_API_KEY to ask Gemini directly.
"""

import asyncio

from finflow_ai import create_insights_service, get_settings

SUMMARY = """Monthly summary for March:
- Income: 5,200.00
- Expenses: 4,100.00 (Housing 1,800.00, Food 650.00, Transport 300.00)
- Savings rate: 21%
"""


async def main() -> None:
    """Request insights for a sample summary."""
    async with create_insights_service(get_settings()) as service:
        print(await service.get_financial_insights(user_id=1, context=SUMMARY))


if __name__ == "__main__":
    asyncio.run(main())
