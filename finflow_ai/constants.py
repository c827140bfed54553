"""Constants for FinFlow AI.

Single source of truth for the OpenRouter endpoint, model identifiers and
prompt text. Update here when model versions change.
"""

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"

# OpenRouter attribution headers
DEFAULT_HTTP_REFERER = "http://localhost:8080"
DEFAULT_APP_TITLE = "FinFlow AI"

# Models (OpenRouter "<vendor>/<model>" identifiers)
GPT_4O = "openai/gpt-4o"
LLAMA_3_2_3B_FREE = "meta-llama/llama-3.2-3b-instruct:free"

# Gemini models (Google GenAI, used directly rather than through OpenRouter)
GEMINI_FLASH = "gemini-2.0-flash"

DEFAULT_MODEL = GPT_4O
# Free model for insights; switch to GPT_4O when credits are available
INSIGHTS_MODEL = LLAMA_3_2_3B_FREE

DEFAULT_PROMPT = "What is the meaning of life?"

FINANCIAL_ANALYST_PROMPT = (
    "You are a financial analyst assistant. Provide insights based on the given summary."
)

# Timeouts in seconds
DEFAULT_TIMEOUT = 120.0
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_MAX_RETRIES = 2

# Google GenAI HttpOptions timeout is in milliseconds
GEMINI_TIMEOUT_MS = 90_000
