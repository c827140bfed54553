"""
Configuration management using pydantic-settings.
Loads from environment variables and ./.env
"""

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from finflow_ai.constants import (
    DEFAULT_APP_TITLE,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_HTTP_REFERER,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MODEL,
    DEFAULT_PROMPT,
    DEFAULT_TIMEOUT,
    GEMINI_FLASH,
    INSIGHTS_MODEL,
    OPENROUTER_BASE_URL,
)


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenRouter
    openrouter_api_key: str = ""
    openrouter_base_url: str = OPENROUTER_BASE_URL
    openrouter_http_referer: str = DEFAULT_HTTP_REFERER
    openrouter_app_title: str = DEFAULT_APP_TITLE

    # Gemini (alternative insights provider)
    gemini_api_key: str = ""
    gemini_model: str = GEMINI_FLASH

    # Request
    finflow_model: str = DEFAULT_MODEL
    finflow_insights_model: str = INSIGHTS_MODEL
    finflow_insights_provider: Literal["openrouter", "gemini"] = "openrouter"
    finflow_prompt: str = DEFAULT_PROMPT
    request_timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES

    # Logging
    log_level: str = "INFO"

    @property
    def default_headers(self) -> dict[str, str]:
        """OpenRouter attribution headers sent with every request."""
        return {
            "HTTP-Referer": self.openrouter_http_referer,
            "X-Title": self.openrouter_app_title,
        }


class ClientConfig(BaseModel):
    """Immutable connection settings for a completion client."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., repr=False)
    default_headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    base_url: str = OPENROUTER_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES

    @field_validator("default_headers")
    @classmethod
    def _freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClientConfig":
        """Build client config from application settings."""
        return cls(
            api_key=settings.openrouter_api_key,
            default_headers=settings.default_headers,
            base_url=settings.openrouter_base_url,
            timeout=settings.request_timeout,
            connect_timeout=settings.connect_timeout,
            max_retries=settings.max_retries,
        )


def mask_secret(secret: str, visible: int = 4) -> str:
    """Mask a secret for logging, keeping only the last few characters."""
    if not secret:
        return "<unset>"
    if len(secret) <= visible:
        return "*" * len(secret)
    return f"...{secret[-visible:]}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
