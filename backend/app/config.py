"""Typed settings configuration - single source of truth."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Model collaborator
    llm_provider: Literal["anthropic", "openai", "stub"] = "anthropic"
    anthropic_api_key: SecretStr = SecretStr("")
    anthropic_model: str = "claude-sonnet-4-20250514"
    openai_api_key: SecretStr = SecretStr("")
    openai_model: str = "gpt-4o-mini"
    max_tokens: int = 4000

    # Web search tool (conservative policy only)
    web_search_max_uses: int = 5

    # Budget policy for this deployment
    budget_policy: Literal["conservative", "exact_fit", "luxury"] = "exact_fit"

    # Logging
    log_level: str = "INFO"

    # UI
    ui_backend_url: str = "http://localhost:8000"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
