"""Application configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables and .env file.

    All variables are prefixed with ``MAFPOOL_`` (e.g. ``MAFPOOL_LOG_LEVEL``).
    """

    model_config = SettingsConfigDict(
        env_prefix="MAFPOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenAI defaults for the CLI
    openai_api_key: str | None = None
    openai_endpoint: str | None = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "text"
