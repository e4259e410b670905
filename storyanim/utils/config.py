"""Application configuration."""
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STORYANIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("STORYANIM_LOG_LEVEL", "LOG_LEVEL"),
    )
    # Viewport used by the CLI when no page size is given
    default_page_width: float = 412.0
    default_page_height: float = 732.0
    keyframes_prefix: str = "story-anim"


settings = Settings()
