"""
Blueprint Engine Configuration

Uses pydantic-settings for environment variable loading with validation.
All configuration is centralized here for easy management.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Engine settings loaded from environment variables.

    Environment variables can be set directly or via .env file, e.g.
    ``OZRICAL_BLUEPRINT_MAX_UNDO_DEPTH=100``.
    """

    model_config = SettingsConfigDict(
        env_prefix="OZRICAL_BLUEPRINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Documents
    # ==========================================================================
    document_version: str = Field(
        default="1.0",
        min_length=1,
        description="Format version stamped on newly created blueprint documents"
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation used when writing blueprint JSON"
    )

    # ==========================================================================
    # Editing
    # ==========================================================================
    max_undo_depth: int = Field(
        default=50,
        ge=1,
        description="Maximum number of document snapshots kept on the undo stack"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Level used by configure_logging()"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
