"""
Configuration Management for Bookkeeping

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here. The core models
need no configuration at all; only the ambient concerns (logging,
auditing, JSON output) read these settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BookkeepingSettings(BaseSettings):
    """
    Main settings.

    Loads configuration from BOOKKEEPING_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOKKEEPING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum level for log output"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON lines (console rendering otherwise)"
    )

    # Auditing
    audit_enabled: bool = Field(
        default=True,
        description="Emit audit events for account and balance decisions"
    )

    # Serialization
    json_indent: Optional[int] = Field(
        default=None,
        ge=0,
        le=8,
        description="Indentation for encoded JSON (None for compact output)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only allow standard logging level names."""
        allowed = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {allowed}")
        return v.upper()


@lru_cache()
def get_settings() -> BookkeepingSettings:
    """
    Get settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return BookkeepingSettings()
