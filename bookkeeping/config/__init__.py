"""Configuration package."""

from bookkeeping.config.settings import BookkeepingSettings, get_settings

__all__ = [
    "BookkeepingSettings",
    "get_settings",
]
