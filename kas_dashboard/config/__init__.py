"""Configuration package."""

from kas_dashboard.config.settings import (
    AppSettings,
    GoogleSheetSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "GoogleSheetSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
