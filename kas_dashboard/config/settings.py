"""
Configuration Management for Kas Dashboard

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The parsing core never reads the environment itself; it receives
document and tab identifiers from these settings.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GoogleSheetSettings(BaseSettings):
    """Spreadsheet document and tab identifiers."""

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_SHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    id: Optional[str] = Field(
        default=None,
        description="Spreadsheet document ID. Without it the dashboard shows mock data"
    )

    # Tab (gid) identifiers within the spreadsheet
    dashboard_gid: str = Field(
        default="0",
        description="Tab holding the current summary block (cells B2:E2)"
    )
    monthly_gid: str = Field(
        default="0",
        description="Tab holding the year header and month rows"
    )
    year_gids: dict[int, str] = Field(
        default_factory=dict,
        description="Per-year transaction tabs, as JSON: {\"2025\": \"123\"}"
    )

    # How the document is read
    source: Literal["csv", "api"] = Field(
        default="csv",
        description="'csv' reads the published export, 'api' uses the Sheets API"
    )
    credentials_path: Optional[str] = Field(
        default=None,
        description="Service account credentials JSON, only used when source='api'"
    )

    @field_validator("credentials_path")
    @classmethod
    def validate_credentials_path(cls, v: Optional[str]) -> Optional[str]:
        """Warn if credentials file doesn't exist (but don't fail - might be mounted later)."""
        if v and not Path(v).exists():
            import warnings
            warnings.warn(
                f"Google credentials file not found at {v}. "
                "Make sure it exists before using source='api'."
            )
        return v

    def gid_for_year(self, year: int) -> Optional[str]:
        """
        Get the transaction tab for a year.

        Looks in ``year_gids`` first, then in a ``GOOGLE_SHEET_<YEAR>_GID``
        environment variable.
        """
        if year in self.year_gids:
            return self.year_gids[year]
        return os.environ.get(f"GOOGLE_SHEET_{year}_GID") or None


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Logging
    debug_mode: bool = Field(
        default=False,
        description="Log at DEBUG level regardless of log_level"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )

    # Fetching and caching
    cache_ttl_seconds: int = Field(
        default=60,
        ge=0,
        le=86400,
        description="How long the presentation layer may reuse fetched data"
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="Timeout for one CSV export request"
    )

    # Transaction detail window (zero-based row indices)
    transaction_first_row: int = Field(
        default=3,
        ge=0,
        description="First row of a year tab holding transactions"
    )
    transaction_row_limit: int = Field(
        default=500,
        ge=1,
        description="Rows at or past this index are never read"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def google_sheet(self) -> GoogleSheetSettings:
        return GoogleSheetSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    try:
        sheet = settings.google_sheet
        results["google_sheet"] = True
        results["google_sheet_live"] = bool(sheet.id)
    except Exception as e:
        results["google_sheet"] = False
        results["google_sheet_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
