"""Services package."""

from kas_dashboard.services.sheets import (
    GoogleSheetsApiSource,
    GoogleSheetsClient,
    PublishedCsvSource,
    SheetConnectionError,
    SheetFetchError,
    SheetIngestor,
    SheetSourceError,
    SheetSourceInterface,
)

__all__ = [
    "GoogleSheetsApiSource",
    "GoogleSheetsClient",
    "PublishedCsvSource",
    "SheetConnectionError",
    "SheetFetchError",
    "SheetIngestor",
    "SheetSourceError",
    "SheetSourceInterface",
]
