"""
Sheet Services Package

Provides the abstract sheet source interface, two concrete sources
(published CSV export and authenticated Sheets API) and the ingestor
that converts fetch failures into empty row sets.
"""

from kas_dashboard.services.sheets.interface import (
    SheetConnectionError,
    SheetFetchError,
    SheetSourceError,
    SheetSourceInterface,
)
from kas_dashboard.services.sheets.csv_export import PublishedCsvSource, parse_csv_text
from kas_dashboard.services.sheets.google_sheets import GoogleSheetsApiSource, GoogleSheetsClient
from kas_dashboard.services.sheets.ingestor import SheetIngestor

__all__ = [
    # Interface
    "SheetSourceInterface",
    # Exceptions
    "SheetConnectionError",
    "SheetFetchError",
    "SheetSourceError",
    # Sources
    "GoogleSheetsApiSource",
    "GoogleSheetsClient",
    "PublishedCsvSource",
    "parse_csv_text",
    # Ingestion
    "SheetIngestor",
]
