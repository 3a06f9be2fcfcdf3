"""Cell and row parsing for spreadsheet CSV exports."""

from kas_dashboard.parsing.currency import normalize_number_text, parse_currency
from kas_dashboard.parsing.rows import INDONESIAN_MONTHS, RowClassifier, cell

__all__ = [
    "INDONESIAN_MONTHS",
    "RowClassifier",
    "cell",
    "normalize_number_text",
    "parse_currency",
]
