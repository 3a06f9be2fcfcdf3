"""
Row Classification

Decides, from the first cell alone, what a row of the mixed year/month
tab is:

    2026      | 15.000.000 | 500.000   |            <- year header
    Januari   | 1.200.000  | 400.000   | 15.800.000 <- month row
    TOTAL     | ...                                 <- skipped

Rules are evaluated in order and the first match wins. The classifier is
purely lexical: it does not check how many cells a row has, and amount
cells it cannot read are worth 0.
"""

import re
from typing import Optional, Sequence

from kas_dashboard.models.rows import ClassifiedRow, MonthDetail, SkippedRow, YearHeader
from kas_dashboard.parsing.currency import parse_currency


INDONESIAN_MONTHS = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)

_YEAR = re.compile(r"^\d{4}$")

_SKIPPED = SkippedRow()


def cell(row: Sequence[Optional[str]], index: int) -> Optional[str]:
    """Get a cell by position, or None past the end of the row."""
    if index < len(row):
        return row[index]
    return None


class RowClassifier:
    """Tags one raw row as a year header, a month row or a skipped row."""

    def __init__(self, month_names: Sequence[str] = INDONESIAN_MONTHS):
        self._month_names = frozenset(month_names)

    def classify(
        self,
        row: Sequence[Optional[str]],
        year_active: bool,
    ) -> ClassifiedRow:
        """
        Classify a row.

        Args:
            row: Cells in sheet order
            year_active: Whether a non-zero year header was already seen.
                         Month rows before the first year header are skipped.
        """
        label = (cell(row, 0) or "").strip()
        if not label:
            return _SKIPPED

        if _YEAR.match(label):
            return YearHeader(
                year=int(label),
                opening_balance=parse_currency(cell(row, 1)),
                unpaid=parse_currency(cell(row, 2)),
            )

        if label in self._month_names and year_active:
            return MonthDetail(
                month_name=label,
                income=parse_currency(cell(row, 1)),
                expense=parse_currency(cell(row, 2)),
                running_balance=parse_currency(cell(row, 3)),
            )

        return _SKIPPED
