"""
Transaction Extraction

Each year has its own tab listing individual transactions:

    row 1-3   title and column headers
    row 4+    date | belum disetor | uang masuk | uang keluar | keterangan | info

A row belongs to the detail list of a kind (expense, income, unpaid) when
the amount in that kind's column is positive. Only a fixed window of rows
is read; the tab is already scoped to one year, so there is no year
tracking here.
"""

from typing import Optional, Sequence

from kas_dashboard.models.finance import Transaction, TransactionKind
from kas_dashboard.models.rows import RawRow
from kas_dashboard.parsing import cell, parse_currency


class TransactionExtractor:
    """Filters the rows of a year tab into transactions of one kind."""

    def __init__(self, first_row: int = 3, row_limit: int = 500):
        """
        Initialize extractor.

        Args:
            first_row: Index of the first transaction row (skips the header block)
            row_limit: Rows at this index or later are never read
        """
        self._first_row = first_row
        self._row_limit = row_limit

    def extract(
        self,
        rows: Sequence[Optional[RawRow]],
        kind: TransactionKind = TransactionKind.EXPENSE,
    ) -> list[Transaction]:
        """Get the transactions whose ``kind`` amount is greater than zero."""
        kind = TransactionKind(kind)
        transactions = []

        for index in range(self._first_row, min(self._row_limit, len(rows))):
            row = rows[index]
            if not row:
                continue

            if parse_currency(cell(row, kind.column_index)) <= 0:
                continue

            transactions.append(Transaction(
                date=cell(row, 0) or "",
                unpaid=parse_currency(cell(row, 1)),
                income=parse_currency(cell(row, 2)),
                expense=parse_currency(cell(row, 3)),
                description=cell(row, 4) or "",
                note=cell(row, 5) or "",
            ))

        return transactions
