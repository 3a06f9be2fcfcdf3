"""
Year Aggregation

Walks the mixed year/month tab once, top to bottom, keeping track of
which year header was seen last. Every month row below a header is
attributed to that year.

Bookkeeping conventions of the sheet, reproduced as-is:
- A year's income starts at its opening balance (column B of the header)
  and grows by each month's income.
- A year's balance is the running balance of its last month row. The
  sheet computes running balances itself; they are never recomputed here.
- A repeated year header starts a second, separate summary for that year,
  but month rows always go to the first summary of their year.
- Year 0 (a "0000" header) is not an active year; its month rows are ignored.
"""

from typing import Iterable, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from kas_dashboard.models.finance import MonthlyRecord, YearlyRecord, YearSummary
from kas_dashboard.models.rows import MonthDetail, YearHeader
from kas_dashboard.parsing.rows import RowClassifier


class AggregationResult(BaseModel):
    """Output of one aggregation pass."""
    model_config = ConfigDict(frozen=True)

    year_summaries: list[YearSummary] = Field(default_factory=list)
    month_records: list[MonthlyRecord] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.year_summaries and not self.month_records


class _YearTotals:
    """Mutable running totals for one year header, frozen at the end of the pass."""

    __slots__ = ("year", "unpaid", "income", "expense", "balance")

    def __init__(self, header: YearHeader):
        self.year = header.year
        self.unpaid = header.unpaid
        self.income = header.opening_balance
        self.expense = 0.0
        self.balance = 0.0

    def add_month(self, month: MonthDetail) -> None:
        self.income += month.income
        self.expense += month.expense
        self.balance = month.running_balance

    def freeze(self) -> YearSummary:
        return YearSummary(
            year=self.year,
            unpaid=self.unpaid,
            income=self.income,
            expense=self.expense,
            balance=self.balance,
        )


class YearAggregator:
    """Builds per-year summaries and per-month records from raw rows."""

    def __init__(self, classifier: Optional[RowClassifier] = None):
        self._classifier = classifier or RowClassifier()

    def aggregate(self, rows: Iterable[Sequence[Optional[str]]]) -> AggregationResult:
        """
        Aggregate rows in document order.

        Returns fresh objects on every call; the same rows always give an
        equal result.
        """
        totals: list[_YearTotals] = []
        first_by_year: dict[int, _YearTotals] = {}
        months: list[MonthlyRecord] = []
        current_year = 0

        for row in rows:
            classified = self._classifier.classify(row, year_active=current_year > 0)

            if isinstance(classified, YearHeader):
                year_totals = _YearTotals(classified)
                totals.append(year_totals)
                first_by_year.setdefault(year_totals.year, year_totals)
                current_year = year_totals.year
                continue

            if isinstance(classified, MonthDetail) and current_year > 0:
                # A repeated header never receives months; the first one for the year does
                current = first_by_year[current_year]
                # Balance moves even when the month itself is dropped below
                current.add_month(classified)

                # Placeholder rows for months not yet filled in are dropped
                if classified.income > 0 or classified.expense > 0:
                    months.append(MonthlyRecord(
                        year=current.year,
                        month=classified.month_abbreviation,
                        income=classified.income,
                        expense=classified.expense,
                        balance=classified.running_balance,
                    ))

        # Stable: months keep their sheet order within a year
        months.sort(key=lambda record: record.year)

        return AggregationResult(
            year_summaries=[year.freeze() for year in totals],
            month_records=months,
        )


def build_yearly_report(month_records: Iterable[MonthlyRecord]) -> list[YearlyRecord]:
    """
    Total month income and expense per year, oldest year first.

    Opening balances are not included; this is money that moved during
    the year.
    """
    by_year: dict[int, list[float]] = {}
    for record in month_records:
        income_expense = by_year.setdefault(record.year, [0.0, 0.0])
        income_expense[0] += record.income
        income_expense[1] += record.expense

    return [
        YearlyRecord(year=year, income=income, expense=expense)
        for year, (income, expense) in sorted(by_year.items())
    ]
