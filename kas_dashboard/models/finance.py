"""
Core Data Models for Kas Dashboard

These models define the shapes handed from the parsing core to the
presentation layer. Every instance is a snapshot: it is built fresh on
each ingestion pass and frozen once constructed.

Amounts are plain floats (Rupiah). The spreadsheet already rounds its
own running balances, so no Decimal arithmetic is done here.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================

class TransactionKind(str, Enum):
    """
    Which amount column gates a row in the transaction detail view.

    The value names the dashboard card the user clicked.
    """
    EXPENSE = "expense"
    INCOME = "income"
    UNPAID = "unpaid"

    @property
    def column_index(self) -> int:
        """Column of a year tab holding this kind of amount."""
        return _KIND_COLUMNS[self]


_KIND_COLUMNS = {
    TransactionKind.UNPAID: 1,
    TransactionKind.INCOME: 2,
    TransactionKind.EXPENSE: 3,
}


# =============================================================================
# SNAPSHOT MODELS
# =============================================================================

class FinanceSummary(BaseModel):
    """The four headline numbers of the dashboard."""
    model_config = ConfigDict(frozen=True)

    unpaid: float = Field(
        default=0.0,
        description="Uang belum disetor: collected but not yet deposited"
    )
    income: float = Field(default=0.0, description="Uang masuk")
    expense: float = Field(default=0.0, description="Uang keluar")
    balance: float = Field(default=0.0, description="Saldo")


class MonthlyRecord(BaseModel):
    """
    One month of one year, as declared in the month rows of the sheet.

    ``balance`` is the sheet's own running balance for the month. It is
    None only for fallback records that never came from a sheet.
    """
    model_config = ConfigDict(frozen=True)

    year: int
    month: str = Field(
        ...,
        min_length=1,
        max_length=3,
        description="Three-letter month abbreviation, e.g. 'Jan', 'Feb'"
    )
    income: float = 0.0
    expense: float = 0.0
    balance: Optional[float] = None


class YearlyRecord(BaseModel):
    """Income and expense totals of one year."""
    model_config = ConfigDict(frozen=True)

    year: int
    income: float = 0.0
    expense: float = 0.0


class YearSummary(BaseModel):
    """
    Summary of a year, built from its header row and month rows.

    ``income`` starts at the year's opening balance and has every month's
    income added to it. ``balance`` is the running balance of the last
    month row seen for the year.
    """
    model_config = ConfigDict(frozen=True)

    year: int
    unpaid: float = 0.0
    income: float = 0.0
    expense: float = 0.0
    balance: float = 0.0

    def to_finance_summary(self) -> FinanceSummary:
        return FinanceSummary(
            unpaid=self.unpaid,
            income=self.income,
            expense=self.expense,
            balance=self.balance,
        )


class Transaction(BaseModel):
    """A single row of a year tab, materialized for the detail view."""
    model_config = ConfigDict(frozen=True)

    date: str = Field(default="", description="Column A, kept as written")
    unpaid: float = Field(default=0.0, description="Column B: belum disetor")
    income: float = Field(default=0.0, description="Column C: uang masuk")
    expense: float = Field(default=0.0, description="Column D: uang keluar")
    description: str = Field(default="", description="Column E: keterangan")
    note: str = Field(default="", description="Column F: info")

    def amount_for(self, kind: TransactionKind) -> float:
        """Get the amount this transaction carries for a kind."""
        if kind == TransactionKind.UNPAID:
            return self.unpaid
        if kind == TransactionKind.INCOME:
            return self.income
        return self.expense


class DashboardData(BaseModel):
    """
    Everything the dashboard page renders, in one snapshot.

    ``summary`` is the reconciled headline for the latest year.
    ``live_summary`` is the summary block exactly as read from the sheet
    (all zeros when it could not be read); per-year views start from it.
    """
    model_config = ConfigDict(frozen=True)

    summary: FinanceSummary
    live_summary: FinanceSummary = Field(default_factory=FinanceSummary)
    monthly_report: list[MonthlyRecord] = Field(default_factory=list)
    yearly_report: list[YearlyRecord] = Field(default_factory=list)
    yearly_summaries: list[YearSummary] = Field(default_factory=list)

    @property
    def available_years(self) -> list[int]:
        """Years present in the monthly report or the year summaries, newest first."""
        years = {record.year for record in self.monthly_report}
        years.update(summary.year for summary in self.yearly_summaries)
        return sorted(years, reverse=True)

    @property
    def latest_year(self) -> Optional[int]:
        years = self.available_years
        return years[0] if years else None

    def months_for_year(self, year: int) -> list[MonthlyRecord]:
        return [record for record in self.monthly_report if record.year == year]
