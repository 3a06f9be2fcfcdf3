"""
Data Models Package

This package contains all Pydantic models used in Kas Dashboard.
All data handed to the presentation layer conforms to these schemas.
"""

from kas_dashboard.models.finance import (
    DashboardData,
    FinanceSummary,
    MonthlyRecord,
    Transaction,
    TransactionKind,
    YearlyRecord,
    YearSummary,
)
from kas_dashboard.models.rows import (
    ClassifiedRow,
    MonthDetail,
    RawRow,
    SkippedRow,
    YearHeader,
)

__all__ = [
    # Snapshot models
    "DashboardData",
    "FinanceSummary",
    "MonthlyRecord",
    "Transaction",
    "TransactionKind",
    "YearlyRecord",
    "YearSummary",
    # Row models
    "ClassifiedRow",
    "MonthDetail",
    "RawRow",
    "SkippedRow",
    "YearHeader",
]
