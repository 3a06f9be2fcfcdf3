"""
Fallback Dashboard Data

Shown when the spreadsheet is not configured or cannot be read, and used
section by section when a section comes back empty. The value is frozen;
the reconciler receives it as a constructor argument.
"""

from kas_dashboard.models.finance import (
    DashboardData,
    FinanceSummary,
    MonthlyRecord,
    YearlyRecord,
    YearSummary,
)


FALLBACK_DASHBOARD = DashboardData(
    summary=FinanceSummary(
        unpaid=5_000_000,
        income=156_000_000,
        expense=45_000_000,
        balance=111_000_000,
    ),
    monthly_report=[
        MonthlyRecord(year=2026, month="Jan", income=12_000_000, expense=4_000_000),
        MonthlyRecord(year=2026, month="Feb", income=15_000_000, expense=5_000_000),
        MonthlyRecord(year=2026, month="Mar", income=10_000_000, expense=3_000_000),
    ],
    yearly_report=[
        YearlyRecord(year=2023, income=150_000_000, expense=50_000_000),
        YearlyRecord(year=2024, income=180_000_000, expense=60_000_000),
    ],
    yearly_summaries=[
        YearSummary(
            year=2026,
            unpaid=5_000_000,
            income=156_000_000,
            expense=45_000_000,
            balance=111_000_000,
        ),
    ],
)
