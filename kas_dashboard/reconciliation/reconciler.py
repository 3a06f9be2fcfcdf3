"""
Summary Reconciliation

The dashboard's numbers can come from three places, which do not always
agree because the sheet is edited by hand:

1. The live summary block: cells B2:E2 of the dashboard tab
   (unpaid, income, expense, balance).
2. The year summaries built by the YearAggregator from year header rows.
3. Sums over the month records of a year.

The reconciler picks one source per request, and when a whole section
(summary, monthly report, yearly report) comes back empty it substitutes
that section of the fallback dataset it was given. It always returns a
complete DashboardData.
"""

from typing import Optional, Sequence

from kas_dashboard.aggregation import AggregationResult, YearAggregator, build_yearly_report
from kas_dashboard.log import get_logger
from kas_dashboard.models.finance import (
    DashboardData,
    FinanceSummary,
    MonthlyRecord,
    YearSummary,
)
from kas_dashboard.models.rows import RawRow
from kas_dashboard.parsing import cell, parse_currency
from kas_dashboard.reconciliation.fallback import FALLBACK_DASHBOARD


# Position of the live summary block: row 2 of the sheet, columns B..E
SUMMARY_ROW = 1
SUMMARY_COLUMNS = {"unpaid": 1, "income": 2, "expense": 3, "balance": 4}


class SummaryReconciler:
    """Merges the live summary block, aggregated figures and fallback data."""

    def __init__(
        self,
        fallback: DashboardData = FALLBACK_DASHBOARD,
        aggregator: Optional[YearAggregator] = None,
    ):
        """
        Initialize reconciler.

        Args:
            fallback: Data shown for any section the sheet can't provide
            aggregator: Aggregator for the mixed year/month tab
        """
        self._fallback = fallback
        self._aggregator = aggregator or YearAggregator()
        self._logger = get_logger(__name__)

    @property
    def fallback(self) -> DashboardData:
        return self._fallback

    def read_summary_block(self, rows: Sequence[RawRow]) -> FinanceSummary:
        """Read cells B2:E2. Missing rows or cells read as 0."""
        row: RawRow = list(rows[SUMMARY_ROW]) if len(rows) > SUMMARY_ROW else []
        return FinanceSummary(**{
            field: parse_currency(cell(row, column))
            for field, column in SUMMARY_COLUMNS.items()
        })

    def summary_for_year(
        self,
        live: FinanceSummary,
        year_summaries: Sequence[YearSummary],
        month_records: Sequence[MonthlyRecord],
        year: int,
        is_latest_year: bool = True,
    ) -> FinanceSummary:
        """
        Choose the summary shown for one year.

        1. The live block, if the year is the latest one and the block has
           a nonzero income.
        2. The first year summary for the year, taken verbatim.
        3. Income and expense summed over the year's months, unpaid from
           the live block, balance as income minus expense.
        """
        if is_latest_year and live.income != 0:
            return live

        for summary in year_summaries:
            if summary.year == year:
                return summary.to_finance_summary()

        months = [record for record in month_records if record.year == year]
        income = sum(record.income for record in months)
        expense = sum(record.expense for record in months)
        return FinanceSummary(
            unpaid=live.unpaid,
            income=income,
            expense=expense,
            balance=income - expense,
        )

    def summary_for_dashboard_year(self, data: DashboardData, year: int) -> FinanceSummary:
        """Apply summary_for_year() to an already reconciled snapshot."""
        return self.summary_for_year(
            live=data.live_summary,
            year_summaries=data.yearly_summaries,
            month_records=data.monthly_report,
            year=year,
            is_latest_year=year == data.latest_year,
        )

    def reconcile(
        self,
        summary_rows: Sequence[RawRow],
        mixed_rows: Sequence[RawRow],
    ) -> DashboardData:
        """
        Build the dashboard snapshot from the two fetched tabs.

        Args:
            summary_rows: Rows of the dashboard tab (live summary block)
            mixed_rows: Rows of the year/month tab
        """
        if not summary_rows and not mixed_rows:
            self._logger.warning("fallback_dashboard_used", reason="no rows fetched")
            return self._fallback

        live = self.read_summary_block(summary_rows)
        aggregated = self._aggregator.aggregate(mixed_rows)
        self._logger.debug(
            "mixed_sheet_aggregated",
            rows=len(mixed_rows),
            years=len(aggregated.year_summaries),
            months=len(aggregated.month_records),
        )

        return DashboardData(
            summary=self._current_summary(live, aggregated),
            live_summary=live,
            monthly_report=self._section(
                "monthly_report",
                aggregated.month_records,
                self._fallback.monthly_report,
            ),
            yearly_report=self._section(
                "yearly_report",
                build_yearly_report(aggregated.month_records),
                self._fallback.yearly_report,
            ),
            yearly_summaries=aggregated.year_summaries,
        )

    def _current_summary(
        self,
        live: FinanceSummary,
        aggregated: AggregationResult,
    ) -> FinanceSummary:
        if live.income != 0:
            return live

        years = [summary.year for summary in aggregated.year_summaries]
        years.extend(record.year for record in aggregated.month_records)
        if not years:
            self._logger.info("fallback_section_used", section="summary")
            return self._fallback.summary

        return self.summary_for_year(
            live,
            aggregated.year_summaries,
            aggregated.month_records,
            year=max(years),
        )

    def _section(self, name: str, records: list, fallback: list) -> list:
        if records:
            return records
        self._logger.info("fallback_section_used", section=name)
        return list(fallback)
