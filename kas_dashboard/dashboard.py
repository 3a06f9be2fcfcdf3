"""
Dashboard Service

The two read operations the presentation layer calls:

1. get_dashboard_data(): fetch the dashboard tab and the year/month tab
   concurrently, aggregate, reconcile -> DashboardData
2. get_transactions(year, kind): fetch one year's tab and list the rows
   of that kind -> list[Transaction]

Neither operation raises. Missing configuration, unreachable sheets and
unexpected errors are logged and answered with fallback data or an
empty list. Every call re-fetches; caching belongs to the caller.
"""

from typing import Optional, Union

from kas_dashboard.config import GoogleSheetSettings, Settings, get_settings
from kas_dashboard.log import configure_logging, get_logger
from kas_dashboard.models.finance import (
    DashboardData,
    FinanceSummary,
    Transaction,
    TransactionKind,
)
from kas_dashboard.reconciliation import SummaryReconciler, TransactionExtractor
from kas_dashboard.services.sheets import (
    GoogleSheetsApiSource,
    GoogleSheetsClient,
    PublishedCsvSource,
    SheetIngestor,
    SheetSourceInterface,
)


def coerce_kind(kind: Union[TransactionKind, str, None]) -> TransactionKind:
    """Read a kind from a request value; anything unknown means expense."""
    if isinstance(kind, TransactionKind):
        return kind
    try:
        return TransactionKind((kind or "").strip().lower())
    except ValueError:
        return TransactionKind.EXPENSE


class DashboardService:
    """
    Read-only access to the dashboard figures of one spreadsheet.

    Without an ingestor (no document configured) the service serves the
    reconciler's fallback data and empty transaction lists.
    """

    def __init__(
        self,
        sheet_settings: GoogleSheetSettings,
        ingestor: Optional[SheetIngestor] = None,
        reconciler: Optional[SummaryReconciler] = None,
        extractor: Optional[TransactionExtractor] = None,
    ):
        self._sheet = sheet_settings
        self._ingestor = ingestor
        self._reconciler = reconciler or SummaryReconciler()
        self._extractor = extractor or TransactionExtractor()
        self._logger = get_logger(__name__)

    @property
    def is_live(self) -> bool:
        """Whether a spreadsheet document is configured."""
        return self._ingestor is not None

    async def get_dashboard_data(self) -> DashboardData:
        """
        Get the full reconciled dashboard snapshot.

        The summary tab and the year/month tab are fetched concurrently.
        """
        if self._ingestor is None:
            self._logger.warning("sheet_id_missing", action="using fallback dashboard")
            return self._reconciler.fallback

        try:
            summary_rows, mixed_rows = await self._ingestor.fetch_many(
                self._sheet.dashboard_gid,
                self._sheet.monthly_gid,
            )
            return self._reconciler.reconcile(summary_rows, mixed_rows)
        except Exception as e:
            self._logger.error(
                "dashboard_pipeline_failed",
                error_type=type(e).__name__,
                error=str(e),
                exc_info=True,
            )
            return self._reconciler.fallback

    async def get_transactions(
        self,
        year: int,
        kind: Union[TransactionKind, str, None] = TransactionKind.EXPENSE,
    ) -> list[Transaction]:
        """
        Get the transactions of one kind from a year's own tab.

        Returns an empty list when the year has no tab configured or the
        tab can't be read.
        """
        kind = coerce_kind(kind)

        if self._ingestor is None:
            self._logger.warning("sheet_id_missing", action="no transactions")
            return []

        gid = self._sheet.gid_for_year(year)
        if not gid:
            self._logger.warning("year_gid_missing", year=year)
            return []

        try:
            rows = await self._ingestor.fetch(gid, skip_empty_lines=False)
            return self._extractor.extract(rows, kind)
        except Exception as e:
            self._logger.error(
                "transactions_pipeline_failed",
                year=year,
                kind=kind.value,
                error_type=type(e).__name__,
                error=str(e),
                exc_info=True,
            )
            return []

    def summary_for_year(self, data: DashboardData, year: int) -> FinanceSummary:
        """Get the summary shown when the user selects a year."""
        return self._reconciler.summary_for_dashboard_year(data, year)


def create_sheet_source(settings: Settings) -> SheetSourceInterface:
    """Pick the sheet source the settings ask for."""
    sheet = settings.google_sheet
    if sheet.source == "api" and sheet.credentials_path:
        return GoogleSheetsApiSource(GoogleSheetsClient(sheet.credentials_path))
    return PublishedCsvSource(timeout=settings.app.request_timeout_seconds)


def create_dashboard_service(
    settings: Optional[Settings] = None,
    source: Optional[SheetSourceInterface] = None,
) -> DashboardService:
    """
    Factory function to create the dashboard service.

    Args:
        settings: Settings to use (defaults to get_settings())
        source: Sheet source override, e.g. for tests

    Returns:
        A DashboardService; not live when no document ID is configured
    """
    settings = settings or get_settings()
    app = settings.app
    sheet = settings.google_sheet

    configure_logging("DEBUG" if app.debug_mode else app.log_level)

    ingestor = None
    if sheet.id:
        ingestor = SheetIngestor(source or create_sheet_source(settings), sheet.id)

    return DashboardService(
        sheet_settings=sheet,
        ingestor=ingestor,
        extractor=TransactionExtractor(
            first_row=app.transaction_first_row,
            row_limit=app.transaction_row_limit,
        ),
    )
