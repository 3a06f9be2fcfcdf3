"""
Tests for the public read operations.

No real network: sheets are served from memory or through
httpx.MockTransport.
"""

import httpx
import pytest

from kas_dashboard.config import GoogleSheetSettings
from kas_dashboard.dashboard import DashboardService, coerce_kind, create_dashboard_service
from kas_dashboard.models import (
    FinanceSummary,
    MonthlyRecord,
    Transaction,
    TransactionKind,
    YearSummary,
)
from kas_dashboard.reconciliation import FALLBACK_DASHBOARD, SummaryReconciler
from kas_dashboard.services.sheets import PublishedCsvSource, SheetIngestor

from tests.conftest import InMemorySheetSource, run


def make_service(settings, source):
    return DashboardService(
        sheet_settings=settings,
        ingestor=SheetIngestor(source, settings.id),
    )


class TestGetDashboardData:
    """Tests for get_dashboard_data()."""

    def test_fetches_both_tabs(self, sheet_settings, sheet_source):
        data = run(make_service(sheet_settings, sheet_source).get_dashboard_data())

        assert {call[1] for call in sheet_source.calls} == {"10", "20"}
        assert data.summary.income == 20000000
        assert data.latest_year == 2026
        assert data.available_years == [2026, 2025]

    def test_end_to_end_single_year(self, sheet_settings):
        """Test a header row and one month row through the whole pipeline."""
        mixed = [
            ["Laporan", "", ""],
            ["Bulan", "", ""],
            ["", "", ""],
            ["2026", "0", "5000000", "", "", ""],
            ["Januari", "0", "1200000", "400000", "800000", "", ""],
        ]
        source = InMemorySheetSource(tabs={"10": [], "20": mixed})
        data = run(make_service(sheet_settings, source).get_dashboard_data())

        # Header: column B opening balance, column C unpaid.
        # Month: column B income, column C expense, column D running balance.
        assert data.yearly_summaries == [
            YearSummary(year=2026, unpaid=5000000, income=0, expense=1200000, balance=400000),
        ]
        assert data.monthly_report == [
            MonthlyRecord(year=2026, month="Jan", income=0, expense=1200000, balance=400000),
        ]
        assert data.summary == FinanceSummary(
            unpaid=5000000, income=0, expense=1200000, balance=400000,
        )

    def test_both_tabs_offline_returns_fallback(self, sheet_settings):
        source = InMemorySheetSource(failing={"10", "20"})
        data = run(make_service(sheet_settings, source).get_dashboard_data())
        assert data == FALLBACK_DASHBOARD

    def test_one_tab_offline_degrades_per_section(self, sheet_settings):
        source = InMemorySheetSource(tabs={"10": [["header"], ["", "1", "2", "3", "4"]]}, failing={"20"})
        data = run(make_service(sheet_settings, source).get_dashboard_data())
        assert data.summary == FinanceSummary(unpaid=1, income=2, expense=3, balance=4)
        assert data.monthly_report == FALLBACK_DASHBOARD.monthly_report

    def test_malformed_csv_over_http_never_raises(self, sheet_settings):
        def handler(request):
            return httpx.Response(200, text='"unterminated,\x00\n2026,"Rp abc",,\n')

        source = PublishedCsvSource(transport=httpx.MockTransport(handler))
        data = run(make_service(sheet_settings, source).get_dashboard_data())
        assert data.summary is not None
        assert data.monthly_report

    def test_http_offline_never_raises(self, sheet_settings):
        def handler(request):
            raise httpx.ConnectError("offline", request=request)

        source = PublishedCsvSource(transport=httpx.MockTransport(handler))
        data = run(make_service(sheet_settings, source).get_dashboard_data())
        assert data == FALLBACK_DASHBOARD

    def test_reconciler_crash_returns_fallback(self, sheet_settings, sheet_source):
        class CrashingReconciler(SummaryReconciler):
            def reconcile(self, summary_rows, mixed_rows):
                raise RuntimeError("bug")

        service = DashboardService(
            sheet_settings=sheet_settings,
            ingestor=SheetIngestor(sheet_source, "doc-123"),
            reconciler=CrashingReconciler(),
        )
        assert run(service.get_dashboard_data()) == FALLBACK_DASHBOARD

    def test_not_configured_returns_fallback(self):
        service = DashboardService(sheet_settings=GoogleSheetSettings(id=None))
        assert service.is_live is False
        assert run(service.get_dashboard_data()) == FALLBACK_DASHBOARD


class TestGetTransactions:
    """Tests for get_transactions()."""

    year_rows = [
        ["KAS 2025"],
        ["Tanggal", "Belum Disetor", "Masuk", "Keluar", "Keterangan", "Info"],
        [],
        ["03/01/2025", "", "50.000", "", "Iuran", ""],
        [],
        ["04/01/2025", "", "", "15.000", "Sapu", "toko"],
    ]

    def test_reads_year_tab_with_blank_lines_kept(self, sheet_settings):
        source = InMemorySheetSource(tabs={"2025": self.year_rows})
        service = make_service(sheet_settings, source)

        result = run(service.get_transactions(2025, TransactionKind.EXPENSE))

        assert result == [
            Transaction(date="04/01/2025", expense=15000, description="Sapu", note="toko"),
        ]
        assert source.calls == [("doc-123", "2025", False)]

    def test_kind_string(self, sheet_settings):
        source = InMemorySheetSource(tabs={"2025": self.year_rows})
        result = run(make_service(sheet_settings, source).get_transactions(2025, "income"))
        assert [tx.description for tx in result] == ["Iuran"]

    def test_year_without_tab(self, sheet_settings, monkeypatch):
        monkeypatch.delenv("GOOGLE_SHEET_1999_GID", raising=False)
        source = InMemorySheetSource()
        assert run(make_service(sheet_settings, source).get_transactions(1999)) == []
        assert source.calls == []

    def test_year_tab_from_environment(self, sheet_settings, monkeypatch):
        monkeypatch.setenv("GOOGLE_SHEET_2024_GID", "2024")
        source = InMemorySheetSource(tabs={"2024": self.year_rows})
        result = run(make_service(sheet_settings, source).get_transactions(2024))
        assert len(result) == 1

    def test_offline_returns_empty(self, sheet_settings):
        source = InMemorySheetSource(failing={"2025"})
        assert run(make_service(sheet_settings, source).get_transactions(2025)) == []

    def test_not_configured_returns_empty(self):
        service = DashboardService(sheet_settings=GoogleSheetSettings(id=None))
        assert run(service.get_transactions(2025)) == []


class TestSummaryForYear:
    """Tests for the per-year summary shown after a year is selected."""

    def test_latest_year_uses_live_block(self, sheet_settings, sheet_source):
        service = make_service(sheet_settings, sheet_source)
        data = run(service.get_dashboard_data())
        assert service.summary_for_year(data, 2026) == data.live_summary

    def test_older_year_uses_year_summary(self, sheet_settings, sheet_source):
        service = make_service(sheet_settings, sheet_source)
        data = run(service.get_dashboard_data())
        assert service.summary_for_year(data, 2025).balance == 2000000


class TestCoerceKind:
    """Tests for reading a kind from request values."""

    @pytest.mark.parametrize("raw, expected", [
        ("expense", TransactionKind.EXPENSE),
        ("INCOME", TransactionKind.INCOME),
        (" unpaid ", TransactionKind.UNPAID),
        (None, TransactionKind.EXPENSE),
        ("bogus", TransactionKind.EXPENSE),
        (TransactionKind.INCOME, TransactionKind.INCOME),
    ])
    def test_coerce(self, raw, expected):
        assert coerce_kind(raw) == expected


class TestCreateDashboardService:
    """Tests for the factory."""

    def test_without_document_id_is_not_live(self, monkeypatch, tmp_path):
        from kas_dashboard.config import Settings

        monkeypatch.delenv("GOOGLE_SHEET_ID", raising=False)
        monkeypatch.chdir(tmp_path)
        service = create_dashboard_service(Settings())
        assert service.is_live is False

    def test_with_document_id_uses_given_source(self, monkeypatch, tmp_path, sheet_source):
        from kas_dashboard.config import Settings

        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GOOGLE_SHEET_ID", "doc-123")
        monkeypatch.setenv("GOOGLE_SHEET_DASHBOARD_GID", "10")
        monkeypatch.setenv("GOOGLE_SHEET_MONTHLY_GID", "20")
        service = create_dashboard_service(Settings(), source=sheet_source)

        assert service.is_live is True
        data = run(service.get_dashboard_data())
        assert data.summary.income == 20000000

    def test_source_selection(self, monkeypatch, tmp_path):
        from kas_dashboard.config import Settings
        from kas_dashboard.dashboard import create_sheet_source
        from kas_dashboard.services.sheets import GoogleSheetsApiSource

        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("GOOGLE_SHEET_CREDENTIALS_PATH", raising=False)
        monkeypatch.setenv("GOOGLE_SHEET_SOURCE", "csv")
        assert isinstance(create_sheet_source(Settings()), PublishedCsvSource)

        credentials = tmp_path / "credentials.json"
        credentials.write_text("{}")
        monkeypatch.setenv("GOOGLE_SHEET_SOURCE", "api")
        monkeypatch.setenv("GOOGLE_SHEET_CREDENTIALS_PATH", str(credentials))
        assert isinstance(create_sheet_source(Settings()), GoogleSheetsApiSource)
