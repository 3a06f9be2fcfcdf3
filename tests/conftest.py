"""Shared fixtures: an in-memory sheet source and sample sheets."""

import asyncio

import pytest

from kas_dashboard.config import GoogleSheetSettings
from kas_dashboard.services.sheets import SheetFetchError, SheetSourceInterface


class InMemorySheetSource(SheetSourceInterface):
    """Sheet source serving fixed rows per tab id, recording every call."""

    def __init__(self, tabs=None, failing=()):
        self.tabs = tabs or {}
        self.failing = set(failing)
        self.calls = []

    async def fetch_rows(self, document_id, gid, skip_empty_lines=True):
        self.calls.append((document_id, gid, skip_empty_lines))
        if gid in self.failing or gid not in self.tabs:
            raise SheetFetchError(gid, f"offline: {gid}")
        rows = [list(row) for row in self.tabs[gid]]
        if skip_empty_lines:
            rows = [row for row in rows if row]
        return rows


def run(coro):
    """Run a coroutine to completion."""
    return asyncio.run(coro)


DASHBOARD_ROWS = [
    ["", "Belum Disetor", "Uang Masuk", "Uang Keluar", "Saldo"],
    ["2026", "Rp 750.000", "Rp 20.000.000", "Rp 6.500.000", "Rp 13.500.000"],
]

MIXED_ROWS = [
    ["LAPORAN BULANAN", "", "", "", ""],
    ["Bulan", "Uang Masuk", "Uang Keluar", "Saldo", ""],
    ["", "", "", "", ""],
    ["2025", "1.000.000", "250.000", "", ""],
    ["Januari", "2.000.000", "500.000", "2.500.000", ""],
    ["Februari", "1.000.000", "1.500.000", "2.000.000", ""],
    ["Maret", "", "", "2.000.000", ""],
    ["2026", "2.000.000", "750.000", "", ""],
    ["Januari", "3.000.000", "1.000.000", "4.000.000", ""],
]


@pytest.fixture
def sheet_settings():
    return GoogleSheetSettings(
        id="doc-123",
        dashboard_gid="10",
        monthly_gid="20",
        year_gids={2025: "2025"},
    )


@pytest.fixture
def sheet_source():
    return InMemorySheetSource(tabs={"10": DASHBOARD_ROWS, "20": MIXED_ROWS})
