"""
Streamlit Frontend for Kas Dashboard

A read-only page over the spreadsheet: headline cards, monthly breakdown
for the selected year, yearly report, and the transaction list behind
each card.

All numbers come from DashboardService. The page only lays them out and
caches the dashboard snapshot for a fixed time.
"""

import asyncio

import streamlit as st

from kas_dashboard.config import get_settings, validate_all_settings
from kas_dashboard.dashboard import DashboardService, create_dashboard_service
from kas_dashboard.models import DashboardData, TransactionKind


st.set_page_config(
    page_title="Kas Dashboard",
    page_icon="💰",
    layout="wide",
    initial_sidebar_state="expanded",
)


CARD_LABELS = {
    TransactionKind.UNPAID: "Uang Belum Disetor",
    TransactionKind.INCOME: "Uang Masuk",
    TransactionKind.EXPENSE: "Uang Keluar",
}


def run_async(coro):
    """Helper to run async functions in Streamlit."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def format_rupiah(amount: float) -> str:
    return "Rp " + f"{amount:,.0f}".replace(",", ".")


@st.cache_resource
def get_service() -> DashboardService:
    """Get or create the dashboard service (cached)."""
    return create_dashboard_service()


@st.cache_data(ttl=get_settings().app.cache_ttl_seconds)
def load_dashboard() -> DashboardData:
    """Fetch the dashboard snapshot, reused until the TTL expires."""
    return run_async(get_service().get_dashboard_data())


def main():
    """Main application entry point."""
    service = get_service()
    data = load_dashboard()

    st.sidebar.title("💰 Kas Dashboard")
    st.sidebar.markdown("---")

    years = data.available_years
    if not years:
        st.warning("No years found in the spreadsheet.")
        return

    year = st.sidebar.selectbox("Tahun", years, index=0)

    if not service.is_live:
        st.sidebar.info("Spreadsheet not configured - showing example data.")

    if st.sidebar.button("🔄 Refresh"):
        load_dashboard.clear()
        st.rerun()

    render_summary(service, data, year)
    st.markdown("---")
    render_monthly(data, year)
    st.markdown("---")
    render_yearly(data)
    render_settings_status()


def render_summary(service: DashboardService, data: DashboardData, year: int):
    """Render the four headline cards and their transaction lists."""
    st.title(f"Laporan Kas {year}")
    summary = service.summary_for_year(data, year)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric(CARD_LABELS[TransactionKind.UNPAID], format_rupiah(summary.unpaid))
    col2.metric(CARD_LABELS[TransactionKind.INCOME], format_rupiah(summary.income))
    col3.metric(CARD_LABELS[TransactionKind.EXPENSE], format_rupiah(summary.expense))
    col4.metric("Saldo", format_rupiah(summary.balance))

    kind = st.radio(
        "Lihat rincian:",
        list(CARD_LABELS),
        format_func=lambda k: CARD_LABELS[k],
        horizontal=True,
    )
    if st.button("📋 Tampilkan Transaksi"):
        with st.spinner("Loading transactions..."):
            transactions = run_async(service.get_transactions(year, kind))

        if not transactions:
            st.info("Tidak ada transaksi.")
            return

        total = sum(tx.amount_for(kind) for tx in transactions)
        st.markdown(f"**{len(transactions)} transaksi - total {format_rupiah(total)}**")
        st.dataframe(
            [tx.model_dump() for tx in transactions],
            use_container_width=True,
            hide_index=True,
        )


def render_monthly(data: DashboardData, year: int):
    """Render the monthly breakdown for one year."""
    st.subheader("📅 Rincian Bulanan")
    months = data.months_for_year(year)
    if not months:
        st.info("Belum ada data bulanan untuk tahun ini.")
        return

    st.bar_chart(
        {
            "Uang Masuk": [m.income for m in months],
            "Uang Keluar": [m.expense for m in months],
        },
    )
    st.dataframe(
        [
            {
                "Bulan": m.month,
                "Uang Masuk": format_rupiah(m.income),
                "Uang Keluar": format_rupiah(m.expense),
                "Saldo": format_rupiah(m.balance) if m.balance is not None else "-",
            }
            for m in months
        ],
        use_container_width=True,
        hide_index=True,
    )


def render_yearly(data: DashboardData):
    """Render the yearly report."""
    st.subheader("📊 Laporan Tahunan")
    st.dataframe(
        [
            {
                "Tahun": str(r.year),
                "Uang Masuk": format_rupiah(r.income),
                "Uang Keluar": format_rupiah(r.expense),
            }
            for r in data.yearly_report
        ],
        use_container_width=True,
        hide_index=True,
    )


def render_settings_status():
    """Render configuration status in the sidebar."""
    status = validate_all_settings()
    st.sidebar.markdown("---")
    if status.get("google_sheet_live"):
        st.sidebar.success("✅ Google Sheet - Connected")
    else:
        error = status.get("google_sheet_error", "GOOGLE_SHEET_ID not set")
        st.sidebar.error(f"❌ Google Sheet - {error}")


if __name__ == "__main__":
    main()
