"""Reconciliation of sheet data into dashboard snapshots and detail lists."""

from kas_dashboard.reconciliation.fallback import FALLBACK_DASHBOARD
from kas_dashboard.reconciliation.reconciler import SummaryReconciler
from kas_dashboard.reconciliation.transactions import TransactionExtractor

__all__ = [
    "FALLBACK_DASHBOARD",
    "SummaryReconciler",
    "TransactionExtractor",
]
