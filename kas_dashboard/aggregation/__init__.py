"""Aggregation of classified rows into yearly and monthly figures."""

from kas_dashboard.aggregation.aggregator import (
    AggregationResult,
    YearAggregator,
    build_yearly_report,
)

__all__ = [
    "AggregationResult",
    "YearAggregator",
    "build_yearly_report",
]
