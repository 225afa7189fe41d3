"""Service layer: pure read-side engines plus thin persistence workflows."""

from .summary import SummaryResult, compute_summary
from .trends import ChartPoint, DateRange, Window, bucket_transactions, build_trend_series, date_range_for

__all__ = [
    "ChartPoint",
    "DateRange",
    "SummaryResult",
    "Window",
    "bucket_transactions",
    "build_trend_series",
    "compute_summary",
    "date_range_for",
]
