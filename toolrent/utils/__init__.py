"""Utility functions."""

from toolrent.utils.dates import format_date, parse_timestamp, add_days, time_ago
from toolrent.utils.orders import (
    is_expired,
    expiry_instant,
    matches_filters,
    compare_orders,
    sort_orders,
    filter_and_sort_orders,
    build_filter_options,
    order_state,
)

__all__ = [
    "format_date",
    "parse_timestamp",
    "add_days",
    "time_ago",
    "is_expired",
    "expiry_instant",
    "matches_filters",
    "compare_orders",
    "sort_orders",
    "filter_and_sort_orders",
    "build_filter_options",
    "order_state",
]
