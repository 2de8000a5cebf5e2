"""Statistics over tracker state."""

from smartspend.queries.stats import (
    DaySummary,
    StatsSnapshot,
    average_daily,
    build_snapshot,
    category_stats,
    format_currency,
    format_long_date,
    format_short_date,
    history_summaries,
    total_spent_all_time,
    weekly_series,
    weekly_stats,
)

__all__ = [
    "DaySummary",
    "StatsSnapshot",
    "average_daily",
    "build_snapshot",
    "category_stats",
    "format_currency",
    "format_long_date",
    "format_short_date",
    "history_summaries",
    "total_spent_all_time",
    "weekly_series",
    "weekly_stats",
]
