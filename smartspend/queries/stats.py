"""
Statistics Engine

DESIGN DECISION: Every function here is PURE. It reads an AppState (and
`now` where the result depends on the calendar) and returns plain data;
nothing is written back and nothing is cached.

Scopes differ per statistic and are kept exactly:
- weekly_stats: current day + history, limited to the last N calendar dates
- category_stats: current day only
- total_spent_all_time: current day + all history
- average_daily: history only (settled days)
"""

import datetime as dt
from collections import Counter
from decimal import Decimal
from typing import Union

from pydantic import BaseModel, Field

from smartspend.models.spending import AppState, Amount


ZERO = Decimal("0")


class DaySummary(BaseModel):
    """One archived day as listed in the history view."""

    date: dt.date
    transaction_count: int = Field(ge=0)
    total: Amount


class StatsSnapshot(BaseModel):
    """Everything the analytics view shows, computed at one instant."""

    generated_for: dt.date
    total_spent: Amount
    average_daily: Amount
    weekly: dict[str, Amount] = Field(default_factory=dict)
    categories: dict[str, int] = Field(default_factory=dict)


def weekly_stats(
    state: AppState,
    now: dt.datetime,
    window_days: int = 7,
) -> dict[str, Decimal]:
    """
    Daily totals for the last `window_days` calendar dates ending at now.

    Returns:
        Dict of ISO date -> total, oldest date first, always exactly
        `window_days` keys. Dates with no data stay at 0.
    Assumptions:
        Sources outside the window are ignored. History is applied after the
        current day, and when history holds a date twice the most recent
        (first) record wins.
    """
    today = now.date()
    stats: dict[str, Decimal] = {}
    for offset in range(window_days - 1, -1, -1):
        stats[(today - dt.timedelta(days=offset)).isoformat()] = ZERO

    current_key = state.current_day.date.isoformat()
    if current_key in stats:
        stats[current_key] = state.current_day.total

    # Oldest first so the most recent duplicate is written last
    for record in reversed(state.history):
        key = record.date.isoformat()
        if key in stats:
            stats[key] = record.total

    return stats


def weekly_series(
    state: AppState,
    now: dt.datetime,
    window_days: int = 7,
) -> list[tuple[str, Decimal]]:
    """Weekly totals as (short label, amount) pairs in date order, for charts."""
    stats = weekly_stats(state, now, window_days)
    return [
        (format_short_date(dt.date.fromisoformat(key)), amount)
        for key, amount in sorted(stats.items())
    ]


def category_stats(state: AppState) -> dict[str, int]:
    """Number of today's entries per raw category string, first-seen order."""
    return dict(Counter(entry.category for entry in state.current_day.spendings))


def total_spent_all_time(state: AppState) -> Decimal:
    """Current day's total plus every archived day's total."""
    return state.current_day.total + sum(
        (record.total for record in state.history), ZERO
    )


def average_daily(state: AppState) -> Decimal:
    """Mean of archived day totals; 0 when history is empty. Today is excluded."""
    if not state.history:
        return ZERO
    history_total = sum((record.total for record in state.history), ZERO)
    return history_total / len(state.history)


def history_summaries(state: AppState) -> list[DaySummary]:
    """Date, entry count and total for each archived day, most recent first."""
    return [
        DaySummary(
            date=record.date,
            transaction_count=record.transaction_count,
            total=record.total,
        )
        for record in state.history
    ]


def build_snapshot(
    state: AppState,
    now: dt.datetime,
    window_days: int = 7,
) -> StatsSnapshot:
    """All analytics figures for `now` in one object."""
    return StatsSnapshot(
        generated_for=now.date(),
        total_spent=total_spent_all_time(state),
        average_daily=average_daily(state),
        weekly=weekly_stats(state, now, window_days),
        categories=category_stats(state),
    )


def format_currency(amount: Union[Decimal, float, int]) -> str:
    """Two-decimal dollar amount, e.g. '$12.50'."""
    return f"${Decimal(str(amount)):.2f}"


def format_long_date(day: dt.date) -> str:
    """e.g. 'Monday, October 19, 2026'."""
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def format_short_date(day: dt.date) -> str:
    """e.g. 'Oct 19'."""
    return f"{day:%b} {day.day}"
