"""Tests for the statistics engine."""

import datetime as dt
from decimal import Decimal

import pytest

from smartspend.models.spending import AppState, DayRecord
from smartspend.queries import stats


@pytest.fixture
def state_with(make_day, today):
    def _build(current_amounts=(), history=()):
        return AppState(
            current_day=make_day(today, current_amounts),
            history=list(history),
        )

    return _build


class TestWeeklyStats:
    """Tests for weekly_stats."""

    def test_exactly_seven_keys_ending_today(self, state_with, noon, today):
        result = stats.weekly_stats(state_with(), noon)

        assert len(result) == 7
        assert list(result) == [
            (today - dt.timedelta(days=offset)).isoformat() for offset in range(6, -1, -1)
        ]
        assert all(value == 0 for value in result.values())

    def test_current_day_total_at_its_date(self, state_with, noon):
        result = stats.weekly_stats(state_with([12.5, 40]), noon)
        assert result["2026-10-19"] == Decimal("52.5")

    def test_history_inside_window_overlays(self, state_with, make_day, noon, today):
        history = [
            make_day(today - dt.timedelta(days=1), [10]),
            make_day(today - dt.timedelta(days=6), [3, 4]),
        ]
        result = stats.weekly_stats(state_with(history=history), noon)

        assert result["2026-10-18"] == Decimal("10")
        assert result["2026-10-13"] == Decimal("7")

    def test_history_outside_window_ignored(self, state_with, make_day, noon, today):
        history = [make_day(today - dt.timedelta(days=7), [99])]
        result = stats.weekly_stats(state_with(history=history), noon)

        assert "2026-10-12" not in result
        assert sum(result.values()) == 0
        assert len(result) == 7

    def test_current_day_outside_window_ignored(self, make_day, noon, today):
        state = AppState(current_day=make_day(today - dt.timedelta(days=10), [5]))
        result = stats.weekly_stats(state, noon)

        assert len(result) == 7
        assert sum(result.values()) == 0

    def test_duplicate_history_date_most_recent_wins(self, state_with, make_day, noon, today):
        day = today - dt.timedelta(days=2)
        history = [make_day(day, [1]), make_day(day, [50])]
        result = stats.weekly_stats(state_with(history=history), noon)

        assert result[day.isoformat()] == Decimal("1")

    def test_custom_window(self, state_with, noon):
        assert len(stats.weekly_stats(state_with(), noon, window_days=14)) == 14

    def test_weekly_series_labels_in_date_order(self, state_with, noon):
        series = stats.weekly_series(state_with([2]), noon)

        assert [label for label, _ in series] == [
            "Oct 13", "Oct 14", "Oct 15", "Oct 16", "Oct 17", "Oct 18", "Oct 19",
        ]
        assert series[-1][1] == Decimal("2")


class TestCategoryStats:
    """Tests for category_stats."""

    def test_counts_today_by_raw_category(self, make_day, today):
        current = make_day(today, [1, 2], category="food")
        current.spendings.append(
            make_day(today, [3], category="Food").spendings[0].model_copy(update={"id": "x"})
        )
        current.spendings.append(
            make_day(today, [4], category="games").spendings[0].model_copy(update={"id": "y"})
        )
        state = AppState(current_day=current)

        assert stats.category_stats(state) == {"food": 2, "Food": 1, "games": 1}

    def test_history_not_included(self, make_day, today):
        state = AppState(
            current_day=DayRecord.new(today),
            history=[make_day(today - dt.timedelta(days=1), [5], category="bills")],
        )
        assert stats.category_stats(state) == {}


class TestTotals:
    """Tests for total_spent_all_time and average_daily."""

    def test_total_spent_all_time_includes_everything(self, state_with, make_day, today):
        history = [
            make_day(today - dt.timedelta(days=1), [10]),
            make_day(today - dt.timedelta(days=200), [30]),
        ]
        state = state_with([2.5], history)
        assert stats.total_spent_all_time(state) == Decimal("42.5")

    def test_average_daily_empty_history(self, state_with):
        assert stats.average_daily(state_with([100])) == 0

    def test_average_daily_is_mean_of_history_only(self, state_with, make_day, today):
        history = [
            make_day(today - dt.timedelta(days=i + 1), [amount])
            for i, amount in enumerate([10, 20, 30])
        ]
        state = state_with([1000], history)
        assert stats.average_daily(state) == Decimal("20")

    def test_history_summaries(self, state_with, make_day, today):
        history = [make_day(today - dt.timedelta(days=1), [1, 2, 3])]
        summaries = stats.history_summaries(state_with(history=history))

        assert len(summaries) == 1
        assert summaries[0].date == today - dt.timedelta(days=1)
        assert summaries[0].transaction_count == 3
        assert summaries[0].total == Decimal("6")

    def test_snapshot(self, state_with, make_day, noon, today):
        history = [make_day(today - dt.timedelta(days=1), [10])]
        snapshot = stats.build_snapshot(state_with([5], history), noon)

        assert snapshot.generated_for == today
        assert snapshot.total_spent == Decimal("15")
        assert snapshot.average_daily == Decimal("10")
        assert snapshot.categories == {"food": 1}
        assert len(snapshot.weekly) == 7


class TestFormatting:
    """Tests for display helpers."""

    @pytest.mark.parametrize(
        "amount,expected",
        [(Decimal("12.5"), "$12.50"), (0, "$0.00"), (52.499, "$52.50"), (Decimal("1234"), "$1234.00")],
    )
    def test_format_currency(self, amount, expected):
        assert stats.format_currency(amount) == expected

    def test_format_long_date(self):
        assert stats.format_long_date(dt.date(2026, 10, 19)) == "Monday, October 19, 2026"

    def test_format_short_date(self):
        assert stats.format_short_date(dt.date(2026, 10, 5)) == "Oct 5"
