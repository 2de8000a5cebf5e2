"""Flow tests through the SpendingTracker facade."""

import datetime as dt
import random
from decimal import Decimal

import pytest

from smartspend.advice import CATEGORY_TIPS, SLOW_DOWN_TIP
from smartspend.models.audit import AuditEventType
from smartspend.orchestrator import (
    SpendingTracker,
    TrackerNotInitializedError,
    create_tracker,
)
from smartspend.services.storage import JsonFileStore
from smartspend.validation import InvalidAmount


@pytest.fixture
def tracker(store, settings, audit_logger):
    return SpendingTracker(store, settings, audit_logger, rng=random.Random(42))


class TestSpendingFlow:
    """End-to-end flows on one store."""

    def test_lunch_then_game_crosses_tip_threshold(self, tracker, noon):
        """12.50 food then 40 games: the second tip uses the post-add total 52.50."""
        tracker.initialize(noon)

        lunch, first_tip = tracker.add_spending(12.50, "lunch", "food", noon)
        assert tracker.state.current_day.total == Decimal("12.5")
        assert tracker.state.current_day.first_entry_time == lunch.timestamp
        assert first_tip in CATEGORY_TIPS["food"]

        _, second_tip = tracker.add_spending(40, "new game", "games", noon + dt.timedelta(minutes=5))
        assert tracker.state.current_day.total == Decimal("52.5")
        assert second_tip == SLOW_DOWN_TIP

    def test_operations_require_initialize(self, tracker, noon):
        assert tracker.is_initialized is False
        with pytest.raises(TrackerNotInitializedError):
            tracker.add_spending(5, "x", "food", noon)
        with pytest.raises(TrackerNotInitializedError):
            tracker.category_stats()

    def test_state_survives_restart_same_day(self, store, settings, noon):
        first = SpendingTracker(store, settings)
        first.initialize(noon)
        entry, _ = first.add_spending(9, "book", "shopping", noon)

        second = SpendingTracker(store, settings)
        state = second.initialize(noon + dt.timedelta(hours=2))

        assert [s.id for s in state.current_day.spendings] == [entry.id]
        assert state.history == []

    def test_reload_keeps_total_equal_to_entries(self, store, settings, noon):
        first = SpendingTracker(store, settings)
        first.initialize(noon)
        for amount in ("0.1", "0.2", "12.345", "9007199254740992", "1"):
            first.add_spending(amount, "item", "food", noon)

        day = SpendingTracker(store, settings).initialize(noon + dt.timedelta(hours=1)).current_day

        assert day.total == day.computed_total()
        assert day.total == first.state.current_day.total

    def test_huge_amount_is_rejected_and_day_still_loads(self, store, settings, noon):
        first = SpendingTracker(store, settings)
        first.initialize(noon)
        first.add_spending(12.5, "lunch", "food", noon)
        with pytest.raises(InvalidAmount):
            first.add_spending("1e400", "x", "food", noon)

        day = SpendingTracker(store, settings).initialize(noon + dt.timedelta(hours=1)).current_day

        assert day.total == Decimal("12.5")
        assert len(day.spendings) == 1

    def test_next_day_rolls_over(self, store, settings, noon):
        first = SpendingTracker(store, settings)
        first.initialize(noon)
        first.add_spending(9, "book", "shopping", noon)

        second = SpendingTracker(store, settings)
        tomorrow = noon + dt.timedelta(days=1)
        second.initialize(tomorrow)

        assert second.state.current_day.date == tomorrow.date()
        assert second.state.current_day.spendings == []
        assert [d.date for d in second.state.history] == [noon.date()]
        assert second.average_daily() == Decimal("9")
        assert second.total_spent_all_time() == Decimal("9")
        assert second.weekly_stats(tomorrow)[noon.date().isoformat()] == Decimal("9")

    def test_delete_and_clear(self, tracker, noon):
        tracker.initialize(noon)
        entry, _ = tracker.add_spending(3, "tea", "food", noon)

        tracker.delete_spending(entry.id)
        tracker.delete_spending(entry.id)
        tracker.clear_history()

        assert tracker.state.current_day.total == Decimal("0")
        assert tracker.category_stats() == {}
        assert tracker.state.history == []

    def test_rejected_input_leaves_state_alone(self, tracker, noon, audit_logger):
        tracker.initialize(noon)
        with pytest.raises(InvalidAmount):
            tracker.add_spending("-3", "tea", "food", noon)

        assert tracker.state.current_day.spendings == []
        assert audit_logger.events_of_type(AuditEventType.SPENDING_REJECTED)

    def test_snapshot_and_summaries(self, tracker, noon):
        tracker.initialize(noon)
        tracker.add_spending(5, "bus", "transport", noon)

        snapshot = tracker.snapshot(noon)

        assert snapshot.total_spent == Decimal("5")
        assert snapshot.categories == {"transport": 1}
        assert tracker.history_summaries() == []

    def test_generate_tip_passthrough(self, tracker):
        assert tracker.generate_tip(1, "food", Decimal("60")) == SLOW_DOWN_TIP


class TestCreateTracker:
    """Tests for the create_tracker factory."""

    def test_uses_json_store_in_data_dir(self, settings, noon):
        tracker = create_tracker(settings, keep_audit_trail=True)
        tracker.initialize(noon)
        tracker.add_spending(12.5, "lunch", "food", noon)

        assert (settings.data_dir / "current-day.json").exists()

        reopened = SpendingTracker(JsonFileStore(settings.data_dir), settings)
        assert reopened.initialize(noon).current_day.total == Decimal("12.5")
