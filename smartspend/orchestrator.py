"""
Main Orchestrator for SmartSpend

This module ties the components together into the surface a UI calls:
1. Startup (load state, roll the day over if needed)
2. Ledger actions (add, delete, clear history)
3. Read-only statistics and tips

DESIGN DECISION: The tracker owns one AppState per instance, never a
module-level one. Two trackers on two stores are fully independent,
and every time-dependent call takes `now` explicitly.
"""

import datetime as dt
import random
from decimal import Decimal
from typing import Optional

from smartspend.advice import TipAdvisor
from smartspend.audit import AuditLogger, configure_logging
from smartspend.config import TrackerSettings, get_settings
from smartspend.ledger import SpendingLedger
from smartspend.models.spending import AppState, SpendingEntry
from smartspend.queries import stats
from smartspend.rollover import RolloverEngine
from smartspend.services.storage import JsonFileStore, PersistentStore
from smartspend.validation.validator import AmountInput


class TrackerNotInitializedError(RuntimeError):
    """An operation needed state before initialize() was called."""
    pass


class SpendingTracker:
    """
    Session facade over rollover, ledger, stats and tips.

    Flow:
    1. initialize(now) -> loads and normalizes persisted state
    2. add_spending / delete_spending / clear_history -> write-through
    3. weekly_stats / category_stats / ... -> pure reads of the state
    """

    def __init__(
        self,
        store: PersistentStore,
        settings: Optional[TrackerSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
        rng: Optional[random.Random] = None,
    ):
        self._settings = settings or get_settings()
        self._audit_logger = audit_logger
        self._engine = RolloverEngine(store, self._settings, audit_logger)
        self._ledger = SpendingLedger(store, audit_logger=audit_logger)
        self._advisor = TipAdvisor(threshold=self._settings.tip_threshold, rng=rng)
        self._state: Optional[AppState] = None

    @property
    def state(self) -> AppState:
        if self._state is None:
            raise TrackerNotInitializedError("Call initialize(now) first")
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    def initialize(self, now: dt.datetime) -> AppState:
        """Load state from the store, rolling the day over if a boundary passed."""
        self._state = self._engine.load_state(now)
        return self._state

    def add_spending(
        self,
        amount: AmountInput,
        description: str,
        category: str,
        now: dt.datetime,
    ) -> tuple[SpendingEntry, str]:
        """
        Record a spending and pick the tip to show for it.

        The tip is computed from the day total AFTER this spending.

        Returns:
            (entry, tip)

        Raises:
            InvalidAmount, InvalidInput: on rejected input (state untouched)
        """
        entry = self._ledger.add_spending(self.state, amount, description, category, now)
        tip = self._advisor.generate_tip(
            entry.amount, entry.category, self.state.current_day.total
        )
        return entry, tip

    def delete_spending(self, spending_id: str) -> None:
        """Remove a spending from today. Unknown ids are ignored."""
        self._ledger.delete_spending(self.state, spending_id)

    def clear_history(self) -> None:
        self._ledger.clear_history(self.state)

    def weekly_stats(self, now: dt.datetime) -> dict[str, Decimal]:
        return stats.weekly_stats(self.state, now, self._settings.weekly_window_days)

    def category_stats(self) -> dict[str, int]:
        return stats.category_stats(self.state)

    def total_spent_all_time(self) -> Decimal:
        return stats.total_spent_all_time(self.state)

    def average_daily(self) -> Decimal:
        return stats.average_daily(self.state)

    def history_summaries(self) -> list[stats.DaySummary]:
        return stats.history_summaries(self.state)

    def snapshot(self, now: dt.datetime) -> stats.StatsSnapshot:
        return stats.build_snapshot(self.state, now, self._settings.weekly_window_days)

    def generate_tip(
        self,
        amount: AmountInput,
        category: str,
        current_day_total: Decimal,
    ) -> str:
        return self._advisor.generate_tip(amount, category, current_day_total)


def create_tracker(
    settings: Optional[TrackerSettings] = None,
    store: Optional[PersistentStore] = None,
    keep_audit_trail: bool = False,
) -> SpendingTracker:
    """
    Factory function to create a tracker from settings.

    Args:
        settings: Defaults to get_settings()
        store: Defaults to a JsonFileStore rooted at settings.data_dir
        keep_audit_trail: Keep audit events in memory as well as logging them

    Returns:
        An uninitialized SpendingTracker; call initialize(now) next
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    return SpendingTracker(
        store=store or JsonFileStore(settings.data_dir),
        settings=settings,
        audit_logger=AuditLogger(keep_trail=keep_audit_trail),
    )
