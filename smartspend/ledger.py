"""
Spending Ledger

Add, delete and clear operations against an AppState. Each operation
validates first, mutates the state it was given, then writes the affected
record straight through to the store.

GUARANTEES:
- current_day.total equals the sum of its remaining entries after every call
- A rejected spending changes nothing (no state, no writes)
- Deleting an unknown id is a no-op
- History is never edited except by clear_history
"""

import datetime as dt
from decimal import Decimal
from typing import Optional

import structlog

from smartspend.audit import AuditLogger
from smartspend.models.audit import AuditEventBuilder
from smartspend.models.spending import (
    AppState,
    DayRecord,
    SpendingEntry,
    dump_history,
    format_wall_clock,
    to_millis,
)
from smartspend.services.storage import CURRENT_DAY_KEY, HISTORY_KEY, PersistentStore
from smartspend.validation.validator import (
    AmountInput,
    InvalidAmount,
    SpendingValidationError,
    SpendingValidator,
    is_storable,
)


logger = structlog.get_logger(__name__)


def make_spending_id(timestamp_ms: int, day: DayRecord) -> str:
    """
    Time-based id, made unique within the day.

    Two entries created in the same millisecond get '-1', '-2', ... suffixes.
    """
    base = str(timestamp_ms)
    existing = {entry.id for entry in day.spendings}
    if base not in existing:
        return base
    suffix = 1
    while f"{base}-{suffix}" in existing:
        suffix += 1
    return f"{base}-{suffix}"


class SpendingLedger:
    """Mutations of the current day and the history list."""

    def __init__(
        self,
        store: PersistentStore,
        validator: Optional[SpendingValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._store = store
        self._validator = validator or SpendingValidator()
        self._audit_logger = audit_logger

    def add_spending(
        self,
        state: AppState,
        amount: AmountInput,
        description: str,
        category: str,
        now: dt.datetime,
    ) -> SpendingEntry:
        """
        Record a new spending in the current day.

        The first entry of a day anchors first_entry_time, which starts the
        rollover window.

        Raises:
            InvalidAmount: amount is non-numeric, non-finite or <= 0,
                or would push the day total past a storable number
            InvalidInput: description or category is empty after trimming
        """
        try:
            valid = self._validator.validate(amount, description, category)
            if not is_storable(state.current_day.total + valid.amount):
                raise InvalidAmount(amount, "Daily total is too large")
        except SpendingValidationError as e:
            if self._audit_logger:
                self._audit_logger.log(
                    AuditEventBuilder.spending_rejected(e.message, e.field)
                )
            raise

        day = state.current_day
        timestamp = to_millis(now)
        entry = SpendingEntry(
            id=make_spending_id(timestamp, day),
            amount=valid.amount,
            description=valid.description,
            category=valid.category,
            timestamp=timestamp,
            time=format_wall_clock(now),
        )

        day.spendings.append(entry)
        day.total = day.total + entry.amount
        if not day.has_first_entry_time:
            day.first_entry_time = timestamp

        self._save_current_day(day)

        logger.debug("spending_added", id=entry.id, day_total=str(day.total))
        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.spending_added(
                spending_id=entry.id,
                amount=entry.amount,
                category=entry.category,
                day_total=day.total,
            ))
        return entry

    def delete_spending(self, state: AppState, spending_id: str) -> Optional[SpendingEntry]:
        """
        Remove an entry from the current day.

        Only the current day is searched. An unknown id changes nothing
        and writes nothing.

        Returns:
            The removed entry, or None if no entry had this id
        """
        day = state.current_day
        entry = day.find_spending(spending_id)
        if entry is None:
            return None

        day.spendings = [s for s in day.spendings if s.id != spending_id]
        day.total = day.total - entry.amount
        if not day.spendings:
            # Clear subtraction residue such as Decimal("0.00")
            day.total = Decimal("0")

        self._save_current_day(day)

        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.spending_deleted(
                spending_id=entry.id,
                amount=entry.amount,
                day_total=day.total,
            ))
        return entry

    def clear_history(self, state: AppState) -> None:
        """Empty the history list and persist it. The current day is untouched."""
        cleared = len(state.history)
        state.history = []
        self._store.set(HISTORY_KEY, dump_history(state.history))

        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.history_cleared(cleared))

    def _save_current_day(self, day: DayRecord) -> None:
        self._store.set(CURRENT_DAY_KEY, day.to_json())
