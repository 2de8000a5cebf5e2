"""
Day Rollover Engine

Decides, on each session start, whether the stored "current day" is still
valid for `now` or must be archived into history and replaced.

Two triggers end a day:
1. DATE CHANGE - the stored record's date is not today's date.
   The old day is archived only if it has at least one entry;
   an empty day is discarded.
2. ELAPSED WINDOW - the stored record is dated today but its first entry
   is at least `rollover_hours` old. The day is archived regardless of
   its entry count.

The asymmetry between the two is long-standing observable behaviour and
is kept as-is.

Loading is idempotent: a second load_state with the same persisted data
and a `now` that has not crossed a boundary archives nothing.
"""

import datetime as dt
from typing import Optional

import structlog
from pydantic import ValidationError

from smartspend.audit import AuditLogger
from smartspend.config import TrackerSettings, get_settings
from smartspend.models.audit import AuditEvent, AuditEventBuilder
from smartspend.models.spending import (
    AppState,
    DayRecord,
    dump_history,
    load_history,
    to_millis,
)
from smartspend.services.storage import (
    CURRENT_DAY_KEY,
    HISTORY_KEY,
    CorruptStateError,
    PersistentStore,
)


logger = structlog.get_logger(__name__)


def push_history(
    history: list[DayRecord],
    record: DayRecord,
    limit: int,
) -> list[DayRecord]:
    """
    Insert a record at the front of history and trim the oldest overflow.

    Mutates `history` in place.

    Returns:
        The records dropped from the back (empty unless the cap was hit)
    """
    history.insert(0, record)
    dropped = history[limit:]
    del history[limit:]
    return dropped


class RolloverEngine:
    """
    Loads and normalizes tracker state from the key-value store.

    Owns the bounded history list: every archival prepends, enforces the
    cap and writes history back immediately.
    """

    def __init__(
        self,
        store: PersistentStore,
        settings: Optional[TrackerSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._store = store
        self._settings = settings or get_settings()
        self._audit_logger = audit_logger

    def load_state(self, now: dt.datetime) -> AppState:
        """
        Build the session's AppState for `now`.

        Steps:
        1. Read history and the stored current day
        2. Keep, archive or discard the stored day (see module docstring)
        3. Persist the resulting current day
        4. Return the assembled state

        Raises:
            CorruptStateError: If a stored payload cannot be parsed
        """
        today = now.date()
        history = self._read_history()
        stored = self._read_current_day()

        if stored is None:
            current = self._start_day(today)
        elif stored.date == today:
            if self._window_expired(stored, now):
                self._archive(history, stored, reason="window_elapsed")
                current = self._start_day(today)
            else:
                current = stored
        else:
            if stored.has_entries:
                self._archive(history, stored, reason="date_changed")
            else:
                self._audit(AuditEventBuilder.day_discarded(stored.date))
            current = self._start_day(today)

        self._store.set(CURRENT_DAY_KEY, current.to_json())

        self._audit(AuditEventBuilder.state_loaded(current.date, len(history)))
        return AppState(current_day=current, history=history)

    def is_expired(self, record: DayRecord, now: dt.datetime) -> bool:
        """Whether `record` would be rolled over if loaded at `now`."""
        if record.date != now.date():
            return True
        return self._window_expired(record, now)

    def _window_expired(self, record: DayRecord, now: dt.datetime) -> bool:
        if not record.has_first_entry_time:
            return False
        elapsed_ms = to_millis(now) - record.first_entry_time
        return elapsed_ms >= self._settings.rollover_window_ms

    def _start_day(self, day: dt.date) -> DayRecord:
        self._audit(AuditEventBuilder.day_started(day))
        return DayRecord.new(day)

    def _archive(self, history: list[DayRecord], record: DayRecord, reason: str) -> None:
        dropped = push_history(history, record, self._settings.history_limit)
        self._store.set(HISTORY_KEY, dump_history(history))

        logger.info(
            "day_rolled_over",
            date=record.date.isoformat(),
            reason=reason,
            history_length=len(history),
        )
        self._audit(AuditEventBuilder.day_archived(
            day=record.date,
            total=record.total,
            transaction_count=record.transaction_count,
            reason=reason,
        ))
        if dropped:
            self._audit(AuditEventBuilder.history_trimmed(
                dropped=[day.date for day in dropped],
                limit=self._settings.history_limit,
            ))

    def _read_current_day(self) -> Optional[DayRecord]:
        raw = self._store.get(CURRENT_DAY_KEY)
        if raw is None:
            return None
        try:
            return DayRecord.from_json(raw)
        except ValidationError as e:
            raise CorruptStateError(CURRENT_DAY_KEY, str(e)) from e

    def _read_history(self) -> list[DayRecord]:
        raw = self._store.get(HISTORY_KEY)
        if raw is None:
            return []
        try:
            return load_history(raw)
        except ValidationError as e:
            raise CorruptStateError(HISTORY_KEY, str(e)) from e

    def _audit(self, event: AuditEvent) -> None:
        if self._audit_logger:
            self._audit_logger.log(event)
