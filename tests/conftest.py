"""Shared fixtures: an in-memory store, isolated settings and fixed clocks."""

import datetime as dt
from decimal import Decimal

import pytest

from smartspend.audit import AuditLogger
from smartspend.config import TrackerSettings
from smartspend.models.spending import (
    DayRecord,
    SpendingEntry,
    dump_history,
    to_millis,
)
from smartspend.services.storage import CURRENT_DAY_KEY, HISTORY_KEY, InMemoryStore


UTC = dt.timezone.utc


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def settings(tmp_path):
    return TrackerSettings(_env_file=None, data_dir=tmp_path / "data")


@pytest.fixture
def audit_logger():
    return AuditLogger(keep_trail=True)


@pytest.fixture
def today():
    return dt.date(2026, 10, 19)


@pytest.fixture
def noon(today):
    return dt.datetime.combine(today, dt.time(12, 0), tzinfo=UTC)


@pytest.fixture
def make_day():
    """Factory for DayRecords with consistent totals and anchors."""

    def _make(day, amounts=(), category="food", first_entry_time=None):
        base = to_millis(dt.datetime.combine(day, dt.time(9, 0), tzinfo=UTC))
        spendings = [
            SpendingEntry(
                id=str(base + i),
                amount=Decimal(str(amount)),
                description=f"item {i}",
                category=category,
                timestamp=base + i,
                time="09:00 AM",
            )
            for i, amount in enumerate(amounts)
        ]
        if first_entry_time is None:
            first_entry_time = base if spendings else 0
        return DayRecord(
            date=day,
            spendings=spendings,
            total=sum((s.amount for s in spendings), Decimal("0")),
            first_entry_time=first_entry_time,
        )

    return _make


@pytest.fixture
def seed_store(store):
    """Write a current day and/or history into the store as raw JSON."""

    def _seed(current=None, history=None):
        if current is not None:
            store.set(CURRENT_DAY_KEY, current.to_json())
        if history is not None:
            store.set(HISTORY_KEY, dump_history(history))
        store.write_counts.clear()
        return store

    return _seed
