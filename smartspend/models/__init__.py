"""
Data Models Package

This package contains all Pydantic models used by SmartSpend.
Everything the tracker persists or logs conforms to these schemas.
"""

from smartspend.models.spending import (
    NO_ENTRY_TIME,
    AppState,
    DayRecord,
    SpendingEntry,
    dump_history,
    format_wall_clock,
    load_history,
    to_millis,
)
from smartspend.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Spending models
    "NO_ENTRY_TIME",
    "AppState",
    "DayRecord",
    "SpendingEntry",
    "dump_history",
    "format_wall_clock",
    "load_history",
    "to_millis",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
