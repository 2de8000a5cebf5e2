"""
Audit Models for SmartSpend

Every state change of the tracker is described by an audit event:
1. Traceability of rollovers (when a day was archived, discarded or trimmed)
2. Debugging information when totals look wrong
3. A record of rejected input

DESIGN DECISION: Audit events are descriptive only. Emitting one never
changes spending state.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Startup / rollover
    STATE_LOADED = "state_loaded"
    DAY_STARTED = "day_started"
    DAY_ARCHIVED = "day_archived"
    DAY_DISCARDED = "day_discarded"
    HISTORY_TRIMMED = "history_trimmed"

    # Ledger
    SPENDING_ADDED = "spending_added"
    SPENDING_REJECTED = "spending_rejected"
    SPENDING_DELETED = "spending_deleted"
    HISTORY_CLEARED = "history_cleared"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """A single audit event."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc),
        description="When the event was recorded (UTC)"
    )

    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - which day record or entry is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'day', 'spending', 'history')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="Date or spending id the event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.day_archived(day, total, count, reason)
        event = AuditEventBuilder.spending_added(spending_id, amount, category, total)
    """

    @staticmethod
    def state_loaded(
        day: dt.date,
        history_length: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STATE_LOADED,
            entity_type="day",
            entity_id=day.isoformat(),
            description=f"State loaded for {day.isoformat()}",
            details={
                "history_length": history_length,
            },
        )

    @staticmethod
    def day_started(day: dt.date) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DAY_STARTED,
            entity_type="day",
            entity_id=day.isoformat(),
            description=f"New day started: {day.isoformat()}",
        )

    @staticmethod
    def day_archived(
        day: dt.date,
        total: Decimal,
        transaction_count: int,
        reason: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DAY_ARCHIVED,
            entity_type="day",
            entity_id=day.isoformat(),
            description=f"Day archived ({reason}): {day.isoformat()}",
            details={
                "reason": reason,
                "total": str(total),
                "transaction_count": transaction_count,
            },
        )

    @staticmethod
    def day_discarded(day: dt.date) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DAY_DISCARDED,
            severity=AuditSeverity.DEBUG,
            entity_type="day",
            entity_id=day.isoformat(),
            description=f"Empty day discarded: {day.isoformat()}",
        )

    @staticmethod
    def history_trimmed(dropped: list[dt.date], limit: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.HISTORY_TRIMMED,
            entity_type="history",
            description=f"History trimmed to {limit} days",
            details={
                "dropped_dates": [day.isoformat() for day in dropped],
                "limit": limit,
            },
        )

    @staticmethod
    def spending_added(
        spending_id: str,
        amount: Decimal,
        category: str,
        day_total: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SPENDING_ADDED,
            entity_type="spending",
            entity_id=spending_id,
            description=f"Spending added: {category} - ${amount}",
            details={
                "amount": str(amount),
                "category": category,
                "day_total": str(day_total),
            },
            is_user_action=True,
        )

    @staticmethod
    def spending_rejected(reason: str, field: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SPENDING_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="spending",
            description=f"Spending rejected: {reason}",
            details={
                "field": field,
            },
            is_user_action=True,
        )

    @staticmethod
    def spending_deleted(
        spending_id: str,
        amount: Decimal,
        day_total: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SPENDING_DELETED,
            entity_type="spending",
            entity_id=spending_id,
            description=f"Spending deleted: {spending_id}",
            details={
                "amount": str(amount),
                "day_total": str(day_total),
            },
            is_user_action=True,
        )

    @staticmethod
    def history_cleared(cleared_days: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.HISTORY_CLEARED,
            entity_type="history",
            description=f"History cleared ({cleared_days} days)",
            details={
                "cleared_days": cleared_days,
            },
            is_user_action=True,
        )
