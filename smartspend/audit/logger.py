"""
Audit Logger

DESIGN DECISION: Every state change of the tracker is logged.
This provides:
1. Traceability of rollovers and deletions
2. Debugging capability when a total looks off
3. An in-memory trail a UI (or a test) can inspect

The audit logger:
- Is synchronous, like the rest of the tracker
- Never touches spending state or the key-value store
"""

import logging

import structlog

from smartspend.models.audit import AuditEvent, AuditEventType, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output through stdlib logging at the given level."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))
    logging.getLogger("smartspend").setLevel(level.upper())


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory trail, when enabled
    """

    def __init__(self, keep_trail: bool = False, max_trail: int = 1000):
        """
        Initialize audit logger.

        Args:
            keep_trail: Whether to keep emitted events in memory.
            max_trail: Oldest events are dropped beyond this many.
        """
        self._keep_trail = keep_trail
        self._max_trail = max_trail
        self._events: list[AuditEvent] = []
        self._logger = structlog.get_logger("smartspend.audit")

    @property
    def events(self) -> list[AuditEvent]:
        """Events kept in the trail, oldest first."""
        return list(self._events)

    def events_of_type(self, event_type: AuditEventType) -> list[AuditEvent]:
        return [event for event in self._events if event.event_type == event_type]

    def log(self, event: AuditEvent) -> None:
        """Log an audit event locally and, if enabled, keep it in the trail."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._keep_trail:
            self._events.append(event)
            if len(self._events) > self._max_trail:
                del self._events[0]

    def clear_trail(self) -> None:
        self._events.clear()

