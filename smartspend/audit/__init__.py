"""Audit logging package."""

from smartspend.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
