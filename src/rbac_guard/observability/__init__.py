"""Observability – structured logging and audit trail."""

from rbac_guard.observability.logging import AuditLogger, AuditOutcome, JsonLoggerFactory, get_logger

__all__ = ["AuditLogger", "AuditOutcome", "JsonLoggerFactory", "get_logger"]
