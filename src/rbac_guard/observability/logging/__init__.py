"""Observability – structlog helpers and the audit sink."""
from rbac_guard.observability.logging.audit import AuditLogger, AuditOutcome
from rbac_guard.observability.logging.factory import JsonLoggerFactory
from rbac_guard.observability.logging.processors import get_logger

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "get_logger",
]
