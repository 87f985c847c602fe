"""Observability – AuditLogger.

Dedicated structured-log sink for authorization denials and failures. This
is the only place failure detail goes; callers only ever see a generic 403.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from rbac_guard.observability.logging.processors import get_logger


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    DENIED = "denied"
    ERROR = "error"


class AuditLogger:
    """Emit ``audit.*`` entries at ``WARNING`` (denials) or ``ERROR`` (failures).

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog logger. Defaults to ``get_logger("rbac_guard.audit")``.
    """

    def __init__(self, service: str = "unknown", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("rbac_guard.audit")

    def log_denied(
        self,
        identity: str,
        resource: str,
        action: str,
        *,
        log_only: bool,
        **extra: Any,
    ) -> None:
        """Record a permission denial.

        ``identity`` is the diagnostic identity string, ``resource`` the
        group and ``action`` the verb. ``log_only`` tells whether the request
        was let through anyway.
        """
        self._log.warning(
            "audit.access",
            **self._entry(identity, resource, action, AuditOutcome.DENIED, log_only, extra),
        )

    def log_error(
        self,
        identity: str,
        resource: str,
        action: str,
        error: Any,
        *,
        log_only: bool,
        **extra: Any,
    ) -> None:
        """Record a decision that failed because a hook misbehaved."""
        detail = error.to_dict() if hasattr(error, "to_dict") else {"message": str(error)}
        self._log.error(
            "audit.error",
            error=detail,
            **self._entry(identity, resource, action, AuditOutcome.ERROR, log_only, extra),
        )

    def _entry(
        self,
        identity: str,
        resource: str,
        action: str,
        outcome: AuditOutcome,
        log_only: bool,
        extra: dict[str, Any],
    ) -> dict[str, Any]:
        return {
            "service": self._service,
            "identity": identity,
            "resource": resource,
            "action": action,
            "outcome": outcome.value,
            "mode": "log_only" if log_only else "enforce",
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        }


__all__ = ["AuditLogger", "AuditOutcome"]
