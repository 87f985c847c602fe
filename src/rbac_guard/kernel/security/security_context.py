"""Kernel security – SecurityContext using contextvars."""

from __future__ import annotations

import contextvars

from rbac_guard.kernel.security.principal import Principal

_VAR: contextvars.ContextVar[Principal | None] = contextvars.ContextVar(
    "_rbac_security_context", default=None
)


class SecurityContext:
    """Store and retrieve the current authenticated :class:`Principal` via
    :mod:`contextvars` so each asyncio task has its own isolated context."""

    @staticmethod
    def get_current() -> Principal | None:
        return _VAR.get()

    @staticmethod
    def set_current(principal: Principal) -> contextvars.Token[Principal | None]:
        """Set the current principal and return a reset token."""
        return _VAR.set(principal)

    @staticmethod
    def reset(token: contextvars.Token[Principal | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        _VAR.set(None)


__all__ = ["SecurityContext"]
