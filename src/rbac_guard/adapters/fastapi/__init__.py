"""FastAPI adapter – RBAC route guards and the 403 error mapping."""
from rbac_guard.adapters.fastapi.guard import (
    PERMISSION_DENIED_BODY,
    FastAPIRBACGuard,
    permission_denied_response,
)

__all__ = [
    "FastAPIRBACGuard",
    "PERMISSION_DENIED_BODY",
    "permission_denied_response",
]
