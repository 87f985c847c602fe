"""Kernel security – Principal."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Principal:
    """Authenticated identity placed in :class:`SecurityContext` by an upstream
    authentication layer. Service accounts are API clients, not users."""
    subject: str
    tenant_id: str | None = None
    claims: dict[str, Any] = dataclasses.field(default_factory=dict)
    is_service_account: bool = False


__all__ = ["Principal"]
