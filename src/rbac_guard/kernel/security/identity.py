"""Kernel security — per-request Identity and actor precedence."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any


class Actor(str, Enum):
    USER = "user"
    CLIENT = "client"
    ANONYMOUS = "anonymous"


@dataclasses.dataclass(frozen=True)
class Identity:
    """Identifiers extracted from one request.

    The actor is the user when ``user_id`` is set, otherwise the client when
    ``client_id`` is set, otherwise anonymous. ``tenant_id`` only scopes the
    role lookup.
    """

    tenant_id: Any = None
    user_id: Any = None
    client_id: Any = None

    @property
    def actor(self) -> Actor:
        if self.user_id is not None:
            return Actor.USER
        if self.client_id is not None:
            return Actor.CLIENT
        return Actor.ANONYMOUS

    @property
    def actor_id(self) -> Any:
        if self.user_id is not None:
            return self.user_id
        return self.client_id

    def describe(self) -> str:
        """Diagnostic string, e.g. ``"tenantid:t1 userid:u1"`` or ``"ANONYMOUS"``."""
        prefix = f"tenantid:{self.tenant_id} " if self.tenant_id is not None else ""
        match self.actor:
            case Actor.USER:
                return f"{prefix}userid:{self.user_id}"
            case Actor.CLIENT:
                return f"{prefix}clientid:{self.client_id}"
            case _:
                return f"{prefix}ANONYMOUS"


__all__ = ["Actor", "Identity"]
