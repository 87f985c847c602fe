"""Kernel security — pluggable identity and role lookup hooks.

The host adapts the engine to its identity model and role store by
replacing hooks. Every hook may be a plain function or a coroutine function.

==========================  ====================================  ============
Hook                        Signature                             Default
==========================  ====================================  ============
``tenant``                  ``(request) -> tenant_id | None``     request state
``user``                    ``(request) -> user_id | None``       request state
``client``                  ``(request) -> client_id | None``     request state
``roles_for_user``          ``(tenant_id, user_id) -> [Role]``    ``[]``
``roles_for_client``        ``(tenant_id, client_id) -> [Role]``  ``[]``
``roles_for_anonymous``     ``(tenant_id) -> [Role]``             ``[]``
==========================  ====================================  ============

Default extractors read ``request.state.tenant.id``, ``request.state.user.id``
and ``request.state.client_id``, then fall back to the :class:`Principal` in
:class:`SecurityContext`. Default role lookups grant nothing.
"""

from __future__ import annotations

import dataclasses
import threading
from collections.abc import Callable, Mapping
from typing import Any

from rbac_guard.kernel.security.security_context import SecurityContext
from rbac_guard.observability.logging import get_logger

_log = get_logger(__name__)

Hook = Callable[..., Any]


def _id_of(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get("id")
    return getattr(value, "id", None)


def _state(request: Any) -> Any:
    return getattr(request, "state", None)


def default_tenant(request: Any) -> Any:
    tenant_id = _id_of(getattr(_state(request), "tenant", None))
    if tenant_id is not None:
        return tenant_id
    principal = SecurityContext.get_current()
    return principal.tenant_id if principal is not None else None


def default_user(request: Any) -> Any:
    user_id = _id_of(getattr(_state(request), "user", None))
    if user_id is not None:
        return user_id
    principal = SecurityContext.get_current()
    if principal is not None and not principal.is_service_account:
        return principal.subject
    return None


def default_client(request: Any) -> Any:
    client_id = getattr(_state(request), "client_id", None)
    if client_id is not None:
        return client_id
    principal = SecurityContext.get_current()
    if principal is not None and principal.is_service_account:
        return principal.subject
    return None


def no_roles_for_user(tenant_id: Any, user_id: Any) -> list[Any]:  # noqa: ARG001
    return []


def no_roles_for_client(tenant_id: Any, client_id: Any) -> list[Any]:  # noqa: ARG001
    return []


def no_roles_for_anonymous(tenant_id: Any) -> list[Any]:  # noqa: ARG001
    return []


@dataclasses.dataclass(frozen=True)
class HooksPatch:
    """Partial hook table; ``None`` fields leave the current hook untouched."""

    tenant: Hook | None = None
    user: Hook | None = None
    client: Hook | None = None
    roles_for_user: Hook | None = None
    roles_for_client: Hook | None = None
    roles_for_anonymous: Hook | None = None

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is not None and not callable(value):
                raise TypeError(f"hook '{f.name}' must be callable, got {type(value).__name__}")

    def changes(self) -> dict[str, Hook]:
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }


@dataclasses.dataclass(frozen=True)
class RBACHooks:
    """Complete hook table. Immutable; patching yields a new table."""

    tenant: Hook = default_tenant
    user: Hook = default_user
    client: Hook = default_client
    roles_for_user: Hook = no_roles_for_user
    roles_for_client: Hook = no_roles_for_client
    roles_for_anonymous: Hook = no_roles_for_anonymous

    def patched(self, patch: HooksPatch) -> RBACHooks:
        return dataclasses.replace(self, **patch.changes())


class HookRegistry:
    """Holder of the current :class:`RBACHooks`.

    ``patch`` swaps the whole table under a lock, so a reader holding a
    :meth:`snapshot` never sees an old extractor paired with a new lookup.
    """

    def __init__(self, hooks: RBACHooks | None = None) -> None:
        self._lock = threading.Lock()
        self._hooks = hooks if hooks is not None else RBACHooks()

    def snapshot(self) -> RBACHooks:
        return self._hooks

    def patch(self, patch: HooksPatch | None = None, /, **changes: Hook) -> RBACHooks:
        """Merge *patch* and/or keyword hooks into the table and return the result.

        Unknown hook names raise ``TypeError``.
        """
        merged = HooksPatch(**{**(patch.changes() if patch is not None else {}), **changes})
        with self._lock:
            self._hooks = self._hooks.patched(merged)
            hooks = self._hooks
        _log.debug("rbac.hooks_patched", hooks=sorted(merged.changes()))
        return hooks

    def reset(self) -> RBACHooks:
        with self._lock:
            self._hooks = RBACHooks()
            return self._hooks


default_registry = HookRegistry()


def patch_hooks(patch: HooksPatch | None = None, /, **changes: Hook) -> RBACHooks:
    """Patch the process-wide hook table. Prefer doing this once at start-up."""
    return default_registry.patch(patch, **changes)


__all__ = [
    "Hook",
    "HookRegistry",
    "HooksPatch",
    "RBACHooks",
    "default_client",
    "default_registry",
    "default_tenant",
    "default_user",
    "patch_hooks",
]
