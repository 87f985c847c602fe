"""Kernel security — identity and role resolution.

Both resolvers turn hook failures into ``Err`` values instead of raising, so
the decision engine can tell "no access" (an empty ``Ok``) from a broken
integration (``Err(...)``) without a catch-all handler.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from typing import Any

from rbac_guard.kernel.errors import (
    AuthorizationError,
    IdentityResolutionError,
    RoleLookupContractError,
    RoleLookupError,
)
from rbac_guard.kernel.security.hooks import RBACHooks
from rbac_guard.kernel.security.identity import Actor, Identity
from rbac_guard.kernel.security.roles import AnyVerb, ExactVerb, Role, Rule, VerbSet
from rbac_guard.kernel.types import Err, Ok, Result


async def _call(hook: Any, *args: Any) -> Any:
    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def resolve_identity(hooks: RBACHooks, request: Any) -> Result[Identity, IdentityResolutionError]:
    """Run the tenant, user and client extractors, in that order."""
    values: dict[str, Any] = {}
    for name in ("tenant", "user", "client"):
        try:
            values[name] = await _call(getattr(hooks, name), request)
        except Exception as exc:  # noqa: BLE001
            return Err(IdentityResolutionError(name, exc))
    return Ok(Identity(tenant_id=values["tenant"], user_id=values["user"], client_id=values["client"]))


def _lookup_for(hooks: RBACHooks, identity: Identity) -> tuple[str, Any, tuple[Any, ...]]:
    match identity.actor:
        case Actor.USER:
            return "roles_for_user", hooks.roles_for_user, (identity.tenant_id, identity.user_id)
        case Actor.CLIENT:
            return "roles_for_client", hooks.roles_for_client, (identity.tenant_id, identity.client_id)
        case _:
            return "roles_for_anonymous", hooks.roles_for_anonymous, (identity.tenant_id,)


def _role_defect(role: Role) -> str | None:
    if not isinstance(role.rules, (tuple, list)):
        return f"role {role.id!r} rules must be a list of Rule, got {type(role.rules).__name__}"
    for rule in role.rules:
        if not isinstance(rule, Rule) or not isinstance(rule.verbs, (AnyVerb, ExactVerb, VerbSet)):
            return f"role {role.id!r} has a malformed rule {rule!r}"
    return None


def _normalise(hook_name: str, value: Any) -> Result[tuple[Role, ...], RoleLookupContractError]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return Err(RoleLookupContractError(hook_name, value))
    roles: list[Role] = []
    for item in value:
        if isinstance(item, Role):
            defect = _role_defect(item)
            if defect is not None:
                return Err(RoleLookupContractError(hook_name, item, reason=defect))
            roles.append(item)
        elif isinstance(item, Mapping):
            try:
                roles.append(Role.from_dict(item))
            except (TypeError, ValueError) as exc:
                return Err(RoleLookupContractError(hook_name, item, reason=str(exc)))
        else:
            return Err(RoleLookupContractError(hook_name, item, reason="expected a Role or a role record"))
    return Ok(tuple(roles))


async def resolve_roles(hooks: RBACHooks, identity: Identity) -> Result[tuple[Role, ...], AuthorizationError]:
    """Fetch the roles of the identity's actor through exactly one lookup hook."""
    hook_name, hook, args = _lookup_for(hooks, identity)
    try:
        value = await _call(hook, *args)
    except Exception as exc:  # noqa: BLE001
        return Err(RoleLookupError(hook_name, exc))
    return _normalise(hook_name, value)


__all__ = ["resolve_identity", "resolve_roles"]
