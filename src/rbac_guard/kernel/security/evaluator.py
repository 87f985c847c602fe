"""Kernel security — rule evaluation."""

from __future__ import annotations

from collections.abc import Sequence

from rbac_guard.kernel.security.roles import Role
from rbac_guard.observability.logging import get_logger

_log = get_logger(__name__)


def evaluate_role(role: Role, verb: str, group: str) -> bool:
    """Return ``True`` if any rule of *role* grants *verb* on *group*.

    Rules are scanned in list order and each one is traced at debug level.
    The scan stops at the first matching rule.
    """
    for index, rule in enumerate(role.rules):
        matched = rule.matches(verb, group)
        _log.debug(
            "rbac.eval_rule",
            target=f"{verb}({group})",
            role_id=role.id,
            rule_index=index,
            rule=rule,
            matched=matched,
        )
        if matched:
            return True
    return False


def evaluate_roles(roles: Sequence[Role], verb: str, group: str) -> bool:
    """Logical OR of :func:`evaluate_role` over *roles*. No roles means no access."""
    target = f"{verb}({group})"
    for role in roles:
        _log.debug("rbac.eval_role", target=target, role_id=role.id, role_name=role.name)
        allowed = evaluate_role(role, verb, group)
        _log.debug("rbac.eval_result", target=target, role_id=role.id, allowed=allowed)
        if allowed:
            return True
    return False


__all__ = ["evaluate_role", "evaluate_roles"]
