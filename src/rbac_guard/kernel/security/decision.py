"""Kernel security — the decision engine.

Two enforcement states, picked per decision from the merged configuration:

* Enforcing (``log_only=False``): a denial blocks the request.
* Observing (``log_only=True``): a denial is audited and the request proceeds.

A hook or evaluation failure is audited and then follows exactly the same policy as a
legitimate denial. The caller can never tell the two apart.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from rbac_guard.kernel.errors import AuthorizationError, RuleEvaluationError
from rbac_guard.kernel.security.config import ConfigPatch, ConfigRegistry, RBACConfig, default_config
from rbac_guard.kernel.security.evaluator import evaluate_roles
from rbac_guard.kernel.security.hooks import HookRegistry, RBACHooks, default_registry
from rbac_guard.kernel.security.identity import Identity
from rbac_guard.kernel.security.resolver import resolve_identity, resolve_roles
from rbac_guard.kernel.security.roles import Role
from rbac_guard.kernel.types import Err
from rbac_guard.observability.logging import AuditLogger, get_logger

_log = get_logger(__name__)


class Outcome(str, Enum):
    ALLOW = "allow"
    DENY_OBSERVED = "deny_observed"
    DENY_ENFORCED = "deny_enforced"


@dataclasses.dataclass(frozen=True)
class Decision:
    """Result of one :meth:`DecisionEngine.decide` call.

    ``identity`` is ``None`` when identity resolution itself failed, and
    ``error`` is set whenever a hook misbehaved.
    """

    outcome: Outcome
    verb: str
    group: str
    identity: Identity | None = None
    roles: tuple[Role, ...] = ()
    can_access: bool = False
    error: AuthorizationError | None = None

    @property
    def allows_request(self) -> bool:
        """``True`` unless the request must be rejected."""
        return self.outcome is not Outcome.DENY_ENFORCED


def _request_info(request: Any) -> dict[str, Any]:
    client = getattr(request, "client", None)
    url = getattr(request, "url", None)
    return {
        "ip": getattr(client, "host", None),
        "method": getattr(request, "method", None),
        "path": getattr(url, "path", None),
    }


def _hook_names(hooks: RBACHooks) -> dict[str, str]:
    return {
        f.name: getattr(getattr(hooks, f.name), "__qualname__", repr(getattr(hooks, f.name)))
        for f in dataclasses.fields(hooks)
    }


class DecisionEngine:
    """Resolve identity, resolve roles, evaluate, and apply the enforcement mode.

    Parameters
    ----------
    hooks:
        Hook table holder. Defaults to the process-wide registry.
    config:
        Process-wide configuration layer. Defaults to the process-wide registry.
    instance_config:
        Per-guard override merged on top of *config* for every decision.
    audit:
        Sink for denial and failure records.
    """

    def __init__(
        self,
        hooks: HookRegistry | None = None,
        config: ConfigRegistry | None = None,
        *,
        instance_config: ConfigPatch | None = None,
        audit: AuditLogger | None = None,
    ) -> None:
        self._hooks = hooks if hooks is not None else default_registry
        self._config = config if config is not None else default_config
        self._instance_config = instance_config
        self._audit = audit if audit is not None else AuditLogger(service="rbac_guard")

    @property
    def instance_config(self) -> ConfigPatch | None:
        return self._instance_config

    def effective_config(self) -> RBACConfig:
        return self._config.snapshot().merged(self._instance_config)

    async def decide(self, request: Any, verb: str, group: str) -> Decision:
        config = self.effective_config()
        hooks = self._hooks.snapshot()
        info = _request_info(request)
        log = _log.bind(target=f"{verb}({group})")
        log.debug("rbac.hooks", hooks=_hook_names(hooks))
        log.debug("rbac.config", log_only=config.log_only)

        identity_result = await resolve_identity(hooks, request)
        if isinstance(identity_result, Err):
            return self._failed(config, verb, group, None, identity_result.error, info)
        identity = identity_result.value
        log.debug("rbac.auth", identity=identity.describe(), actor=identity.actor.value)

        roles_result = await resolve_roles(hooks, identity)
        if isinstance(roles_result, Err):
            return self._failed(config, verb, group, identity, roles_result.error, info)
        roles = roles_result.value
        log.debug("rbac.roles", roles=[f"{r.id} {r.name}" for r in roles])

        try:
            allowed = evaluate_roles(roles, verb, group)
        except Exception as exc:  # noqa: BLE001
            return self._failed(config, verb, group, identity, RuleEvaluationError(exc), info)

        if allowed:
            return Decision(Outcome.ALLOW, verb, group, identity, roles, can_access=True)

        self._audit.log_denied(identity.describe(), group, verb, log_only=config.log_only, **info)
        return Decision(_denial(config), verb, group, identity, roles)

    def _failed(
        self,
        config: RBACConfig,
        verb: str,
        group: str,
        identity: Identity | None,
        error: AuthorizationError,
        info: dict[str, Any],
    ) -> Decision:
        described = identity.describe() if identity is not None else ""
        self._audit.log_error(described, group, verb, error, log_only=config.log_only, **info)
        return Decision(_denial(config), verb, group, identity, error=error)


def _denial(config: RBACConfig) -> Outcome:
    return Outcome.DENY_OBSERVED if config.log_only else Outcome.DENY_ENFORCED


__all__ = ["Decision", "DecisionEngine", "Outcome"]
