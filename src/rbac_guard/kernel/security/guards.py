"""Kernel security — guards bound to one protected operation.

Wire guards once, when routes are declared::

    rbac = make_guard(ConfigPatch(log_only=False))
    read_invoice = rbac("read", "invoice")

    decision = await read_invoice(request)
    if not decision.allows_request:
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rbac_guard.kernel.security.config import ConfigPatch, ConfigRegistry
from rbac_guard.kernel.security.decision import Decision, DecisionEngine
from rbac_guard.kernel.security.hooks import HookRegistry
from rbac_guard.observability.logging import AuditLogger


class Guard:
    """Decision function for a fixed ``(verb, group)`` pair."""

    def __init__(self, engine: DecisionEngine, verb: str, group: str) -> None:
        self.engine = engine
        self.verb = verb
        self.group = group

    async def __call__(self, request: Any) -> Decision:
        return await self.engine.decide(request, self.verb, self.group)

    def __repr__(self) -> str:
        return f"Guard({self.verb}({self.group}))"


def make_guard(
    config: ConfigPatch | None = None,
    *,
    hooks: HookRegistry | None = None,
    settings: ConfigRegistry | None = None,
    audit: AuditLogger | None = None,
) -> Callable[[str, str], Guard]:
    """Return a ``(verb, group) -> Guard`` factory sharing one engine.

    *config* is the per-instance override; *hooks* and *settings* default to
    the process-wide registries.
    """
    engine = DecisionEngine(hooks, settings, instance_config=config, audit=audit)

    def factory(verb: str, group: str) -> Guard:
        return Guard(engine, verb, group)

    return factory


guard = make_guard()


__all__ = ["Guard", "guard", "make_guard"]
