"""Kernel security – roles, identity, hooks, configuration and decisions."""
from rbac_guard.kernel.security.config import (
    ConfigPatch,
    ConfigRegistry,
    RBACConfig,
    default_config,
    patch_config,
)
from rbac_guard.kernel.security.decision import Decision, DecisionEngine, Outcome
from rbac_guard.kernel.security.evaluator import evaluate_role, evaluate_roles
from rbac_guard.kernel.security.guards import Guard, guard, make_guard
from rbac_guard.kernel.security.hooks import (
    HookRegistry,
    HooksPatch,
    RBACHooks,
    default_registry,
    patch_hooks,
)
from rbac_guard.kernel.security.identity import Actor, Identity
from rbac_guard.kernel.security.principal import Principal
from rbac_guard.kernel.security.resolver import resolve_identity, resolve_roles
from rbac_guard.kernel.security.roles import AnyVerb, ExactVerb, Role, Rule, VerbMatcher, VerbSet
from rbac_guard.kernel.security.security_context import SecurityContext

__all__ = [
    "Actor",
    "AnyVerb",
    "ConfigPatch",
    "ConfigRegistry",
    "Decision",
    "DecisionEngine",
    "ExactVerb",
    "Guard",
    "HookRegistry",
    "HooksPatch",
    "Identity",
    "Outcome",
    "Principal",
    "RBACConfig",
    "RBACHooks",
    "Role",
    "Rule",
    "SecurityContext",
    "VerbMatcher",
    "VerbSet",
    "default_config",
    "default_registry",
    "evaluate_role",
    "evaluate_roles",
    "guard",
    "make_guard",
    "patch_config",
    "patch_hooks",
    "resolve_identity",
    "resolve_roles",
]
