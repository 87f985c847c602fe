"""Kernel – framework-agnostic authorization building blocks."""

from rbac_guard.kernel.errors import (
    AuthorizationError,
    BaseError,
    IdentityResolutionError,
    PermissionDeniedError,
    RoleLookupContractError,
    RoleLookupError,
    RuleEvaluationError,
)

__all__ = [
    "AuthorizationError",
    "BaseError",
    "IdentityResolutionError",
    "PermissionDeniedError",
    "RoleLookupContractError",
    "RoleLookupError",
    "RuleEvaluationError",
]
