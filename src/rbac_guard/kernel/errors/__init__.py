"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── AuthorizationError           (authorization.py)
    │   ├── IdentityResolutionError
    │   ├── RoleLookupError
    │   ├── RoleLookupContractError
    │   └── RuleEvaluationError
    └── PermissionDeniedError
"""

from rbac_guard.kernel.errors.authorization import (
    AuthorizationError,
    IdentityResolutionError,
    PermissionDeniedError,
    RoleLookupContractError,
    RoleLookupError,
    RuleEvaluationError,
)
from rbac_guard.kernel.errors.base import BaseError

__all__ = [
    "AuthorizationError",
    "BaseError",
    "IdentityResolutionError",
    "PermissionDeniedError",
    "RoleLookupContractError",
    "RoleLookupError",
    "RuleEvaluationError",
]
