"""Authorization errors.

Resolver failures are carried as values (``Err(...)``) and only ever reach
the logs. ``PermissionDeniedError`` is the single error a caller can observe,
and it carries no detail about why access was refused.
"""

from __future__ import annotations

from typing import Any

from rbac_guard.kernel.errors.base import BaseError


class AuthorizationError(BaseError):
    """Failure while producing an authorization decision."""

    default_code = "authorization_error"


class IdentityResolutionError(AuthorizationError):
    """An identity extractor hook raised."""

    default_code = "identity_resolution_failed"

    def __init__(self, hook: str, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(
            f"Identity hook '{hook}' failed: {cause!r}",
            detail={"hook": hook},
            cause=cause,
            **kwargs,
        )
        self.hook = hook


class RoleLookupError(AuthorizationError):
    """A role lookup hook raised (e.g. role store unavailable)."""

    default_code = "role_lookup_failed"

    def __init__(self, hook: str, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(
            f"Role hook '{hook}' failed: {cause!r}",
            detail={"hook": hook},
            cause=cause,
            **kwargs,
        )
        self.hook = hook


class RoleLookupContractError(AuthorizationError):
    """A role lookup hook resolved to something other than a sequence of roles."""

    default_code = "role_lookup_contract_violation"

    def __init__(self, hook: str, value: object, reason: str = "expected a sequence of roles") -> None:
        super().__init__(
            f"Role hook '{hook}' returned unexpected roles value {value!r}: {reason}",
            detail={"hook": hook, "value_type": type(value).__name__, "reason": reason},
        )
        self.hook = hook
        self.value = value


class RuleEvaluationError(AuthorizationError):
    """Evaluating the resolved roles raised."""

    default_code = "rule_evaluation_failed"

    def __init__(self, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(f"Rule evaluation failed: {cause!r}", cause=cause, **kwargs)


class PermissionDeniedError(BaseError):
    """Raised by framework adapters to reject a request in enforcing mode."""

    default_code = "permission_denied"
    status_code = 403

    def __init__(self, message: str = "Permission Denied", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)

    def to_response_body(self) -> dict[str, Any]:
        return {"error": self.status_code, "errorMessage": self.message}


__all__ = [
    "AuthorizationError",
    "IdentityResolutionError",
    "PermissionDeniedError",
    "RoleLookupContractError",
    "RoleLookupError",
    "RuleEvaluationError",
]
