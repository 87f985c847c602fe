"""FastAPI adapter – FastAPIRBACGuard.

Two ways to put a guard in front of a handler:

* as a route dependency::

      rbac = FastAPIRBACGuard(log_only=False)
      rbac.register(app)

      @app.delete("/invoices/{id}", dependencies=[Depends(rbac("delete", "invoice"))])
      async def delete_invoice(id: str) -> None: ...

* as ``(request, call_next)`` HTTP middleware::

      app.middleware("http")(rbac.middleware("read", "invoice"))

A denied request in enforcing mode gets HTTP 403 with
``{"error": 403, "errorMessage": "Permission Denied"}``.
"""
# Annotations stay eager here: FastAPI inspects the dependency signature and
# ``Request`` is imported lazily inside ``guard``.

from collections.abc import Awaitable, Callable
from typing import Any

from rbac_guard.kernel.errors import PermissionDeniedError
from rbac_guard.kernel.security import (
    ConfigPatch,
    ConfigRegistry,
    Decision,
    DecisionEngine,
    Guard,
    HookRegistry,
)
from rbac_guard.observability.logging import AuditLogger

PERMISSION_DENIED_BODY: dict[str, Any] = PermissionDeniedError().to_response_body()


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'rbac-guard[fastapi]' to use the FastAPI adapter"
        ) from exc


def permission_denied_response() -> Any:
    """Build the generic 403 JSON response. It never carries failure detail."""
    _require_fastapi()
    from fastapi.responses import JSONResponse

    return JSONResponse(
        status_code=PermissionDeniedError.status_code,
        content=dict(PERMISSION_DENIED_BODY),
        media_type="application/json",
    )


class FastAPIRBACGuard:
    """Create FastAPI guards sharing one :class:`DecisionEngine`.

    Parameters
    ----------
    engine:
        Engine to use. When omitted one is built from the other arguments.
    log_only:
        Per-instance override of the enforcement mode (``None`` inherits the
        process-wide setting).
    hooks, settings, audit:
        Passed to the engine; default to the process-wide registries.
    """

    def __init__(
        self,
        engine: DecisionEngine | None = None,
        *,
        log_only: bool | None = None,
        hooks: HookRegistry | None = None,
        settings: ConfigRegistry | None = None,
        audit: AuditLogger | None = None,
    ) -> None:
        _require_fastapi()
        if engine is None:
            engine = DecisionEngine(
                hooks,
                settings,
                instance_config=ConfigPatch(log_only=log_only),
                audit=audit,
            )
        self.engine = engine

    def __call__(self, verb: str, group: str) -> Callable[..., Awaitable[Decision]]:
        return self.guard(verb, group)

    def guard(self, verb: str, group: str) -> Callable[..., Awaitable[Decision]]:
        """Return a dependency that raises :class:`PermissionDeniedError` when enforced."""
        from starlette.requests import Request

        bound = Guard(self.engine, verb, group)

        async def rbac_dependency(request: Request) -> Decision:
            decision = await bound(request)
            if not decision.allows_request:
                raise PermissionDeniedError()
            return decision

        return rbac_dependency

    def middleware(self, verb: str, group: str) -> Callable[[Any, Any], Awaitable[Any]]:
        """Return a ``dispatch(request, call_next)`` function for HTTP middleware."""
        bound = Guard(self.engine, verb, group)

        async def dispatch(request: Any, call_next: Callable[[Any], Awaitable[Any]]) -> Any:
            decision = await bound(request)
            if not decision.allows_request:
                return permission_denied_response()
            return await call_next(request)

        return dispatch

    @staticmethod
    def register(app: Any) -> None:
        """Map :class:`PermissionDeniedError` to the generic 403 response."""

        async def handler(request: Any, exc: PermissionDeniedError) -> Any:  # noqa: ARG001
            return permission_denied_response()

        app.add_exception_handler(PermissionDeniedError, handler)


__all__ = [
    "FastAPIRBACGuard",
    "PERMISSION_DENIED_BODY",
    "permission_denied_response",
]
