"""Unit tests for kernel security — hook table, registry and default extractors."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from rbac_guard.kernel.security import (
    HookRegistry,
    HooksPatch,
    Principal,
    RBACHooks,
    SecurityContext,
    default_registry,
    patch_hooks,
)
from rbac_guard.kernel.security.hooks import default_client, default_tenant, default_user


def _request(**state: object) -> SimpleNamespace:
    return SimpleNamespace(state=SimpleNamespace(**state))


# ---------------------------------------------------------------------------
# Default extractors
# ---------------------------------------------------------------------------


class TestDefaultExtractors:
    def test_reads_conventional_request_state(self) -> None:
        request = _request(
            tenant=SimpleNamespace(id="t1"),
            user=SimpleNamespace(id="u1"),
            client_id="c1",
        )
        assert default_tenant(request) == "t1"
        assert default_user(request) == "u1"
        assert default_client(request) == "c1"

    def test_mapping_shaped_state_values(self) -> None:
        request = _request(tenant={"id": "t1"}, user={"id": "u1"})
        assert default_tenant(request) == "t1"
        assert default_user(request) == "u1"

    def test_missing_state_yields_none(self) -> None:
        request = SimpleNamespace()
        assert default_tenant(request) is None
        assert default_user(request) is None
        assert default_client(request) is None

    def test_falls_back_to_user_principal(self) -> None:
        token = SecurityContext.set_current(Principal(subject="alice", tenant_id="t9"))
        try:
            request = _request()
            assert default_tenant(request) == "t9"
            assert default_user(request) == "alice"
            assert default_client(request) is None
        finally:
            SecurityContext.reset(token)

    def test_service_account_principal_is_a_client(self) -> None:
        token = SecurityContext.set_current(Principal(subject="svc-1", is_service_account=True))
        try:
            request = _request()
            assert default_user(request) is None
            assert default_client(request) == "svc-1"
        finally:
            SecurityContext.reset(token)

    def test_request_state_wins_over_principal(self) -> None:
        token = SecurityContext.set_current(Principal(subject="alice", tenant_id="t9"))
        try:
            request = _request(tenant=SimpleNamespace(id="t1"), user=SimpleNamespace(id="bob"))
            assert default_tenant(request) == "t1"
            assert default_user(request) == "bob"
        finally:
            SecurityContext.reset(token)

    def test_default_role_lookups_grant_nothing(self) -> None:
        hooks = RBACHooks()
        assert hooks.roles_for_user("t", "u") == []
        assert hooks.roles_for_client("t", "c") == []
        assert hooks.roles_for_anonymous("t") == []


# ---------------------------------------------------------------------------
# HooksPatch / RBACHooks
# ---------------------------------------------------------------------------


class TestHooksPatch:
    def test_changes_only_lists_set_fields(self) -> None:
        fn = lambda request: "t"  # noqa: E731
        assert HooksPatch(tenant=fn).changes() == {"tenant": fn}

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError):
            HooksPatch(user="not-callable")  # type: ignore[arg-type]

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(TypeError):
            HooksPatch(roles=lambda: [])  # type: ignore[call-arg]

    def test_patched_leaves_other_hooks(self) -> None:
        fn = lambda t, u: ["x"]  # noqa: E731
        hooks = RBACHooks().patched(HooksPatch(roles_for_user=fn))
        assert hooks.roles_for_user is fn
        assert hooks.tenant is default_tenant
        assert hooks.roles_for_client("t", "c") == []


# ---------------------------------------------------------------------------
# HookRegistry
# ---------------------------------------------------------------------------


class TestHookRegistry:
    def test_patch_with_keywords_returns_full_table(self) -> None:
        registry = HookRegistry()
        fn = lambda request: "u"  # noqa: E731
        hooks = registry.patch(user=fn)
        assert isinstance(hooks, RBACHooks)
        assert hooks.user is fn
        assert registry.snapshot() is hooks

    def test_patch_with_object_and_keywords(self) -> None:
        registry = HookRegistry()
        a = lambda request: "t"  # noqa: E731
        b = lambda request: "u"  # noqa: E731
        hooks = registry.patch(HooksPatch(tenant=a), user=b)
        assert (hooks.tenant, hooks.user) == (a, b)

    def test_snapshot_is_not_affected_by_later_patch(self) -> None:
        registry = HookRegistry()
        before = registry.snapshot()
        registry.patch(client=lambda request: "c")
        assert before.client is default_client
        assert registry.snapshot() is not before

    def test_reset(self) -> None:
        registry = HookRegistry()
        registry.patch(user=lambda request: "u")
        assert registry.reset().user is default_user

    def test_unknown_hook_name(self) -> None:
        with pytest.raises(TypeError):
            HookRegistry().patch(bogus=lambda: None)

    def test_registries_are_independent(self) -> None:
        a, b = HookRegistry(), HookRegistry()
        a.patch(user=lambda request: "a")
        assert b.snapshot().user is default_user


class TestProcessWideHooks:
    def test_patch_hooks_updates_default_registry(self) -> None:
        fn = lambda tenant_id: []  # noqa: E731
        try:
            hooks = patch_hooks(roles_for_anonymous=fn)
            assert hooks.roles_for_anonymous is fn
            assert default_registry.snapshot().roles_for_anonymous is fn
        finally:
            default_registry.reset()
