"""Unit tests for kernel security — Identity precedence and description."""

from __future__ import annotations

from rbac_guard.kernel.security import Actor, Identity


class TestIdentityActor:
    def test_user_wins_over_client(self) -> None:
        identity = Identity(tenant_id="t", user_id="u", client_id="c")
        assert identity.actor is Actor.USER
        assert identity.actor_id == "u"

    def test_client_when_no_user(self) -> None:
        identity = Identity(client_id="c")
        assert identity.actor is Actor.CLIENT
        assert identity.actor_id == "c"

    def test_anonymous_when_neither(self) -> None:
        identity = Identity(tenant_id="t")
        assert identity.actor is Actor.ANONYMOUS
        assert identity.actor_id is None

    def test_falsy_ids_still_count(self) -> None:
        assert Identity(user_id=0).actor is Actor.USER
        assert Identity(client_id="").actor is Actor.CLIENT


class TestIdentityDescribe:
    def test_tenant_and_user(self) -> None:
        assert Identity(tenant_id="t1", user_id="u1", client_id="c1").describe() == "tenantid:t1 userid:u1"

    def test_client_only(self) -> None:
        assert Identity(client_id="c1").describe() == "clientid:c1"

    def test_anonymous(self) -> None:
        assert Identity().describe() == "ANONYMOUS"

    def test_anonymous_in_tenant(self) -> None:
        assert Identity(tenant_id="t1").describe() == "tenantid:t1 ANONYMOUS"
