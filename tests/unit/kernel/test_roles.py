"""Unit tests for kernel security — roles, rules and verb matchers."""

from __future__ import annotations

import pytest

from rbac_guard.kernel.security import AnyVerb, ExactVerb, Role, Rule, VerbSet


# ---------------------------------------------------------------------------
# Rule.from_dict
# ---------------------------------------------------------------------------


class TestRuleFromDict:
    def test_exact_verb(self) -> None:
        rule = Rule.from_dict({"group": "invoice", "verb": "read"})
        assert rule == Rule(group="invoice", verbs=ExactVerb("read"))

    def test_wildcard_verb(self) -> None:
        assert Rule.from_dict({"group": "invoice", "verb": "*"}).verbs == AnyVerb()

    def test_wildcard_verbs(self) -> None:
        assert Rule.from_dict({"group": "invoice", "verbs": "*"}).verbs == AnyVerb()

    def test_verb_list(self) -> None:
        rule = Rule.from_dict({"group": "invoice", "verbs": ["read", "update"]})
        assert rule.verbs == VerbSet(frozenset({"read", "update"}))

    def test_verb_and_verbs_are_merged(self) -> None:
        rule = Rule.from_dict({"group": "g", "verb": "read", "verbs": ["update"]})
        assert rule.verbs == VerbSet(frozenset({"read", "update"}))

    def test_wildcard_in_either_field_wins(self) -> None:
        rule = Rule.from_dict({"group": "g", "verb": "read", "verbs": "*"})
        assert rule.verbs == AnyVerb()

    def test_missing_verb_fields_yield_empty_set(self) -> None:
        assert Rule.from_dict({"group": "g"}).verbs == VerbSet(frozenset())

    def test_plain_string_verbs_is_not_a_collection(self) -> None:
        assert Rule.from_dict({"group": "g", "verbs": "read"}).verbs == VerbSet(frozenset())

    def test_missing_group(self) -> None:
        assert Rule.from_dict({"verb": "read"}).group is None

    def test_to_dict_round_shapes(self) -> None:
        assert Rule(group="*", verbs=AnyVerb()).to_dict() == {"group": "*", "verb": "*"}
        assert Rule(group="g", verbs=ExactVerb("read")).to_dict() == {"group": "g", "verb": "read"}
        assert Rule(group="g", verbs=VerbSet(frozenset({"b", "a"}))).to_dict() == {
            "group": "g",
            "verbs": ["a", "b"],
        }


# ---------------------------------------------------------------------------
# Rule.matches
# ---------------------------------------------------------------------------


class TestRuleMatches:
    def test_wildcard_group_matches_every_group(self) -> None:
        rule = Rule(group="*", verbs=ExactVerb("read"))
        assert rule.matches("read", "invoice")
        assert rule.matches("read", "customer")

    def test_wildcard_verb_matches_every_verb(self) -> None:
        rule = Rule(group="invoice", verbs=AnyVerb())
        assert rule.matches("delete", "invoice")
        assert not rule.matches("delete", "customer")

    def test_verb_set_membership(self) -> None:
        rule = Rule(group="invoice", verbs=VerbSet(frozenset({"read", "update"})))
        assert rule.matches("update", "invoice")
        assert not rule.matches("delete", "invoice")

    def test_empty_verb_set_never_matches(self) -> None:
        assert not Rule(group="*", verbs=VerbSet()).matches("read", "invoice")

    def test_rule_without_group_never_matches(self) -> None:
        assert not Rule(group=None, verbs=AnyVerb()).matches("read", "invoice")

    def test_group_is_case_sensitive(self) -> None:
        assert not Rule(group="Invoice", verbs=AnyVerb()).matches("read", "invoice")


# ---------------------------------------------------------------------------
# Role.from_dict
# ---------------------------------------------------------------------------


class TestRoleFromDict:
    def test_basic_record(self) -> None:
        role = Role.from_dict(
            {"id": 7, "name": "reader", "rules": [{"group": "*", "verb": "read"}]}
        )
        assert role.id == "7"
        assert role.name == "reader"
        assert role.rules == (Rule(group="*", verbs=ExactVerb("read")),)
        assert role.tenant is None

    def test_permissions_key_is_accepted(self) -> None:
        role = Role.from_dict({"id": "r1", "permissions": [{"group": "g", "verb": "*"}]})
        assert len(role.rules) == 1

    def test_null_rules_means_no_rules(self) -> None:
        assert Role.from_dict({"id": "r1", "rules": None}).rules == ()

    def test_tenant_object(self) -> None:
        assert Role.from_dict({"id": "r1", "tenant": {"id": 42}}).tenant == "42"

    def test_tenant_plain_id(self) -> None:
        assert Role.from_dict({"id": "r1", "tenant": "t1"}).tenant == "t1"

    def test_missing_id_raises(self) -> None:
        with pytest.raises(ValueError):
            Role.from_dict({"name": "nameless"})

    def test_rules_must_be_a_list(self) -> None:
        with pytest.raises(TypeError):
            Role.from_dict({"id": "r1", "rules": {"group": "*", "verb": "*"}})

    def test_rule_entries_must_be_mappings(self) -> None:
        with pytest.raises(TypeError):
            Role.from_dict({"id": "r1", "rules": ["read"]})

    def test_role_is_frozen(self) -> None:
        role = Role(id="r1", name="n")
        with pytest.raises((AttributeError, TypeError)):
            role.name = "other"  # type: ignore[misc]

    def test_to_dict(self) -> None:
        role = Role(id="r1", name="n", rules=(Rule(group="g", verbs=ExactVerb("read")),), tenant="t")
        assert role.to_dict() == {
            "id": "r1",
            "name": "n",
            "tenant": "t",
            "rules": [{"group": "g", "verb": "read"}],
        }
