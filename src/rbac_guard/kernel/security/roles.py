"""Kernel security — Role, Rule and verb matchers.

A rule grants a verb on a group. The verb side is a single tagged matcher
instead of the alternate ``verb`` / ``verbs`` keys found in stored records:

* :class:`AnyVerb`: ``"*"``, every verb.
* :class:`ExactVerb`: one verb.
* :class:`VerbSet`: any verb in the set. The empty set matches nothing.

Example::

    Rule.from_dict({"group": "invoice", "verbs": ["read", "update"]})
    # Rule(group='invoice', verbs=VerbSet(verbs=frozenset({'read', 'update'})))
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

WILDCARD = "*"


@dataclasses.dataclass(frozen=True)
class AnyVerb:
    def matches(self, verb: str) -> bool:  # noqa: ARG002
        return True


@dataclasses.dataclass(frozen=True)
class ExactVerb:
    verb: str

    def matches(self, verb: str) -> bool:
        return self.verb == verb


@dataclasses.dataclass(frozen=True)
class VerbSet:
    verbs: frozenset[str] = frozenset()

    def matches(self, verb: str) -> bool:
        return verb in self.verbs


VerbMatcher: TypeAlias = AnyVerb | ExactVerb | VerbSet


def _verb_matcher(verb: Any, verbs: Any) -> VerbMatcher:
    if verb == WILDCARD or verbs == WILDCARD:
        return AnyVerb()
    collected: set[str] = set()
    if isinstance(verb, str):
        collected.add(verb)
    # a bare string other than "*" is not a collection of verbs
    if isinstance(verbs, Iterable) and not isinstance(verbs, (str, bytes, Mapping)):
        collected.update(v for v in verbs if isinstance(v, str))
    if isinstance(verb, str) and len(collected) == 1:
        return ExactVerb(verb)
    return VerbSet(frozenset(collected))


@dataclasses.dataclass(frozen=True)
class Rule:
    """Grants the verbs accepted by ``verbs`` on ``group`` (``"*"`` for any).

    ``group`` is ``None`` for records that had no group; such a rule never
    matches.
    """

    group: str | None
    verbs: VerbMatcher = dataclasses.field(default_factory=VerbSet)

    def matches(self, verb: str, group: str) -> bool:
        if self.group is None:
            return False
        if self.group != WILDCARD and self.group != group:
            return False
        return self.verbs.matches(verb)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rule:
        group = data.get("group")
        return cls(
            group=group if isinstance(group, str) else None,
            verbs=_verb_matcher(data.get("verb"), data.get("verbs")),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"group": self.group}
        match self.verbs:
            case AnyVerb():
                payload["verb"] = WILDCARD
            case ExactVerb(verb=verb):
                payload["verb"] = verb
            case VerbSet(verbs=verbs):
                payload["verbs"] = sorted(verbs)
        return payload


@dataclasses.dataclass(frozen=True)
class Role:
    """Named, optionally tenant-scoped, ordered bundle of :class:`Rule`\\ s.

    Roles are read-only snapshots; the role store owns and mutates the
    records they were built from.
    """

    id: str
    name: str
    rules: tuple[Rule, ...] = ()
    tenant: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Role:
        """Build a role from a store record.

        Accepts ``rules`` or ``permissions`` for the rule list and a tenant
        given either as an id or as a ``{"id": ...}`` object. Raises
        ``ValueError`` / ``TypeError`` on records that cannot be a role.
        """
        if "id" not in data or data["id"] is None:
            raise ValueError("role record has no id")
        raw_rules = data.get("rules", data.get("permissions")) or ()
        if isinstance(raw_rules, (str, bytes, Mapping)) or not isinstance(raw_rules, Iterable):
            raise TypeError(f"role {data['id']!r} rules must be a list, got {type(raw_rules).__name__}")
        rules = []
        for raw in raw_rules:
            if not isinstance(raw, Mapping):
                raise TypeError(f"role {data['id']!r} has a non-mapping rule {raw!r}")
            rules.append(Rule.from_dict(raw))

        tenant = data.get("tenant")
        if isinstance(tenant, Mapping):
            tenant = tenant.get("id")

        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            rules=tuple(rules),
            tenant=str(tenant) if tenant is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "tenant": self.tenant,
            "rules": [r.to_dict() for r in self.rules],
        }


__all__ = [
    "AnyVerb",
    "ExactVerb",
    "Role",
    "Rule",
    "VerbMatcher",
    "VerbSet",
    "WILDCARD",
]
