"""Testing fakes – in-memory doubles for the role store."""
from rbac_guard.testing.fakes.role_store import FakeRoleStore

__all__ = ["FakeRoleStore"]
