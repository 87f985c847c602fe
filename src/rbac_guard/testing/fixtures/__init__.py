"""Testing fixtures – pytest fixtures for RBAC tests."""
from rbac_guard.testing.fixtures.rbac import config_registry, fake_role_store, hook_registry

__all__ = ["config_registry", "fake_role_store", "hook_registry"]
