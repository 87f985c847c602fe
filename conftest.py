"""Root conftest: registers the rbac_guard pytest fixtures."""

pytest_plugins = ["rbac_guard.testing.fixtures"]
