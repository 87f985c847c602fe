"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["rbac_guard.testing.fixtures"]
"""

from rbac_guard.testing.fakes import FakeRoleStore

__all__ = ["FakeRoleStore"]
