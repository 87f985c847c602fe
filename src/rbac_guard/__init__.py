"""
rbac_guard – role-based access control for request pipelines.

Import path convention::

    from rbac_guard.kernel.security import make_guard, patch_hooks, patch_config
    from rbac_guard.kernel.errors import AuthorizationError
    from rbac_guard.adapters.fastapi import FastAPIRBACGuard
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
