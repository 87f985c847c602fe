"""Kernel value types."""

from rbac_guard.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
