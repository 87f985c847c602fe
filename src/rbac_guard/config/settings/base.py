"""Config settings – Settings base class and the RBAC settings."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class RBACSettings(Settings):
    """Process-wide RBAC settings, read from ``RBAC_*`` variables.

    ``RBAC_LOG_ONLY`` (default ``true``): audit denials without blocking.
    """

    _prefix: dataclasses.ClassVar[str] = "RBAC"

    log_only: bool = True

    def _validate(self) -> None:
        from rbac_guard.config.validation import InvalidSettingValueError

        if not isinstance(self.log_only, bool):
            raise InvalidSettingValueError("log_only", self.log_only, "must be a boolean")


__all__ = ["RBACSettings", "Settings"]
