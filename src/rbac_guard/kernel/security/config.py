"""Kernel security — enforcement configuration layers.

Priority, lowest first: compiled default, process-wide
:class:`ConfigRegistry`, per-guard :class:`ConfigPatch`. The merge happens on
every decision so runtime patches apply to the next request.
"""

from __future__ import annotations

import dataclasses
import threading
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rbac_guard.config.settings import RBACSettings


@dataclasses.dataclass(frozen=True)
class ConfigPatch:
    """Partial configuration; ``None`` means "inherit"."""

    log_only: bool | None = None

    def __post_init__(self) -> None:
        if self.log_only is not None and not isinstance(self.log_only, bool):
            raise TypeError(f"log_only must be a bool, got {type(self.log_only).__name__}")

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }


@dataclasses.dataclass(frozen=True)
class RBACConfig:
    """Effective configuration.

    ``log_only``: when ``True`` denials are audited but never block.
    """

    log_only: bool = True

    def merged(self, *patches: ConfigPatch | None) -> RBACConfig:
        config = self
        for patch in patches:
            if patch is not None:
                config = dataclasses.replace(config, **patch.changes())
        return config


class ConfigRegistry:
    """Process-wide configuration layer."""

    def __init__(self, config: RBACConfig | None = None) -> None:
        self._lock = threading.Lock()
        self._config = config if config is not None else RBACConfig()

    @classmethod
    def from_settings(cls, settings: RBACSettings) -> ConfigRegistry:
        return cls(RBACConfig(log_only=settings.log_only))

    def apply_settings(self, settings: RBACSettings) -> RBACConfig:
        """Overwrite the process-wide layer with values loaded from settings."""
        return self.patch(log_only=settings.log_only)

    def snapshot(self) -> RBACConfig:
        return self._config

    def patch(self, patch: ConfigPatch | None = None, /, **changes: Any) -> RBACConfig:
        merged = ConfigPatch(**{**(patch.changes() if patch is not None else {}), **changes})
        with self._lock:
            self._config = self._config.merged(merged)
            return self._config

    def reset(self) -> RBACConfig:
        with self._lock:
            self._config = RBACConfig()
            return self._config


default_config = ConfigRegistry()


def patch_config(patch: ConfigPatch | None = None, /, **changes: Any) -> RBACConfig:
    """Patch the process-wide configuration layer."""
    return default_config.patch(patch, **changes)


__all__ = [
    "ConfigPatch",
    "ConfigRegistry",
    "RBACConfig",
    "default_config",
    "patch_config",
]
