"""Config – 12-factor settings and loaders."""

from rbac_guard.config.settings import EnvSettingsLoader, RBACSettings, Settings, SettingsLoader
from rbac_guard.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RBACSettings",
    "Settings",
    "SettingsLoader",
]
