"""Config settings – env-based configuration."""
from rbac_guard.config.settings.base import RBACSettings, Settings
from rbac_guard.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "RBACSettings", "Settings", "SettingsLoader"]
