"""Config settings – env-based configuration."""
from certificate_core.config.settings.base import CoreSettings, Settings
from certificate_core.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["CoreSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
