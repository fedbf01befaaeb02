"""Config – 12-factor settings and validation errors."""

from certificate_core.config.settings import CoreSettings, EnvSettingsLoader, Settings, SettingsLoader
from certificate_core.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "CoreSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
