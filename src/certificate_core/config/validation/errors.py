"""Errors raised while loading ``Settings`` from the environment."""
from certificate_core.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be built; wraps the underlying failure as ``cause``."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable for a field without default is not set."""

    default_code = "missing_required_setting"
    context_fields = ("setting_name",)

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is not set")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A variable could not be coerced, or failed the settings' own check."""

    default_code = "invalid_setting_value"
    context_fields = ("setting_name", "reason")

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r} rejected: {reason}")
        self.setting_name = setting_name
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
