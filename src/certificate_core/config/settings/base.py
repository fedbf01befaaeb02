"""Config settings – Settings base class and the kernel's own settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from certificate_core.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class CoreSettings(Settings):
    """Logging settings, read from ``CERTIFICATE_*`` variables."""

    _prefix: ClassVar[str] = "CERTIFICATE"

    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        self.log_level = level


__all__ = ["CoreSettings", "Settings"]
