"""Observability – structlog configuration and logger helpers."""
from certificate_core.observability.logging.configure import configure_logging, configure_logging_from_settings
from certificate_core.observability.logging.loggers import get_logger

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
