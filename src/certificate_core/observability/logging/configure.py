"""Observability – structlog configuration.

structlog events are routed through the stdlib ``logging`` tree with a
``ProcessorFormatter`` on a single root handler, so records emitted by
third-party libraries get the same rendering.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from certificate_core.config.settings import CoreSettings


def configure_logging(level: int | str = logging.INFO, *, json: bool = True) -> None:
    """Configure structlog and the root logger.

    Args:
        level: Root log level, as an int or a level name.
        json: Render JSON lines; otherwise use the console renderer.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def configure_logging_from_settings(settings: CoreSettings) -> None:
    """Apply ``log_level`` / ``log_json`` from *settings*."""
    configure_logging(settings.log_level, json=settings.log_json)


__all__ = ["configure_logging", "configure_logging_from_settings"]
