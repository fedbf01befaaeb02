"""Infrastructure errors — failures at the payload boundary."""

from __future__ import annotations

from typing import Any

from certificate_core.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Failure outside domain rules (I/O, wire formats)."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """A JSON payload could not be turned into the requested type."""

    default_code = "serialization_error"
    context_fields = ("payload_type",)

    def __init__(self, message: str, *, payload_type: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = ["InfrastructureError", "SerializationError"]
