"""Kernel – framework-agnostic domain building blocks."""

from certificate_core.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "ValidationError",
]
