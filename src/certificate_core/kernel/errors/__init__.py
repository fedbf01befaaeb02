"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (certificate_core.config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
"""

from certificate_core.kernel.errors.application import ApplicationError
from certificate_core.kernel.errors.base import BaseError
from certificate_core.kernel.errors.domain import (
    DomainError,
    ValidationError,
)
from certificate_core.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "ValidationError",
]
