"""Domain errors — rejected input to kernel operations."""

from __future__ import annotations

from typing import Any

from certificate_core.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A kernel operation was given input it cannot accept."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Bad argument or source text, e.g. a malformed predicate lambda.

    ``errors`` optionally lists field-level failures.
    """

    default_code = "validation_error"
    context_fields = ("errors",)

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])


__all__ = ["DomainError", "ValidationError"]
