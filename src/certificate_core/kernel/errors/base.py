"""BaseError — root of the certificate-core error hierarchy."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries a machine-readable ``code`` and a ``detail`` dict.
    Subclasses that add attributes list them in ``context_fields``; those
    attributes are serialised by :meth:`to_dict` next to the base payload,
    so log processors and API mappers need no per-class handling.

    Args:
        message: Human-readable description.
        code: Overrides ``default_code``.
        detail: Extra JSON-safe context.
        cause: Exception being wrapped; also set as ``__cause__``.
    """

    default_code: ClassVar[str] = "base_error"
    context_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        payload.update((name, getattr(self, name)) for name in self.context_fields)
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
