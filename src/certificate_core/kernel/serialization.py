"""Typed JSON deserialization backed by pydantic."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, TypeVar

import pydantic

from certificate_core.kernel.errors import SerializationError
from certificate_core.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


@lru_cache(maxsize=128)
def _adapter(type_: Any) -> pydantic.TypeAdapter[Any]:
    return pydantic.TypeAdapter(type_)


def deserialize(payload: str | bytes, type_: type[T] | Any) -> T | None:
    """Parse the JSON *payload* into an instance of *type_*.

    *type_* may be anything pydantic can validate: builtins and generic
    aliases (``dict[str, int]``), dataclasses, ``TypedDict`` or
    ``BaseModel`` subclasses.  A JSON ``null`` payload yields ``None``.

    Raises:
        SerializationError: the payload is not valid JSON or does not
            match *type_*.
    """
    type_name = getattr(type_, "__name__", repr(type_))
    try:
        return _adapter(Optional[type_]).validate_json(payload)
    except pydantic.ValidationError as exc:
        logger.warning(
            "deserialize.failed",
            payload_type=type_name,
            errors=exc.error_count(),
        )
        raise SerializationError(
            f"Cannot deserialize payload into {type_name}",
            payload_type=type_name,
            detail={"errors": exc.errors(include_url=False, include_context=False, include_input=False)},
            cause=exc,
        ) from exc


__all__ = ["deserialize"]
