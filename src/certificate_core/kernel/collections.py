"""Collection helpers."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import Any, TypeVar

from certificate_core.kernel.errors import ValidationError

T = TypeVar("T")


def add_range(target: Any, items: Iterable[T]) -> None:
    """Append every element of *items* to the mutable collection *target*.

    Lists are extended in one call; other collections receive each item
    through ``add`` (sets) or ``append`` (deques and list-likes).

    Raises:
        ValidationError: either argument is ``None`` or *target* cannot
            grow.
    """
    if target is None:
        raise ValidationError("target must not be None")
    if items is None:
        raise ValidationError("items must not be None")

    if isinstance(target, list):
        target.extend(items)
        return

    add = getattr(target, "add", None) or getattr(target, "append", None)
    if add is None:
        raise ValidationError(f"{type(target).__name__} does not support adding items")
    for item in items:
        add(item)


def is_in(value: T, items: Iterable[T]) -> bool:
    """Return ``True`` when *value* is present in *items*."""
    if isinstance(items, Collection):
        return value in items
    return any(item == value for item in items)


def is_not_in(value: T, items: Iterable[T]) -> bool:
    return not is_in(value, items)


__all__ = ["add_range", "is_in", "is_not_in"]
