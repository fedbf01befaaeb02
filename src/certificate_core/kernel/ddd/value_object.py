"""ValueObject base class — the equality contract."""

from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound="ValueObject[Any]")


class ValueObject(abc.ABC, Generic[T]):
    """Base class for types compared by value.

    Subclasses implement two hooks and inherit the operators:

    * ``_equals_core(other)``: structural comparison against an instance of
      the same concrete type.
    * ``_hash_core()``: a hash consistent with ``_equals_core``.

    Comparing against ``None`` or an instance of any other type yields
    ``False``; it never raises.

    Example::

        class Serial(ValueObject["Serial"]):
            def __init__(self, prefix: str, number: int) -> None:
                self.prefix = prefix
                self.number = number

            def _equals_core(self, other: "Serial") -> bool:
                return (self.prefix, self.number) == (other.prefix, other.number)

            def _hash_core(self) -> int:
                return hash((self.prefix, self.number))
    """

    @abc.abstractmethod
    def _equals_core(self, other: T) -> bool: ...

    @abc.abstractmethod
    def _hash_core(self) -> int: ...

    def __eq__(self, other: object) -> bool:
        if other is None or type(other) is not type(self):
            return False
        return self._equals_core(other)  # type: ignore[arg-type]

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return self._hash_core()

    def __str__(self) -> str:
        return type(self).__name__


def values_equal(a: ValueObject[Any] | None, b: ValueObject[Any] | None) -> bool:
    """Operator-level equality for optional operands.

    Two ``None`` values are equal, ``None`` and a value never are; otherwise
    the comparison is delegated to ``a == b``.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a == b


__all__ = ["ValueObject", "values_equal"]
