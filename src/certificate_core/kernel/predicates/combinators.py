"""Predicate combinators — compose unary boolean predicates.

``and_`` / ``or_`` short-circuit exactly like Python's ``and`` / ``or``:
the left predicate runs first and the right one is skipped once the result
is decided.  When both operands are :class:`PredicateExpression` the
composition happens on the syntax tree and an expression is returned.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from certificate_core.kernel.predicates.expression import PredicateExpression

T = TypeVar("T")

PredicateFn = Callable[[T], bool]


def and_(first: PredicateFn[T], second: PredicateFn[T]) -> PredicateFn[T]:
    """Return a predicate that holds iff both *first* and *second* hold."""
    if isinstance(first, PredicateExpression) and isinstance(second, PredicateExpression):
        return first.and_(second)

    def conjunction(candidate: T) -> bool:
        return first(candidate) and second(candidate)

    return conjunction


def or_(first: PredicateFn[T], second: PredicateFn[T]) -> PredicateFn[T]:
    """Return a predicate that holds iff *first* or *second* holds."""
    if isinstance(first, PredicateExpression) and isinstance(second, PredicateExpression):
        return first.or_(second)

    def disjunction(candidate: T) -> bool:
        return first(candidate) or second(candidate)

    return disjunction


def not_(predicate: PredicateFn[T]) -> PredicateFn[T]:
    """Return the negation of *predicate*."""
    if isinstance(predicate, PredicateExpression):
        return predicate.not_()

    def negation(candidate: T) -> bool:
        return not predicate(candidate)

    return negation


class Predicate(Generic[T]):
    """Wraps a callable so it composes with ``&``, ``|`` and ``~``.

    Example::

        active = Predicate(lambda c: not c.is_deleted, name="active")
        recent = Predicate(lambda c: c.created_date > cutoff, name="recent")
        query_filter = active & recent
    """

    def __init__(self, fn: PredicateFn[T], *, name: str = "") -> None:
        self._fn = fn
        self.name: str = name or getattr(fn, "__name__", "<lambda>")

    def __call__(self, candidate: T) -> bool:
        return self._fn(candidate)

    def __and__(self, other: PredicateFn[T]) -> Predicate[T]:
        return Predicate(and_(self._fn, _unwrap(other)), name=f"({self.name} & {_name_of(other)})")

    def __or__(self, other: PredicateFn[T]) -> Predicate[T]:
        return Predicate(or_(self._fn, _unwrap(other)), name=f"({self.name} | {_name_of(other)})")

    def __invert__(self) -> Predicate[T]:
        return Predicate(not_(self._fn), name=f"~{self.name}")

    def __repr__(self) -> str:  # pragma: no cover
        return f"Predicate({self.name!r})"


def _unwrap(predicate: PredicateFn[T]) -> PredicateFn[T]:
    return predicate._fn if isinstance(predicate, Predicate) else predicate


def _name_of(predicate: PredicateFn[T]) -> str:
    if isinstance(predicate, Predicate):
        return predicate.name
    return getattr(predicate, "__name__", "<lambda>")


__all__ = ["Predicate", "PredicateFn", "and_", "not_", "or_"]
