"""PredicateExpression — introspectable single-parameter predicates.

A predicate expression keeps its ``lambda`` as an :mod:`ast` tree instead of
a compiled function.  Combining two expressions rewrites the right operand's
parameter to the left operand's parameter and joins both bodies, so the
result is again one lambda over one parameter.  Its ``source`` can be handed
to a query-translation layer; calling it evaluates the predicate in Python.

Example::

    over_five = PredicateExpression.parse("lambda v: v > 5")
    under_ten = PredicateExpression.parse("lambda n: n < 10")
    between = over_five & under_ten
    between.source        # 'lambda v: v > 5 and v < 10'
    between(7)            # True
"""

from __future__ import annotations

import ast
import builtins
import copy
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from certificate_core.kernel.errors import ValidationError
from certificate_core.kernel.predicates.substitution import ParameterSubstitutor
from certificate_core.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

_UNBOUND = object()


def _check_single_parameter(node: ast.AST, source: str | None = None) -> ast.Lambda:
    source = source if source is not None else ast.unparse(node)
    if not isinstance(node, ast.Lambda):
        raise ValidationError(f"Predicate must be a lambda expression: {source!r}")
    args = node.args
    if (
        len(args.args) != 1
        or args.posonlyargs
        or args.kwonlyargs
        or args.vararg is not None
        or args.kwarg is not None
        or args.defaults
    ):
        raise ValidationError(f"Predicate must take exactly one parameter: {source!r}")
    return node


def _names(node: ast.AST) -> set[str]:
    return {child.id for child in ast.walk(node) if isinstance(child, ast.Name)}


def _fresh_name(base: str, taken: set[str]) -> str:
    candidate = f"{base}_"
    while candidate in taken:
        candidate += "_"
    return candidate


def _rebind(body: ast.expr, old: str, new: str) -> ast.expr:
    if old == new:
        return copy.deepcopy(body)
    substitutor = ParameterSubstitutor({old: ast.Name(id=new, ctx=ast.Load())})
    return substitutor.visit(copy.deepcopy(body))


class PredicateExpression(Generic[T]):
    """A one-parameter boolean ``lambda`` held as a syntax tree.

    Args:
        node: An ``ast.Lambda`` with exactly one positional parameter.
        namespace: Globals visible to the predicate body when evaluated.
    """

    def __init__(self, node: ast.Lambda, namespace: Mapping[str, Any] | None = None) -> None:
        self._node = _check_single_parameter(node)
        self._namespace: dict[str, Any] = dict(namespace or {})
        self._compiled: Callable[[T], bool] | None = None

    @classmethod
    def parse(
        cls,
        source: str,
        namespace: Mapping[str, Any] | None = None,
    ) -> PredicateExpression[T]:
        """Build an expression from ``lambda`` source text.

        Raises:
            ValidationError: *source* is not a single-parameter lambda.
        """
        try:
            tree = ast.parse(source.strip(), mode="eval")
        except SyntaxError as exc:
            raise ValidationError(f"Invalid predicate source: {source!r}", cause=exc) from exc
        return cls(_check_single_parameter(tree.body, source), namespace)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def node(self) -> ast.Lambda:
        """A copy of the underlying ``ast.Lambda``."""
        return copy.deepcopy(self._node)

    @property
    def parameter(self) -> str:
        return self._node.args.args[0].arg

    @property
    def body(self) -> ast.expr:
        return copy.deepcopy(self._node.body)

    @property
    def namespace(self) -> dict[str, Any]:
        return dict(self._namespace)

    @property
    def source(self) -> str:
        return ast.unparse(self._node)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def compile(self) -> Callable[[T], bool]:
        """Return the predicate as a Python function (cached)."""
        if self._compiled is None:
            tree = ast.fix_missing_locations(ast.Expression(body=copy.deepcopy(self._node)))
            code = compile(tree, "<predicate>", "eval")
            # the code object is a single lambda built from a checked ast.Lambda;
            # evaluating it only creates the function object
            scope = {**self._namespace, "__builtins__": builtins}
            self._compiled = eval(code, scope)  # noqa: S307
        return self._compiled

    def __call__(self, candidate: T) -> bool:
        return self.compile()(candidate)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def and_(self, other: PredicateExpression[T]) -> PredicateExpression[T]:
        return self._combine(other, ast.And())

    def or_(self, other: PredicateExpression[T]) -> PredicateExpression[T]:
        return self._combine(other, ast.Or())

    def not_(self) -> PredicateExpression[T]:
        node = self.node
        node.body = ast.UnaryOp(op=ast.Not(), operand=node.body)
        return PredicateExpression(ast.fix_missing_locations(node), self._namespace)

    def __and__(self, other: PredicateExpression[T]) -> PredicateExpression[T]:
        return self.and_(other)

    def __or__(self, other: PredicateExpression[T]) -> PredicateExpression[T]:
        return self.or_(other)

    def __invert__(self) -> PredicateExpression[T]:
        return self.not_()

    def _combine(self, other: PredicateExpression[T], op: ast.boolop) -> PredicateExpression[T]:
        parameter = self.parameter
        # other's body may use our parameter name as a free variable
        if parameter != other.parameter and parameter in _names(other._node.body):
            parameter = _fresh_name(parameter, _names(self._node) | _names(other._node))

        left = _rebind(self._node.body, self.parameter, parameter)
        right = _rebind(other._node.body, other.parameter, parameter)
        right, namespace = self._merge_namespaces(left, right, other._namespace, parameter)

        node = ast.Lambda(
            args=ast.arguments(
                posonlyargs=[],
                args=[ast.arg(arg=parameter)],
                kwonlyargs=[],
                kw_defaults=[],
                defaults=[],
            ),
            body=ast.BoolOp(op=op, values=[left, right]),
        )
        combined: PredicateExpression[T] = PredicateExpression(ast.fix_missing_locations(node), namespace)
        logger.debug(
            "predicate.combined",
            operator=type(op).__name__.lower(),
            parameter=parameter,
            source=combined.source,
        )
        return combined

    def _merge_namespaces(
        self,
        left: ast.expr,
        right: ast.expr,
        right_namespace: Mapping[str, Any],
        parameter: str,
    ) -> tuple[ast.expr, dict[str, Any]]:
        """Merge both namespaces without changing what either body resolves.

        The left namespace is kept whole.  A free name of the right body is
        renamed when the merged namespace would bind it to something else
        than the right operand saw: a different value, or a left-side entry
        shadowing a builtin.
        """
        namespace = dict(self._namespace)
        left_names = _names(left)
        taken = {*left_names, *_names(right), *namespace, *right_namespace, parameter}
        renames: dict[str, ast.expr] = {}

        for name in sorted(_names(right) - {parameter}):
            if name in right_namespace:
                value = right_namespace[name]
                if name in namespace:
                    conflict = namespace[name] is not value
                else:
                    # the left body resolves this name to a builtin
                    conflict = name in left_names
            else:
                value = getattr(builtins, name, _UNBOUND)
                conflict = name in namespace

            if not conflict:
                if name in right_namespace:
                    namespace[name] = value
                continue

            fresh = _fresh_name(name, taken)
            taken.add(fresh)
            renames[name] = ast.Name(id=fresh, ctx=ast.Load())
            if value is not _UNBOUND:
                namespace[fresh] = value

        if renames:
            right = ParameterSubstitutor(renames).visit(right)
        return right, namespace

    def __repr__(self) -> str:
        return f"PredicateExpression({self.source!r})"


__all__ = ["PredicateExpression"]
