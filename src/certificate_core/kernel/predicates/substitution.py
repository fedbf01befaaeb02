"""ParameterSubstitutor — rewrites parameter references in a syntax tree."""

from __future__ import annotations

import ast
import copy
from collections.abc import Iterable, Mapping


def _target_names(target: ast.AST) -> set[str]:
    return {node.id for node in ast.walk(target) if isinstance(node, ast.Name)}


def _lambda_bindings(args: ast.arguments) -> set[str]:
    bound = {a.arg for a in (*args.posonlyargs, *args.args, *args.kwonlyargs)}
    if args.vararg is not None:
        bound.add(args.vararg.arg)
    if args.kwarg is not None:
        bound.add(args.kwarg.arg)
    return bound


class ParameterSubstitutor(ast.NodeTransformer):
    """Replace every load of a mapped name with a copy of its replacement.

    All other nodes are returned unchanged.  Nested lambdas and
    comprehensions that rebind a mapped name shadow it, so references
    inside them are left alone.

    Example::

        body = ast.parse("y > 5", mode="eval").body
        ParameterSubstitutor({"y": ast.Name("x", ast.Load())}).visit(body)
        # -> x > 5
    """

    def __init__(self, substitute: Mapping[str, ast.expr]) -> None:
        self.substitute: dict[str, ast.expr] = dict(substitute)

    def _scoped(self, bound: Iterable[str]) -> ParameterSubstitutor:
        shadowed = set(bound)
        if not shadowed & self.substitute.keys():
            return self
        return ParameterSubstitutor(
            {name: node for name, node in self.substitute.items() if name not in shadowed}
        )

    def visit_Name(self, node: ast.Name) -> ast.expr:
        replacement = self.substitute.get(node.id)
        if replacement is None or not isinstance(node.ctx, ast.Load):
            return node
        return ast.copy_location(copy.deepcopy(replacement), node)

    def visit_Lambda(self, node: ast.Lambda) -> ast.Lambda:
        # defaults are evaluated in the enclosing scope
        node.args.defaults = [self.visit(default) for default in node.args.defaults]
        node.args.kw_defaults = [
            self.visit(default) if default is not None else None
            for default in node.args.kw_defaults
        ]
        node.body = self._scoped(_lambda_bindings(node.args)).visit(node.body)
        return node

    def _visit_comprehension(self, node: ast.AST) -> ast.AST:
        first, *rest = node.generators  # type: ignore[attr-defined]
        first.iter = self.visit(first.iter)

        bound: set[str] = set()
        for generator in node.generators:  # type: ignore[attr-defined]
            bound |= _target_names(generator.target)
        inner = self._scoped(bound)

        first.ifs = [inner.visit(condition) for condition in first.ifs]
        for generator in rest:
            generator.iter = inner.visit(generator.iter)
            generator.ifs = [inner.visit(condition) for condition in generator.ifs]
        for field in ("elt", "key", "value"):
            if hasattr(node, field):
                setattr(node, field, inner.visit(getattr(node, field)))
        return node

    visit_ListComp = _visit_comprehension
    visit_SetComp = _visit_comprehension
    visit_GeneratorExp = _visit_comprehension
    visit_DictComp = _visit_comprehension


__all__ = ["ParameterSubstitutor"]
