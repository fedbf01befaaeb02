"""Predicate composition — public re-export surface.

Two flavours share the same combinators:

* plain callables, composed as closures;
* :class:`PredicateExpression`, kept as a syntax tree so the composed
  predicate can still be inspected and rendered for query translation.
"""

from certificate_core.kernel.predicates.combinators import Predicate, and_, not_, or_
from certificate_core.kernel.predicates.expression import PredicateExpression
from certificate_core.kernel.predicates.substitution import ParameterSubstitutor

__all__ = [
    "ParameterSubstitutor",
    "Predicate",
    "PredicateExpression",
    "and_",
    "not_",
    "or_",
]
