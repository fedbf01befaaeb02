"""DDD building blocks — public re-export surface."""

from certificate_core.kernel.ddd.entity import Entity
from certificate_core.kernel.ddd.value_object import ValueObject, values_equal

__all__ = [
    "Entity",
    "ValueObject",
    "values_equal",
]
