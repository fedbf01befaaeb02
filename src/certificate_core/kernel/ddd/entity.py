"""Entity base class — identity-based equality."""

from __future__ import annotations

import uuid
from datetime import datetime

from certificate_core.kernel.ddd.value_object import ValueObject
from certificate_core.kernel.time import Clock, SystemClock
from certificate_core.kernel.types.ids import EMPTY_ID, is_empty

_TYPE_HASH_FACTOR = 503


class Entity(ValueObject["Entity"]):
    """Base entity – equality is identity-based (by ``id``).

    Two entities of the same concrete type are equal when their ids are
    equal, whatever their other attributes hold.  The id stays at the nil
    UUID until a repository assigns one; ``modified_date`` and
    ``is_deleted`` are likewise maintained by the persistence layer.
    """

    id: uuid.UUID
    created_date: datetime
    modified_date: datetime | None
    is_deleted: bool

    def __init__(self, *, clock: Clock | None = None) -> None:
        if type(self) is Entity:
            raise TypeError("Entity is abstract; construct a subclass")
        self.id = EMPTY_ID
        self.created_date = (clock or SystemClock()).now()
        self.modified_date = None
        self.is_deleted = False

    @property
    def is_transient(self) -> bool:
        """``True`` while no identifier has been assigned."""
        return is_empty(self.id)

    def _equals_core(self, other: Entity) -> bool:
        if other is self:
            return True
        if other is None:
            return False
        return self.id == other.id

    def _hash_core(self) -> int:
        return hash(type(self)) * _TYPE_HASH_FACTOR + hash(self.id)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self.id!r})"


__all__ = ["Entity"]
