"""UUID identifier helpers.

Entities carry a plain :class:`uuid.UUID`.  The nil UUID marks an entity
whose identifier has not been assigned yet.
"""

from __future__ import annotations

import uuid

EMPTY_ID: uuid.UUID = uuid.UUID(int=0)


def new_id() -> uuid.UUID:
    """Return a new random (v4) identifier."""
    return uuid.uuid4()


def is_empty(value: uuid.UUID) -> bool:
    """Return ``True`` when *value* is the nil UUID."""
    return value == EMPTY_ID


__all__ = ["EMPTY_ID", "is_empty", "new_id"]
