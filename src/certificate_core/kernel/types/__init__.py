"""Kernel identifier helpers — public re-export surface."""

from certificate_core.kernel.types.ids import EMPTY_ID, is_empty, new_id

__all__ = ["EMPTY_ID", "is_empty", "new_id"]
