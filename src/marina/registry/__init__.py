"""Marina registry module.

Exports ``BoatRegistry`` and the errors it raises.
"""
from __future__ import annotations

from marina.registry.errors import CapacityError, DuplicateBoatError, NotFoundError
from marina.registry.registry import DEFAULT_CAPACITY, BoatRegistry

__all__ = [
    "BoatRegistry",
    "DEFAULT_CAPACITY",
    "CapacityError",
    "DuplicateBoatError",
    "NotFoundError",
]
