"""Marina record model.

Exports the ``Boat`` record, the closed placement variant set and the
serializer for exporting boats to JSON/YAML.
"""
from __future__ import annotations

from marina.model.boat import (
    MAX_LICENSE_LENGTH,
    MAX_NAME_LENGTH,
    Boat,
    Land,
    Placement,
    PlacementKind,
    Slip,
    Storage,
    Trailer,
    describe_placement,
    name_key,
)
from marina.model.serializer import BoatSerializer

__all__ = [
    # Record
    "Boat",
    "name_key",
    "MAX_NAME_LENGTH",
    "MAX_LICENSE_LENGTH",
    # Placement variants
    "PlacementKind",
    "Placement",
    "Slip",
    "Land",
    "Trailer",
    "Storage",
    "describe_placement",
    # Serializer
    "BoatSerializer",
]
