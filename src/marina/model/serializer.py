"""Export of boats and registries to JSON and YAML.

Provides round-trip conversion of ``Boat`` records to and from plain
dicts.  The dict form maps naturally to both JSON and YAML and is what the
``marina export`` command emits.

Usage
-----
::

    from marina.model.serializer import BoatSerializer

    serializer = BoatSerializer()
    data = serializer.to_dict(registry)
    json_text = serializer.to_json(registry)
    boats = serializer.boats_from_dict(data)
"""
from __future__ import annotations

import json
from collections.abc import Iterable

import yaml

from marina.model.boat import (
    Boat,
    Land,
    Placement,
    PlacementKind,
    Slip,
    Storage,
    Trailer,
)


class BoatSerializer:
    """Converts between ``Boat`` records and plain Python dicts.

    The placement is serialized with a ``"kind"`` discriminator so that
    deserialization is unambiguous.
    """

    # ------------------------------------------------------------------
    # Serialization (Boat -> dict)
    # ------------------------------------------------------------------

    def to_dict(self, boats: Iterable[Boat]) -> dict[str, object]:
        """Serialize a sequence of boats (e.g. a registry) to a dict."""
        return {"boats": [self.boat_to_dict(b) for b in boats]}

    def boat_to_dict(self, boat: Boat) -> dict[str, object]:
        return {
            "name": boat.name,
            "length": boat.length,
            "placement": self._placement_to_dict(boat.placement),
            "amount_owed": boat.amount_owed,
        }

    def _placement_to_dict(self, placement: Placement) -> dict[str, object]:
        if isinstance(placement, Slip):
            return {"kind": "slip", "number": placement.number}
        if isinstance(placement, Land):
            return {"kind": "land", "bay": placement.bay}
        if isinstance(placement, Trailer):
            return {"kind": "trailer", "license": placement.license}
        if isinstance(placement, Storage):
            return {"kind": "storage", "number": placement.number}
        raise TypeError(f"Unknown placement type: {type(placement).__name__}")

    def to_json(self, boats: Iterable[Boat], indent: int = 2) -> str:
        """Serialize boats to a JSON string."""
        return json.dumps(self.to_dict(boats), indent=indent)

    def to_yaml(self, boats: Iterable[Boat]) -> str:
        """Serialize boats to a YAML string."""
        return yaml.dump(self.to_dict(boats), default_flow_style=False, sort_keys=False)

    # ------------------------------------------------------------------
    # Deserialization (dict -> Boat)
    # ------------------------------------------------------------------

    def boats_from_dict(self, data: dict[str, object]) -> list[Boat]:
        """Deserialize the output of :meth:`to_dict` back to boats."""
        raw = data.get("boats", [])
        if not isinstance(raw, list):
            raise ValueError(f"Expected a list under 'boats', got {type(raw).__name__}")
        return [self.boat_from_dict(item) for item in raw]

    def boat_from_dict(self, data: dict[str, object]) -> Boat:
        return Boat(
            name=str(data["name"]),
            length=float(data["length"]),  # type: ignore[arg-type]
            placement=self._placement_from_dict(data["placement"]),  # type: ignore[arg-type]
            amount_owed=float(data.get("amount_owed", 0.0)),  # type: ignore[arg-type]
        )

    def _placement_from_dict(self, data: dict[str, object]) -> Placement:
        kind = PlacementKind(data["kind"])
        if kind is PlacementKind.SLIP:
            return Slip(number=int(data["number"]))  # type: ignore[call-overload]
        if kind is PlacementKind.LAND:
            return Land(bay=str(data["bay"]))
        if kind is PlacementKind.TRAILER:
            return Trailer(license=str(data["license"]))
        if kind is PlacementKind.STORAGE:
            return Storage(number=int(data["number"]))  # type: ignore[call-overload]
        raise ValueError(f"Unknown placement kind: {kind!r}")

    def from_json(self, text: str) -> list[Boat]:
        """Deserialize boats from a JSON string."""
        return self.boats_from_dict(json.loads(text))

    def from_yaml(self, text: str) -> list[Boat]:
        """Deserialize boats from a YAML string."""
        return self.boats_from_dict(yaml.safe_load(text))
