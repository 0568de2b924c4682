"""Record model for the marina inventory.

A ``Boat`` is one inventory entry.  Where the boat is kept is described by
exactly one *placement* variant drawn from a closed set: ``Slip``, ``Land``,
``Trailer`` or ``Storage``.  Each variant is a frozen dataclass tagged with
a ``PlacementKind``; downstream code dispatches on the variant with
``isinstance`` checks and treats any other type as a programming error.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

MAX_NAME_LENGTH = 127
MAX_LICENSE_LENGTH = 19

# Characters that would split or end a data-file record.
RESERVED_CHARACTERS = frozenset(",\r\n")


def _check_text_field(value: str, what: str) -> None:
    """Reject text that would not read back unchanged from a data-file line."""
    if RESERVED_CHARACTERS.intersection(value):
        raise ValueError(f"{what} must not contain a comma or line break, got {value!r}")
    if value != value.strip():
        raise ValueError(f"{what} must not start or end with whitespace, got {value!r}")


class PlacementKind(Enum):
    """The closed set of ways a boat can be kept at the marina.

    The enum value is the lowercase name used in the data file.
    """

    SLIP = "slip"
    LAND = "land"
    TRAILER = "trailer"
    STORAGE = "storage"

    @property
    def wire_name(self) -> str:
        """Return the lowercase name written to the data file."""
        return self.value


# ---------------------------------------------------------------------------
# Placement variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Slip:
    """A boat moored in a numbered slip."""

    kind: ClassVar[PlacementKind] = PlacementKind.SLIP

    number: int


@dataclass(frozen=True, slots=True)
class Land:
    """A boat stored on land in a lettered bay."""

    kind: ClassVar[PlacementKind] = PlacementKind.LAND

    bay: str

    def __post_init__(self) -> None:
        if len(self.bay) != 1:
            raise ValueError(f"Land bay must be a single character, got {self.bay!r}")
        _check_text_field(self.bay, "Land bay")


@dataclass(frozen=True, slots=True)
class Trailer:
    """A boat kept on a trailer, identified by the trailer's license tag."""

    kind: ClassVar[PlacementKind] = PlacementKind.TRAILER

    license: str

    def __post_init__(self) -> None:
        if len(self.license) > MAX_LICENSE_LENGTH:
            raise ValueError(
                f"Trailer license must be at most {MAX_LICENSE_LENGTH} characters, "
                f"got {len(self.license)}"
            )
        _check_text_field(self.license, "Trailer license")


@dataclass(frozen=True, slots=True)
class Storage:
    """A boat kept in a numbered storage unit."""

    kind: ClassVar[PlacementKind] = PlacementKind.STORAGE

    number: int


Placement = Union[Slip, Land, Trailer, Storage]


def describe_placement(placement: Placement) -> str:
    """Render the kind-specific datum of ``placement`` for display.

    Slips and storage units show as ``#<number>``, land bays as the bay
    letter and trailers as the license tag.
    """
    if isinstance(placement, (Slip, Storage)):
        return f"#{placement.number}"
    if isinstance(placement, Land):
        return placement.bay
    if isinstance(placement, Trailer):
        return placement.license
    raise TypeError(f"Unknown placement type: {type(placement).__name__}")


# ---------------------------------------------------------------------------
# Boat
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class Boat:
    """One inventory entry.

    Parameters
    ----------
    name:
        Unique (case-insensitive) name of the boat, 1-127 characters.
    length:
        Length in feet; drives the monthly charge.
    placement:
        Where the boat is kept.
    amount_owed:
        Current balance due.  Billing raises it, payments lower it.
    """

    name: str
    length: float
    placement: Placement
    amount_owed: float = 0.0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Boat name must not be empty")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(
                f"Boat name must be at most {MAX_NAME_LENGTH} characters, "
                f"got {len(self.name)}"
            )
        _check_text_field(self.name, "Boat name")
        if not math.isfinite(self.length):
            raise ValueError(f"Boat length must be a finite number, got {self.length}")
        if self.length < 0:
            raise ValueError(f"Boat length must not be negative, got {self.length}")
        if not math.isfinite(self.amount_owed):
            raise ValueError(f"Amount owed must be a finite number, got {self.amount_owed}")
        if not isinstance(self.placement, (Slip, Land, Trailer, Storage)):
            raise TypeError(
                f"Unknown placement type: {type(self.placement).__name__}"
            )

    @property
    def kind(self) -> PlacementKind:
        """Return the placement kind tag of this boat."""
        return self.placement.kind

    @property
    def key(self) -> str:
        """Return the case-insensitive lookup key for this boat's name."""
        return name_key(self.name)


def name_key(name: str) -> str:
    """Return the key used to compare and order boat names."""
    return name.casefold()
