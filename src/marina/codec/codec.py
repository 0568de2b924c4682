"""Line codec: one line of the marina data file <-> one ``Boat``.

Each record is a single comma-delimited line::

    name,length,kind,extra,amountOwed

``kind`` is one of ``slip``, ``land``, ``trailer`` or ``storage``
(case-insensitive on read, lowercase on write) and ``extra`` holds the
kind-specific datum: a slip or storage number, a land bay letter, or a
trailer license tag.  There is no header and no quoting, so a name
containing a comma cannot be represented.

Numeric fields are converted leniently: the longest numeric prefix is
used and text without one reads as zero (``"12.5ft"`` is ``12.5`` and
``"abc"`` is ``0.0``).  Existing data files depend on this, so it must not
be tightened into strict parsing.

Usage
-----
::

    from marina.codec import format_line, parse_line

    boat = parse_line("Sea Lion,21,slip,21,100.50")
    assert format_line(boat) == "Sea Lion,21,slip,21,100.50"
"""
from __future__ import annotations

import re

from marina.codec.errors import ParseError
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
)

DELIMITER = ","
FIELD_COUNT = 5

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")

# "trailor" is the spelling written by older versions of the data file.
_KIND_NAMES: dict[str, PlacementKind] = {
    "slip": PlacementKind.SLIP,
    "land": PlacementKind.LAND,
    "trailer": PlacementKind.TRAILER,
    "trailor": PlacementKind.TRAILER,
    "storage": PlacementKind.STORAGE,
}


# ---------------------------------------------------------------------------
# Lenient numeric conversion
# ---------------------------------------------------------------------------


def lenient_float(text: str) -> float:
    """Convert the longest leading decimal prefix of ``text`` to a float.

    Leading whitespace is ignored.  Returns ``0.0`` when ``text`` has no
    numeric prefix.

    Examples
    --------
    >>> lenient_float("12.5ft")
    12.5
    >>> lenient_float("abc")
    0.0
    """
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        return 0.0
    return float(match.group())


def lenient_int(text: str) -> int:
    """Convert the longest leading integer prefix of ``text`` to an int.

    Returns ``0`` when ``text`` has no numeric prefix.
    """
    match = _INT_PREFIX.match(text.lstrip())
    if match is None:
        return 0
    return int(match.group())


def parse_kind(text: str) -> PlacementKind:
    """Return the placement kind named by ``text`` (case-insensitive).

    Raises
    ------
    ValueError
        If ``text`` does not name a known placement kind.
    """
    try:
        return _KIND_NAMES[text.strip().lower()]
    except KeyError:
        expected = ", ".join(kind.wire_name for kind in PlacementKind)
        raise ValueError(f"Unknown placement kind {text!r} (expected one of: {expected})") from None


# ---------------------------------------------------------------------------
# Line -> Boat
# ---------------------------------------------------------------------------


def _parse_placement(kind: PlacementKind, extra: str) -> Placement:
    if kind is PlacementKind.SLIP:
        return Slip(number=lenient_int(extra))
    if kind is PlacementKind.LAND:
        if not extra:
            raise ValueError("Land placement requires a bay letter")
        return Land(bay=extra[0])
    if kind is PlacementKind.TRAILER:
        return Trailer(license=extra[:MAX_LICENSE_LENGTH].rstrip())
    if kind is PlacementKind.STORAGE:
        return Storage(number=lenient_int(extra))
    raise TypeError(f"Unhandled placement kind: {kind!r}")


def parse_line(text: str, line_number: int | None = None) -> Boat:
    """Parse one data-file line into a ``Boat``.

    Parameters
    ----------
    text:
        The raw line, with or without its trailing newline.
    line_number:
        Optional 1-based line number used in error messages.

    Returns
    -------
    Boat
        A freshly constructed boat record.

    Raises
    ------
    ParseError
        If the line does not have exactly five fields, names an unknown
        placement kind, or yields an invalid record (empty name, negative
        or overflowing number, missing land bay).
    """
    fields = [f.strip() for f in text.rstrip("\r\n").split(DELIMITER)]
    if len(fields) != FIELD_COUNT:
        raise ParseError(
            f"Expected {FIELD_COUNT} fields, found {len(fields)}",
            text=text,
            line_number=line_number,
        )

    name, length_text, kind_text, extra, owed_text = fields
    try:
        kind = parse_kind(kind_text)
        return Boat(
            name=name[:MAX_NAME_LENGTH].rstrip(),
            length=lenient_float(length_text),
            placement=_parse_placement(kind, extra),
            amount_owed=lenient_float(owed_text),
        )
    except ValueError as exc:
        raise ParseError(str(exc), text=text, line_number=line_number) from exc


# ---------------------------------------------------------------------------
# Boat -> line
# ---------------------------------------------------------------------------


def format_extra(placement: Placement) -> str:
    """Return the raw ``extra`` field for ``placement``."""
    if isinstance(placement, (Slip, Storage)):
        return str(placement.number)
    if isinstance(placement, Land):
        return placement.bay
    if isinstance(placement, Trailer):
        return placement.license
    raise TypeError(f"Unknown placement type: {type(placement).__name__}")


def format_line(boat: Boat) -> str:
    """Render ``boat`` as one data-file line (without a trailing newline).

    The length is written with no decimal places and the amount owed with
    two, so lengths lose any fractional part.
    """
    return DELIMITER.join(
        (
            boat.name,
            f"{boat.length:.0f}",
            boat.kind.wire_name,
            format_extra(boat.placement),
            f"{boat.amount_owed:.2f}",
        )
    )
