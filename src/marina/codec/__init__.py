"""Marina line codec module.

Exports ``parse_line`` / ``format_line``, the lenient numeric helpers and
the ``ParseError`` type.
"""
from __future__ import annotations

from marina.codec.codec import (
    DELIMITER,
    FIELD_COUNT,
    format_extra,
    format_line,
    lenient_float,
    lenient_int,
    parse_kind,
    parse_line,
)
from marina.codec.errors import ParseError

__all__ = [
    "DELIMITER",
    "FIELD_COUNT",
    "parse_line",
    "format_line",
    "format_extra",
    "parse_kind",
    "lenient_float",
    "lenient_int",
    "ParseError",
]
