"""Marina persistence module.

Exports bulk load/save of the line-oriented data file.
"""
from __future__ import annotations

from marina.persistence.store import (
    LoadReport,
    load_all,
    read_boats,
    save_all,
    write_boats,
)

__all__ = [
    "LoadReport",
    "load_all",
    "read_boats",
    "save_all",
    "write_boats",
]
