"""Bulk load and save of the marina data file.

Loading is forgiving: blank lines are skipped, unparseable or duplicate
records are logged and skipped, and once the registry is full the rest of
the file is discarded with a single notice.  Saving overwrites the whole
file with one line per boat in registry order.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from marina.codec.codec import format_line, parse_line
from marina.codec.errors import ParseError
from marina.registry.errors import DuplicateBoatError
from marina.registry.registry import DEFAULT_CAPACITY, BoatRegistry

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
    """Outcome of reading records into a registry.

    Parameters
    ----------
    loaded:
        Number of boats added to the registry.
    errors:
        Lines rejected by the codec, in file order.
    duplicates:
        Names skipped because they were already registered.
    discarded:
        Non-blank lines ignored after the registry became full.
    """

    loaded: int = 0
    errors: list[ParseError] = field(default_factory=list)
    duplicates: list[str] = field(default_factory=list)
    discarded: int = 0

    @property
    def skipped(self) -> int:
        """Return the number of non-blank lines that produced no boat."""
        return len(self.errors) + len(self.duplicates) + self.discarded


def read_boats(lines: Iterable[str], registry: BoatRegistry) -> LoadReport:
    """Parse ``lines`` and add the resulting boats to ``registry``.

    Parameters
    ----------
    lines:
        Data-file lines, with or without trailing newlines.
    registry:
        The registry to fill.

    Returns
    -------
    LoadReport
        Counts of loaded, rejected and discarded records.
    """
    report = LoadReport()
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        if registry.is_full:
            report.discarded += 1
            continue
        try:
            boat = parse_line(line, line_number=line_number)
        except ParseError as exc:
            logger.warning("Skipping line %d: %s", line_number, exc.message)
            report.errors.append(exc)
            continue
        try:
            registry.add(boat)
        except DuplicateBoatError as exc:
            logger.warning("Skipping line %d: %s", line_number, exc)
            report.duplicates.append(boat.name)
            continue
        report.loaded += 1
    if report.discarded:
        logger.warning(
            "Maximum number of boats (%d) reached; skipped %d remaining line(s)",
            registry.capacity,
            report.discarded,
        )
    return report


def load_all(path: str | Path, capacity: int = DEFAULT_CAPACITY) -> BoatRegistry:
    """Load every record in the file at ``path`` into a new registry.

    The file is read as UTF-8.  Bytes that do not decode are replaced with
    U+FFFD rather than aborting the load.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    """
    registry = BoatRegistry(capacity=capacity)
    with open(path, encoding="utf-8", errors="replace") as fh:
        report = read_boats(fh, registry)
    logger.info(
        "Loaded %d boat(s) from %s (%d line(s) skipped)",
        report.loaded,
        path,
        report.skipped,
    )
    return registry


def write_boats(registry: BoatRegistry) -> Iterator[str]:
    """Yield one formatted line per boat, in registry order."""
    for boat in registry:
        yield format_line(boat)


def save_all(registry: BoatRegistry, path: str | Path) -> int:
    """Overwrite the file at ``path`` with the contents of ``registry``.

    Returns
    -------
    int
        The number of records written.

    Raises
    ------
    OSError
        If the file cannot be opened or written.
    """
    count = 0
    with open(path, "w", encoding="utf-8") as fh:
        for line in write_boats(registry):
            fh.write(line + "\n")
            count += 1
    logger.info("Saved %d boat(s) to %s", count, path)
    return count
