"""Shared test fixtures for marina-ledger.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from marina.model import Boat, Land, Slip, Storage, Trailer
from marina.registry import BoatRegistry

SAMPLE_LINES = (
    "Sea Lion,21,slip,21,100.50",
    "Jon Boat,14,trailer,TX1234,0.00",
)


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "marina"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def sea_lion() -> Boat:
    return Boat(name="Sea Lion", length=21, placement=Slip(number=21), amount_owed=100.50)


@pytest.fixture()
def jon_boat() -> Boat:
    return Boat(name="Jon Boat", length=14, placement=Trailer(license="TX1234"), amount_owed=0.0)


@pytest.fixture()
def fleet() -> list[Boat]:
    """One boat of every placement kind, deliberately unsorted."""
    return [
        Boat(name="Wavecutter", length=30, placement=Slip(number=7), amount_owed=0.0),
        Boat(name="barnacle", length=20, placement=Land(bay="C"), amount_owed=15.25),
        Boat(name="Minnow", length=16, placement=Trailer(license="FL-88X"), amount_owed=0.0),
        Boat(name="Driftwood", length=10, placement=Storage(number=42), amount_owed=3.0),
    ]


@pytest.fixture()
def registry(fleet: list[Boat]) -> BoatRegistry:
    reg = BoatRegistry(capacity=120)
    for boat in fleet:
        reg.add(boat)
    return reg


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    """A data file holding the two sample records, in file order."""
    path = tmp_path / "BoatData.csv"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path
