"""Convenience API for marina: one object for a load -> operate -> save session.

The package's module-level functions cover each step on its own.  This
module adds ``MarinaSession``, which binds a data file, its registry and
the active settings together, mirroring how the CLI works.

Example
-------
::

    from marina import MarinaSession

    session = MarinaSession.open("BoatData.csv")
    session.accrue()
    session.pay("Sea Lion", 363.00)
    session.save()
"""
from __future__ import annotations

import logging
from pathlib import Path

from marina.billing.billing import accrue_monthly_charges, apply_payment
from marina.codec.codec import parse_line
from marina.config import MarinaSettings
from marina.model.boat import Boat
from marina.persistence.store import load_all, save_all
from marina.registry.registry import BoatRegistry

logger = logging.getLogger(__name__)


class MarinaSession:
    """A registry bound to the data file it was loaded from.

    Parameters
    ----------
    path:
        The data file to save to.
    registry:
        The boats in memory.
    settings:
        Capacity and billing rates in effect.
    """

    def __init__(
        self,
        path: str | Path,
        registry: BoatRegistry | None = None,
        settings: MarinaSettings | None = None,
    ) -> None:
        self._settings = settings or MarinaSettings()
        self._path = Path(path)
        self._registry = registry if registry is not None else BoatRegistry(
            capacity=self._settings.capacity
        )

    @classmethod
    def open(
        cls,
        path: str | Path,
        settings: MarinaSettings | None = None,
        missing_ok: bool = False,
    ) -> "MarinaSession":
        """Load the data file at ``path`` into a new session.

        Parameters
        ----------
        path:
            The data file to load and later save to.
        settings:
            Capacity and rates; defaults to ``MarinaSettings()``.
        missing_ok:
            If True, a missing file starts an empty session instead of
            raising ``FileNotFoundError``.
        """
        effective = settings or MarinaSettings()
        try:
            registry = load_all(path, capacity=effective.capacity)
        except FileNotFoundError:
            if not missing_ok:
                raise
            logger.warning("Data file %s not found; starting with an empty inventory", path)
            registry = BoatRegistry(capacity=effective.capacity)
        return cls(path, registry=registry, settings=effective)

    @property
    def path(self) -> Path:
        """The data file this session saves to."""
        return self._path

    @property
    def registry(self) -> BoatRegistry:
        """The boats in memory."""
        return self._registry

    @property
    def settings(self) -> MarinaSettings:
        return self._settings

    def add_line(self, line: str) -> Boat:
        """Parse a data-file line and add the boat it describes."""
        boat = parse_line(line)
        self._registry.add(boat)
        return boat

    def remove(self, name: str) -> None:
        self._registry.remove(name)

    def pay(self, name: str, amount: float) -> float:
        """Apply a payment to the named boat and return its new balance."""
        return apply_payment(self._registry.find(name), amount)

    def accrue(self) -> float:
        """Bill one month of charges and return the total accrued."""
        return accrue_monthly_charges(self._registry, self._settings.rates)

    def save(self) -> int:
        """Write the registry back to the data file."""
        return save_all(self._registry, self._path)

    def __repr__(self) -> str:
        return f"MarinaSession(path={str(self._path)!r}, boats={len(self._registry)})"
