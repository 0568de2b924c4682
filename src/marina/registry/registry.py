"""Name-sorted, capacity-bounded registry of boats.

``BoatRegistry`` exclusively owns every ``Boat`` in the inventory.  The
boats are kept ordered by name under case-insensitive comparison at all
times; the only way in is :meth:`BoatRegistry.add`, which inserts each
boat at its sorted position, so the ordering is maintained in one place.

Example
-------
::

    from marina.registry import BoatRegistry

    registry = BoatRegistry(capacity=120)
    registry.add(boat)
    registry.find("sea lion").amount_owed
    registry.remove("SEA LION")
"""
from __future__ import annotations

import bisect
import logging
from collections.abc import Iterator

from marina.model.boat import Boat, name_key
from marina.registry.errors import CapacityError, DuplicateBoatError, NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 120


def _sort_key(boat: Boat) -> str:
    return boat.key


class BoatRegistry:
    """Ordered collection of boats keyed by case-insensitive name.

    Parameters
    ----------
    capacity:
        Maximum number of boats the registry accepts.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"Registry capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._boats: list[Boat] = []

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, boat: Boat) -> None:
        """Insert ``boat`` at its name-sorted position.

        Boats whose names compare equal keep their insertion order.

        Raises
        ------
        CapacityError
            If the registry already holds ``capacity`` boats.
        DuplicateBoatError
            If a boat with the same case-insensitive name is registered.
        """
        if self.is_full:
            raise CapacityError(boat.name, self._capacity)
        existing = self._lookup(boat.name)
        if existing is not None:
            raise DuplicateBoatError(boat.name, self._boats[existing].name)
        bisect.insort_right(self._boats, boat, key=_sort_key)
        logger.debug("Added boat %r (%d/%d)", boat.name, len(self._boats), self._capacity)

    def remove(self, name: str) -> None:
        """Remove the boat named ``name`` (case-insensitive).

        The relative order of the remaining boats is preserved.

        Raises
        ------
        NotFoundError
            If no boat matches ``name``.
        """
        index = self._lookup(name)
        if index is None:
            raise NotFoundError(name)
        removed = self._boats.pop(index)
        logger.debug("Removed boat %r", removed.name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, name: str) -> Boat:
        """Return the boat named ``name`` (case-insensitive).

        The returned record stays owned by the registry; callers may
        update its balance but must not hold on to it after removal.

        Raises
        ------
        NotFoundError
            If no boat matches ``name``.
        """
        index = self._lookup(name)
        if index is None:
            raise NotFoundError(name)
        return self._boats[index]

    def list_boats(self) -> list[Boat]:
        """Return a snapshot of all boats in name order."""
        return list(self._boats)

    def _lookup(self, name: str) -> int | None:
        key = name_key(name)
        index = bisect.bisect_left(self._boats, key, key=_sort_key)
        if index < len(self._boats) and self._boats[index].key == key:
            return index
        return None

    # ------------------------------------------------------------------
    # Capacity
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Maximum number of boats this registry accepts."""
        return self._capacity

    @property
    def is_full(self) -> bool:
        """Return True if no more boats can be added."""
        return len(self._boats) >= self._capacity

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Boat]:
        """Iterate over a snapshot of the boats in name order."""
        return iter(self.list_boats())

    def __len__(self) -> int:
        return len(self._boats)

    def __contains__(self, name: object) -> bool:
        """Support ``"Sea Lion" in registry`` membership tests."""
        return isinstance(name, str) and self._lookup(name) is not None

    def __repr__(self) -> str:
        return (
            f"BoatRegistry(capacity={self._capacity}, "
            f"boats={[b.name for b in self._boats]})"
        )
