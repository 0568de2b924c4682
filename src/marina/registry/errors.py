"""Error types raised by ``BoatRegistry``."""
from __future__ import annotations


class CapacityError(RuntimeError):
    """Raised when adding a boat to a registry that is already full."""

    def __init__(self, name: str, capacity: int) -> None:
        self.boat_name = name
        self.capacity = capacity
        super().__init__(
            f"Cannot add boat {name!r}: the registry is full "
            f"(maximum of {capacity} boats reached)."
        )


class DuplicateBoatError(ValueError):
    """Raised when adding a boat whose name is already registered.

    Names are compared case-insensitively.
    """

    def __init__(self, name: str, existing: str) -> None:
        self.boat_name = name
        self.existing_name = existing
        super().__init__(
            f"Cannot add boat {name!r}: a boat named {existing!r} is already registered. "
            "Remove the existing entry first."
        )


class NotFoundError(KeyError):
    """Raised when no registered boat matches a name."""

    def __init__(self, name: str) -> None:
        self.boat_name = name
        super().__init__(f"No boat named {name!r}.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
