"""marina-ledger — inventory and billing for marina boats.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import marina

    # Load the data file into a name-sorted registry
    registry = marina.load_all("BoatData.csv")

    # Add a boat from a data-file line
    registry.add(marina.parse_line("Jon Boat,14,trailer,TX1234,0.00"))

    # Bill one month and take a payment
    marina.accrue_monthly_charges(registry)
    marina.apply_payment(registry.find("sea lion"), 100.00)

    # Write everything back
    marina.save_all(registry, "BoatData.csv")

    marina.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from marina.billing import (
    DEFAULT_RATES,
    InvalidPaymentError,
    PaymentExceedsBalanceError,
    accrue_monthly_charges,
    apply_payment,
    monthly_charge,
)
from marina.codec import ParseError, format_line, parse_line
from marina.config import ConfigError, MarinaSettings, load_settings
from marina.convenience import MarinaSession
from marina.model import (
    Boat,
    BoatSerializer,
    Land,
    Placement,
    PlacementKind,
    Slip,
    Storage,
    Trailer,
)
from marina.persistence import LoadReport, load_all, read_boats, save_all
from marina.registry import (
    BoatRegistry,
    CapacityError,
    DuplicateBoatError,
    NotFoundError,
)

__all__ = [
    "__version__",
    # Model
    "Boat",
    "Placement",
    "PlacementKind",
    "Slip",
    "Land",
    "Trailer",
    "Storage",
    "BoatSerializer",
    # Codec
    "parse_line",
    "format_line",
    "ParseError",
    # Registry
    "BoatRegistry",
    "CapacityError",
    "DuplicateBoatError",
    "NotFoundError",
    # Billing
    "DEFAULT_RATES",
    "monthly_charge",
    "accrue_monthly_charges",
    "apply_payment",
    "InvalidPaymentError",
    "PaymentExceedsBalanceError",
    # Persistence
    "LoadReport",
    "load_all",
    "read_boats",
    "save_all",
    # Settings and session
    "MarinaSettings",
    "ConfigError",
    "load_settings",
    "MarinaSession",
]
