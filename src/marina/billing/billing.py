"""Monthly charges and payments.

Every boat is billed monthly at a per-foot rate that depends on its
placement kind.  Balances are kept in dollars and rounded to whole cents
after each change so that paying the exact balance always leaves zero.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from marina.billing.errors import InvalidPaymentError, PaymentExceedsBalanceError
from marina.model.boat import Boat, PlacementKind

logger = logging.getLogger(__name__)

DEFAULT_RATES: Mapping[PlacementKind, float] = MappingProxyType(
    {
        PlacementKind.SLIP: 12.50,
        PlacementKind.LAND: 14.00,
        PlacementKind.TRAILER: 25.00,
        PlacementKind.STORAGE: 11.20,
    }
)


def _to_cents(amount: float) -> float:
    return round(amount, 2)


def monthly_charge(boat: Boat, rates: Mapping[PlacementKind, float] | None = None) -> float:
    """Return the monthly charge for ``boat``: its length times its kind's rate."""
    effective = DEFAULT_RATES if rates is None else rates
    return _to_cents(boat.length * effective[boat.kind])


def accrue_monthly_charges(
    boats: Iterable[Boat], rates: Mapping[PlacementKind, float] | None = None
) -> float:
    """Add one month of charges to every boat's balance.

    Parameters
    ----------
    boats:
        The boats to bill, typically a ``BoatRegistry``.
    rates:
        Per-foot monthly rate for each placement kind.  Defaults to
        ``DEFAULT_RATES``.

    Returns
    -------
    float
        The total amount charged across all boats.
    """
    total = 0.0
    count = 0
    for boat in boats:
        charge = monthly_charge(boat, rates)
        boat.amount_owed = _to_cents(boat.amount_owed + charge)
        total += charge
        count += 1
    logger.info("Accrued monthly charges of $%.2f across %d boat(s)", total, count)
    return _to_cents(total)


def apply_payment(boat: Boat, amount: float) -> float:
    """Apply a payment of ``amount`` to ``boat`` and return the new balance.

    Raises
    ------
    InvalidPaymentError
        If ``amount`` is not a positive finite number.
    PaymentExceedsBalanceError
        If ``amount`` is more than the boat currently owes.
    """
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidPaymentError(boat.name, amount)
    if amount > boat.amount_owed:
        raise PaymentExceedsBalanceError(boat.name, amount, boat.amount_owed)
    boat.amount_owed = _to_cents(boat.amount_owed - amount)
    logger.debug(
        "Applied payment of $%.2f to %r; now owes $%.2f",
        amount,
        boat.name,
        boat.amount_owed,
    )
    return boat.amount_owed
