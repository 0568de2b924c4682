"""Error types raised by payment processing."""
from __future__ import annotations


class PaymentExceedsBalanceError(ValueError):
    """Raised when a payment is larger than the boat's current balance.

    The balance is left unchanged.
    """

    def __init__(self, name: str, amount: float, balance: float) -> None:
        self.boat_name = name
        self.amount = amount
        self.balance = balance
        super().__init__(
            f"Payment of ${amount:.2f} for {name!r} is more than the amount owed, "
            f"${balance:.2f}."
        )


class InvalidPaymentError(ValueError):
    """Raised when a payment amount is not a positive finite number."""

    def __init__(self, name: str, amount: float) -> None:
        self.boat_name = name
        self.amount = amount
        super().__init__(
            f"Payment for {name!r} must be a positive amount, got ${amount:.2f}."
        )
