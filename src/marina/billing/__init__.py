"""Marina billing module.

Exports monthly accrual, payment processing and the payment errors.
"""
from __future__ import annotations

from marina.billing.billing import (
    DEFAULT_RATES,
    accrue_monthly_charges,
    apply_payment,
    monthly_charge,
)
from marina.billing.errors import InvalidPaymentError, PaymentExceedsBalanceError

__all__ = [
    "DEFAULT_RATES",
    "monthly_charge",
    "accrue_monthly_charges",
    "apply_payment",
    "InvalidPaymentError",
    "PaymentExceedsBalanceError",
]
