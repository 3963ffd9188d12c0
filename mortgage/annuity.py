"""Level-payment annuity formula and cent rounding."""

from __future__ import annotations

import decimal
from decimal import Decimal, localcontext

from mortgage.config import CENT, ONE, ROUNDING, settings
from mortgage.errors import InvalidTerm, Overflow


def annuity_payment(principal: Decimal, rate: Decimal, periods: int) -> Decimal:
    """
    Constant payment that amortizes `principal` over `periods` payments at
    `rate` per period (ordinary annuity, payments in arrears):

        a = p * r * (1 + r)**n / ((1 + r)**n - 1)

    With r == 0 this degenerates to p / n. Result is unrounded.
    """
    if periods <= 0:
        raise InvalidTerm(f"number of payments must be positive, got {periods}")
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        try:
            if rate == 0:
                return Decimal(principal) / periods
            growth = (ONE + rate) ** periods
            return principal * rate * growth / (growth - ONE)
        except (decimal.Overflow, decimal.InvalidOperation, decimal.DivisionByZero) as exc:
            raise Overflow(
                f"annuity payment not representable (rate={rate}, periods={periods})"
            ) from exc


def round_to_cent(amount: Decimal) -> Decimal:
    """Round half-up to the currency minor unit at the configured precision."""
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        try:
            return Decimal(amount).quantize(CENT, rounding=ROUNDING)
        except decimal.InvalidOperation as exc:
            raise Overflow(f"amount {amount} cannot be rounded to cents") from exc
