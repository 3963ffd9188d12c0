"""
Protocol-based interfaces for the extension points of the mortgage library.

Using typing.Protocol enables structural subtyping: any loan object exposing
the four loan fields, and any calculator implementing can_calculate(),
payment() and number_of_payments(), plugs into PaymentEngine without
inheriting from library classes.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mortgage.frequency import PaymentFrequency


@runtime_checkable
class Loan(Protocol):
    """Protocol for loan products.

    Loans carry validated, immutable inputs; payment logic lives in
    calculator implementations.
    """

    principal: Decimal
    nominal_annual_rate: Decimal
    amortization_years: int
    payment_frequency: PaymentFrequency


class PaymentCalculator(Protocol):
    """Protocol for payment calculators registered with the PaymentEngine."""

    def can_calculate(self, loan: Loan) -> bool:
        """Return True if this calculator handles the given loan type."""
        ...

    def exact_payment(self, loan: Loan) -> Decimal:
        """Periodic payment at full decimal precision."""
        ...

    def payment(self, loan: Loan) -> Decimal:
        """Periodic payment rounded to the cent."""
        ...

    def number_of_payments(self, loan: Loan) -> int:
        """Payments needed to retire the loan."""
        ...
