"""Canadian fixed-rate mortgage (semi-annual compounding)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from mortgage.frequency import PaymentFrequency
from mortgage.products.terms import normalize_terms
from mortgage.rates import periodic_rate


@dataclass(frozen=True)
class CanadianMortgage:
    """
    Fixed-rate mortgage whose quoted rate compounds semi-annually, as Canadian
    law requires, whatever the payment frequency.

    - `principal`: amount borrowed (> 0).
    - `nominal_annual_rate`: quoted percentage, e.g. 4.59 for 4.59 % (>= 0).
    - `amortization_years`: years over which the loan is repaid.
    - `payment_frequency`: see `PaymentFrequency`.

    Inputs are validated and normalized on construction; instances are immutable.
    """

    principal: Decimal
    nominal_annual_rate: Decimal
    amortization_years: int
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    def __post_init__(self) -> None:
        terms = normalize_terms(
            self.principal,
            self.nominal_annual_rate,
            self.amortization_years,
            self.payment_frequency,
        )
        for name, value in terms._asdict().items():
            object.__setattr__(self, name, value)

    @property
    def payments_per_year(self) -> int:
        return self.payment_frequency.payments_per_year

    @property
    def number_of_payments(self) -> int:
        """
        Payments that retire the loan: amortization_years * payments_per_year,
        fewer for accelerated schedules.
        """
        from mortgage.payments import number_of_payments

        return number_of_payments(self)

    def periodic_rate(self) -> Decimal:
        """Effective interest rate per payment period."""
        return periodic_rate(self.nominal_annual_rate, self.payments_per_year)

    def payment(self) -> Decimal:
        """Periodic payment rounded to the cent."""
        from mortgage.payments import payment

        return payment(self)

    def exact_payment(self) -> Decimal:
        """Periodic payment before rounding."""
        from mortgage.payments import exact_payment

        return exact_payment(self)
