"""Calculator for Canadian mortgages (semi-annual compounding)."""

from __future__ import annotations

from decimal import Decimal

from mortgage.calculators.base import BaseCalculator
from mortgage.interfaces import Loan
from mortgage.products.canadian import CanadianMortgage
from mortgage.rates import periodic_rate


class CanadianCalculator(BaseCalculator):
    """Calculator for Canadian fixed-rate mortgages."""

    def can_calculate(self, loan: Loan) -> bool:
        return isinstance(loan, CanadianMortgage)

    def periodic_rate(self, loan: Loan, payments_per_year: int) -> Decimal:
        """
        Semi-annual nominal rate converted to the equivalent rate per payment:
        (1 + nominal/200)**(2/f) - 1.
        """
        assert isinstance(loan, CanadianMortgage)
        return periodic_rate(loan.nominal_annual_rate, payments_per_year)
