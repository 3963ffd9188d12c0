"""
Payment engine: computes periodic payments for loan products.

Design intent:
- Loans/products are **validated data only** (no payment formulas).
- This engine uses a **registry of calculators** for dispatch, enabling:
  - Adding new loan conventions without modifying engine code
  - Swapping rate conventions per loan type
  - Third-party calculator plugins
"""

from __future__ import annotations

import logging
from decimal import Decimal

from mortgage.calculators import BaseCalculator
from mortgage.interfaces import Loan

logger = logging.getLogger(__name__)


class PaymentEngine:
    """
    Registry-based payment engine.

    Calculators are registered at initialization and dispatched based on
    can_calculate() checks. First matching calculator wins.
    """

    def __init__(self) -> None:
        self._calculators: list[BaseCalculator] = []

    def register(self, calculator: BaseCalculator) -> None:
        """Register a calculator for dispatch.

        Order matters: first matching calculator wins.
        """
        self._calculators.append(calculator)

    def calculator_for(self, loan: Loan) -> BaseCalculator:
        for calculator in self._calculators:
            if calculator.can_calculate(loan):
                logger.debug(
                    "dispatching %s to %s", type(loan).__name__, type(calculator).__name__
                )
                return calculator
        raise ValueError(
            f"No calculator registered for {type(loan).__name__}. "
            "Register a calculator with engine.register(calculator)."
        )

    def payment(self, loan: Loan) -> Decimal:
        """Dispatch to the matching calculator; result rounded to the cent."""
        return self.calculator_for(loan).payment(loan)

    def exact_payment(self, loan: Loan) -> Decimal:
        """Dispatch to the matching calculator; unrounded result."""
        return self.calculator_for(loan).exact_payment(loan)

    def number_of_payments(self, loan: Loan) -> int:
        """Dispatch to the matching calculator; payments that retire the loan."""
        return self.calculator_for(loan).number_of_payments(loan)


def create_default_engine() -> PaymentEngine:
    """Factory for default engine with all built-in calculators registered."""
    from mortgage.calculators import CanadianCalculator

    engine = PaymentEngine()
    engine.register(CanadianCalculator())
    return engine
