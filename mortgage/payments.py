"""
Payment entrypoint.

Most users of the library should only need `payment(loan)`, or
`loan.payment()` which calls it. It delegates to a default `PaymentEngine`
instance holding the built-in calculators.

Advanced users can instantiate and configure their own engines.
"""

from decimal import Decimal
from typing import TypeAlias

from mortgage.engine import create_default_engine
from mortgage.products.canadian import CanadianMortgage


Mortgage: TypeAlias = CanadianMortgage

_default_engine = create_default_engine()


def payment(loan: Mortgage) -> Decimal:
    """Return the periodic payment of loan, rounded to the cent."""
    return _default_engine.payment(loan)


def exact_payment(loan: Mortgage) -> Decimal:
    """Return the periodic payment of loan at full decimal precision."""
    return _default_engine.exact_payment(loan)


def number_of_payments(loan: Mortgage) -> int:
    """Return how many payments retire loan."""
    return _default_engine.number_of_payments(loan)
