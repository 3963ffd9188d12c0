"""Mortgage library: Canadian payment calculation, rate conversion, and payment engine."""

from mortgage.annuity import annuity_payment, round_to_cent
from mortgage.calculators import BaseCalculator, CanadianCalculator
from mortgage.engine import PaymentEngine, create_default_engine
from mortgage.errors import (
    CalculationError,
    ExcessiveRate,
    ExcessiveTerm,
    InvalidTerm,
    MortgageError,
    NegativeRate,
    NonConvergence,
    NonPositivePrincipal,
    NonPositiveTerm,
    Overflow,
    RootFindingError,
    UnsupportedFrequency,
    ValidationError,
)
from mortgage.frequency import PaymentFrequency
from mortgage.interfaces import Loan, PaymentCalculator
from mortgage.payments import Mortgage, exact_payment, number_of_payments, payment
from mortgage.products.canadian import CanadianMortgage
from mortgage.rates import (
    convert_compounding_basis,
    effective_annual_rate,
    periodic_rate,
    semi_annual_rate,
)

__all__ = [
    "Loan",
    "PaymentCalculator",
    "PaymentFrequency",
    "CanadianMortgage",
    "Mortgage",
    "BaseCalculator",
    "CanadianCalculator",
    "PaymentEngine",
    "create_default_engine",
    "payment",
    "exact_payment",
    "number_of_payments",
    "annuity_payment",
    "round_to_cent",
    "semi_annual_rate",
    "effective_annual_rate",
    "periodic_rate",
    "convert_compounding_basis",
    "MortgageError",
    "ValidationError",
    "NonPositivePrincipal",
    "NegativeRate",
    "ExcessiveRate",
    "NonPositiveTerm",
    "ExcessiveTerm",
    "UnsupportedFrequency",
    "CalculationError",
    "Overflow",
    "InvalidTerm",
    "NonConvergence",
    "RootFindingError",
]
