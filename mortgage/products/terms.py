"""Normalization and validation of the loan inputs shared by every mortgage product."""

from __future__ import annotations

import decimal
import logging
from decimal import Decimal
from typing import Any, NamedTuple

from mortgage.config import ZERO, settings
from mortgage.errors import (
    ExcessiveRate,
    ExcessiveTerm,
    NegativeRate,
    NonPositivePrincipal,
    NonPositiveTerm,
    ValidationError,
)
from mortgage.frequency import PaymentFrequency

logger = logging.getLogger(__name__)


class LoanTerms(NamedTuple):
    principal: Decimal
    nominal_annual_rate: Decimal
    amortization_years: int
    payment_frequency: PaymentFrequency


def to_decimal(value: Any, field: str) -> Decimal:
    """
    Convert caller input to an exact Decimal.

    Floats go through their shortest repr, so 4.59 becomes Decimal("4.59")
    rather than the nearest binary fraction.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except decimal.InvalidOperation as exc:
            raise ValidationError(f"{field} is not a number: {value!r}") from exc
    else:
        raise ValidationError(f"{field} must be a number, got {type(value).__name__}")
    if not result.is_finite():
        raise ValidationError(f"{field} must be finite, got {value!r}")
    return result


def normalize_terms(
    principal: Any,
    nominal_annual_rate: Any,
    amortization_years: Any,
    payment_frequency: Any,
) -> LoanTerms:
    """Validate raw loan inputs and return them in canonical types.

    Raises
    ------
    NonPositivePrincipal, NegativeRate, ExcessiveRate, NonPositiveTerm,
    ExcessiveTerm, UnsupportedFrequency, ValidationError
    """
    principal = to_decimal(principal, "principal")
    if principal <= ZERO:
        raise NonPositivePrincipal(f"principal must be > 0, got {principal}")

    rate = to_decimal(nominal_annual_rate, "nominal_annual_rate")
    if rate < ZERO:
        raise NegativeRate(f"nominal_annual_rate must be >= 0, got {rate}")
    if rate > settings.max_nominal_rate:
        raise ExcessiveRate(
            f"nominal_annual_rate must be <= {settings.max_nominal_rate}, got {rate}"
        )

    if isinstance(amortization_years, bool) or not isinstance(amortization_years, int):
        raise ValidationError(
            f"amortization_years must be an integer, got {amortization_years!r}"
        )
    if amortization_years <= 0:
        raise NonPositiveTerm(f"amortization_years must be > 0, got {amortization_years}")
    if amortization_years > settings.max_amortization_years:
        raise ExcessiveTerm(
            f"amortization_years must be <= {settings.max_amortization_years}, "
            f"got {amortization_years}"
        )

    frequency = PaymentFrequency.parse(payment_frequency)

    terms = LoanTerms(principal, rate, amortization_years, frequency)
    logger.debug("normalized loan terms: %s", terms)
    return terms
