"""
Interest rate conversions.

Canadian mortgage rates are quoted as nominal annual percentages compounded
semi-annually. Payments, however, are made monthly, weekly, etc., so the quoted
rate has to be converted into the *equivalent* rate per payment period:

    r_semi   = nominal / 100 / 2
    r_annual = (1 + r_semi)**2 - 1
    r_period = (1 + r_annual)**(1/f) - 1 = (1 + r_semi)**(2/f) - 1

`nominal_annual_rate` arguments are percentages (4.59 means 4.59 %); the
generic `convert_compounding_basis` works on fractions (0.0459).
"""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from mortgage.config import HUNDRED, ONE, SEMI_ANNUAL_PERIODS, settings
from mortgage.decimal_math import fractional_power

logger = logging.getLogger(__name__)


def semi_annual_rate(nominal_annual_rate: Decimal) -> Decimal:
    """Rate applied each half-year."""
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        return Decimal(nominal_annual_rate) / HUNDRED / SEMI_ANNUAL_PERIODS


def effective_annual_rate(nominal_annual_rate: Decimal) -> Decimal:
    """Effective annual rate implied by semi-annual compounding."""
    r_semi = semi_annual_rate(nominal_annual_rate)
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        return (ONE + r_semi) ** SEMI_ANNUAL_PERIODS - ONE


def periodic_rate(nominal_annual_rate: Decimal, payments_per_year: int) -> Decimal:
    """Effective rate per payment period for `payments_per_year` payments a year."""
    if payments_per_year <= 0:
        raise ValueError("payments_per_year must be positive")
    r_semi = semi_annual_rate(nominal_annual_rate)
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        base = ONE + r_semi
    growth = fractional_power(base, SEMI_ANNUAL_PERIODS, payments_per_year)
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        rate = growth - ONE
    logger.debug(
        "periodic rate: nominal=%s%% f=%s -> %s", nominal_annual_rate, payments_per_year, rate
    )
    return rate


def convert_compounding_basis(
    rate: Decimal,
    compounding_frequency1: int,
    compounding_frequency2: int,
) -> Decimal:
    """
    Convert a nominal rate compounded `compounding_frequency1` times a year into
    the equivalent nominal rate compounded `compounding_frequency2` times a year:

        r2 = ((1 + r1/n1)**(n1/n2) - 1) * n2

    e.g. 6 % compounded semi-annually is 6.09 % compounded annually.
    """
    n1, n2 = compounding_frequency1, compounding_frequency2
    if n1 <= 0 or n2 <= 0:
        raise ValueError("compounding frequencies must be positive")
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        base = ONE + Decimal(rate) / n1
    growth = fractional_power(base, n1, n2)
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        return (growth - ONE) * n2
