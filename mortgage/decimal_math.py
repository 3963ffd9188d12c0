"""Decimal power utilities (Newton–Raphson n-th root)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext
from math import gcd

from mortgage.config import ONE, settings
from mortgage.errors import RootFindingError

logger = logging.getLogger(__name__)

# Radicands outside this band get a logarithmic seed.
SEED_LOWER = Decimal("0.5")
SEED_UPPER = Decimal("2")


@dataclass
class RootResult:
    root: Decimal
    iterations: int


def newton_nth_root(
    a: Decimal,
    n: int,
    *,
    precision: int | None = None,
    guard_digits: int | None = None,
    max_iter: int | None = None,
) -> RootResult:
    """Solve y**n = a for y > 0 with Newton–Raphson in decimal arithmetic.

    Parameters
    ----------
    a:
        Positive radicand.
    n:
        Positive integer degree.
    precision:
        Significant digits of the returned root (default: settings.decimal_precision).
    guard_digits:
        Extra digits carried while iterating (default: settings.root_guard_digits).
    max_iter:
        Iteration bound (default: settings.root_max_iterations).

    Near 1 the seed is 1 + (a - 1)/n, which is never below the root (Bernoulli's
    inequality), so the iteration decreases monotonically towards it. Outside
    [1/2, 2] that seed is too coarse for large n and exp(ln(a)/n) is used
    instead. Iteration stops once a step is within 10**-(working_precision - 2)
    relative to max(1, y).
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise ValueError("n must be a positive integer")
    a = Decimal(a)
    if not a.is_finite() or a <= 0:
        raise ValueError("a must be a positive finite decimal")

    prec = settings.decimal_precision if precision is None else precision
    guard = settings.root_guard_digits if guard_digits is None else guard_digits
    limit = settings.root_max_iterations if max_iter is None else max_iter

    if n == 1:
        with localcontext() as ctx:
            ctx.prec = prec
            return RootResult(+a, 0)

    with localcontext() as ctx:
        ctx.prec = prec + guard
        tol = Decimal(10) ** -(ctx.prec - 2)
        if SEED_LOWER <= a <= SEED_UPPER:
            y = ONE + (a - ONE) / n
        else:
            y = (a.ln() / n).exp()
        for iteration in range(1, limit + 1):
            y_new = ((n - 1) * y + a / y ** (n - 1)) / n
            step = abs(y_new - y)
            logger.debug("Newton iter %s: y=%s step=%s", iteration, y_new, step)
            y = y_new
            if step <= tol * max(ONE, y):
                break
        else:
            raise RootFindingError(
                f"n-th root of {a} (n={n}) did not converge in {limit} iterations"
            )

    with localcontext() as ctx:
        ctx.prec = prec
        root = +y
    return RootResult(root, iteration)


def nth_root(a: Decimal, n: int) -> Decimal:
    """Return the positive n-th root of a at the configured precision."""
    return newton_nth_root(a, n).root


def fractional_power(base: Decimal, numerator: int, denominator: int) -> Decimal:
    """
    Return base ** (numerator / denominator) for a positive base.

    The exponent is reduced first; a denominator of 1 is an exact integer power
    (up to the context precision), anything else goes through nth_root.
    """
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    divisor = gcd(numerator, denominator)
    numerator, denominator = numerator // divisor, denominator // divisor
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision + settings.root_guard_digits
        powered = Decimal(base) ** numerator
    if denominator == 1:
        with localcontext() as ctx:
            ctx.prec = settings.decimal_precision
            return +powered
    return nth_root(powered, denominator)
