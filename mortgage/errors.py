"""
Error taxonomy.

- `ValidationError` (a `ValueError`): a loan could not be constructed from the
  given inputs. Raised by constructors only.
- `CalculationError` (an `ArithmeticError`): a valid loan hit a numeric edge
  case while its payment was computed.

Nothing here is recovered internally; callers decide how to present failures.
"""

from __future__ import annotations


class MortgageError(Exception):
    """Base class for all errors raised by the mortgage library."""


class ValidationError(MortgageError, ValueError):
    """Invalid loan inputs."""


class NonPositivePrincipal(ValidationError):
    pass


class NegativeRate(ValidationError):
    pass


class ExcessiveRate(ValidationError):
    pass


class NonPositiveTerm(ValidationError):
    pass


class ExcessiveTerm(ValidationError):
    pass


class UnsupportedFrequency(ValidationError):
    pass


class CalculationError(MortgageError, ArithmeticError):
    """Numeric failure while computing a payment."""


class Overflow(CalculationError):
    pass


class InvalidTerm(CalculationError):
    pass


class NonConvergence(CalculationError):
    pass


class RootFindingError(RuntimeError):
    """Raised when the Newton n-th root fails to converge."""
