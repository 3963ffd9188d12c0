"""
Library settings and numeric constants.

Settings are read once at import time from the process environment, falling
back to a `.env` file found from the working directory. The `.env` values are
never written into os.environ. Every tunable that changes numeric results
lives here so the computation stays reproducible across callers:

- `decimal_precision`: significant digits of the local decimal context used for
  all rate and payment arithmetic.
- `root_guard_digits` / `root_max_iterations`: extra working digits and the
  iteration bound of the Newton n-th root.
- `max_amortization_years` / `max_nominal_rate`: upper bounds enforced when a
  loan is constructed.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from dotenv import dotenv_values, find_dotenv

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")

# Canadian mortgages compound twice a year whatever the payment schedule.
SEMI_ANNUAL_PERIODS = 2

ROUNDING = ROUND_HALF_UP

# Cent-exact payments need at least the default decimal context's digits.
MIN_DECIMAL_PRECISION = 28


@dataclass(frozen=True)
class Settings:
    decimal_precision: int = 40
    root_guard_digits: int = 10
    root_max_iterations: int = 50
    max_amortization_years: int = 40
    max_nominal_rate: Decimal = HUNDRED

    def __post_init__(self) -> None:
        if self.decimal_precision < MIN_DECIMAL_PRECISION:
            raise ValueError(
                f"decimal_precision must be >= {MIN_DECIMAL_PRECISION}, "
                f"got {self.decimal_precision}"
            )
        if self.root_guard_digits < 0:
            raise ValueError(f"root_guard_digits must be >= 0, got {self.root_guard_digits}")
        if self.root_max_iterations < 1:
            raise ValueError(
                f"root_max_iterations must be >= 1, got {self.root_max_iterations}"
            )
        if self.max_amortization_years < 1:
            raise ValueError(
                f"max_amortization_years must be >= 1, got {self.max_amortization_years}"
            )
        if not self.max_nominal_rate >= 0:
            raise ValueError(f"max_nominal_rate must be >= 0, got {self.max_nominal_rate}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from MORTGAGE_* variables, falling back to defaults.

        Without an explicit mapping, os.environ is consulted first and a `.env`
        file second.
        """
        if environ is None:
            path = find_dotenv(usecwd=True)
            file_values = dotenv_values(path) if path else {}
            env = {key: value for key, value in file_values.items() if value is not None}
            env.update(os.environ)
        else:
            env = environ
        defaults = cls()
        return cls(
            decimal_precision=int(
                env.get("MORTGAGE_DECIMAL_PRECISION", defaults.decimal_precision)
            ),
            root_guard_digits=int(
                env.get("MORTGAGE_ROOT_GUARD_DIGITS", defaults.root_guard_digits)
            ),
            root_max_iterations=int(
                env.get("MORTGAGE_ROOT_MAX_ITERATIONS", defaults.root_max_iterations)
            ),
            max_amortization_years=int(
                env.get(
                    "MORTGAGE_MAX_AMORTIZATION_YEARS", defaults.max_amortization_years
                )
            ),
            max_nominal_rate=Decimal(
                str(env.get("MORTGAGE_MAX_NOMINAL_RATE", defaults.max_nominal_rate))
            ),
        )


settings = Settings.from_env()
