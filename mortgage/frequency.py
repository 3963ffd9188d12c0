"""
Payment frequencies and their fixed payments-per-year mapping.

| Frequency              | payments/year | payment                         |
|------------------------|---------------|---------------------------------|
| MONTHLY                | 12            | annuity at the converted rate   |
| SEMI_MONTHLY           | 24            | annuity at the converted rate   |
| BI_WEEKLY              | 26            | annuity at the converted rate   |
| WEEKLY                 | 52            | annuity at the converted rate   |
| ACCELERATED_BI_WEEKLY  | 26            | monthly payment / 2             |
| ACCELERATED_WEEKLY     | 52            | monthly payment / 4             |

Accelerated schedules pay half (a quarter) of the monthly payment 26 (52) times
a year, i.e. one extra monthly payment per year, so the loan is retired before
the end of the amortization period.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from mortgage.errors import UnsupportedFrequency


class PaymentFrequency(Enum):
    """Payment frequencies."""

    MONTHLY = "MONTHLY"
    SEMI_MONTHLY = "SEMI_MONTHLY"
    BI_WEEKLY = "BI_WEEKLY"
    WEEKLY = "WEEKLY"
    ACCELERATED_BI_WEEKLY = "ACCELERATED_BI_WEEKLY"
    ACCELERATED_WEEKLY = "ACCELERATED_WEEKLY"

    @property
    def payments_per_year(self) -> int:
        return _PAYMENTS_PER_YEAR[self]

    @property
    def is_accelerated(self) -> bool:
        return self in _MONTHLY_DIVISOR

    @property
    def monthly_divisor(self) -> Decimal:
        """Divisor applied to the monthly payment for accelerated schedules."""
        try:
            return _MONTHLY_DIVISOR[self]
        except KeyError:
            raise ValueError(f"{self.name} is not an accelerated frequency") from None

    @classmethod
    def parse(cls, value: "PaymentFrequency | str") -> "PaymentFrequency":
        """
        Resolve a frequency from an enum member or a name such as
        "monthly", "Bi-Weekly" or "accelerated weekly".
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = "".join(ch for ch in value.upper() if ch.isalnum())
            for member in cls:
                if member.value.replace("_", "") == key:
                    return member
        raise UnsupportedFrequency(f"unsupported payment frequency: {value!r}")


_PAYMENTS_PER_YEAR: dict[PaymentFrequency, int] = {
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.SEMI_MONTHLY: 24,
    PaymentFrequency.BI_WEEKLY: 26,
    PaymentFrequency.WEEKLY: 52,
    PaymentFrequency.ACCELERATED_BI_WEEKLY: 26,
    PaymentFrequency.ACCELERATED_WEEKLY: 52,
}

_MONTHLY_DIVISOR: dict[PaymentFrequency, Decimal] = {
    PaymentFrequency.ACCELERATED_BI_WEEKLY: Decimal("2"),
    PaymentFrequency.ACCELERATED_WEEKLY: Decimal("4"),
}
