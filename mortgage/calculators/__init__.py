"""Calculator implementations for the registry-based payment engine."""

from mortgage.calculators.base import BaseCalculator
from mortgage.calculators.canadian_calculator import CanadianCalculator

__all__ = [
    "BaseCalculator",
    "CanadianCalculator",
]
