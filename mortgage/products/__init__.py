"""Products: Canadian mortgages."""

from mortgage.products.canadian import CanadianMortgage

__all__ = ["CanadianMortgage"]
