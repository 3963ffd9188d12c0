"""Base calculator abstract class for payment implementations."""

from __future__ import annotations

import decimal
import logging
from abc import ABC, abstractmethod
from decimal import ROUND_CEILING, Decimal, localcontext

from mortgage.annuity import annuity_payment, round_to_cent
from mortgage.config import CENT, ONE, settings
from mortgage.errors import NonConvergence, Overflow, RootFindingError
from mortgage.frequency import PaymentFrequency
from mortgage.interfaces import Loan

logger = logging.getLogger(__name__)


class BaseCalculator(ABC):
    """Abstract base class for payment calculators.

    Subclasses implement can_calculate() and periodic_rate() for a loan type;
    the annuity formula, accelerated schedules and rounding are shared here.
    """

    @abstractmethod
    def can_calculate(self, loan: Loan) -> bool:
        """Return True if this calculator handles the loan type."""
        ...

    @abstractmethod
    def periodic_rate(self, loan: Loan, payments_per_year: int) -> Decimal:
        """Interest rate per period for the given number of payments a year."""
        ...

    def exact_payment(self, loan: Loan) -> Decimal:
        """
        Unrounded periodic payment.

        Accelerated frequencies pay the monthly payment divided by 2 (bi-weekly)
        or 4 (weekly); every other frequency amortizes the loan over
        amortization_years * payments_per_year payments at its own periodic rate.
        """
        frequency = loan.payment_frequency
        if frequency.is_accelerated:
            monthly = self._level_payment(loan, PaymentFrequency.MONTHLY.payments_per_year)
            with localcontext() as ctx:
                ctx.prec = settings.decimal_precision
                result = monthly / frequency.monthly_divisor
        else:
            result = self._level_payment(loan, frequency.payments_per_year)
        logger.debug("%s payment for %r: %s", type(self).__name__, loan, result)
        return result

    def payment(self, loan: Loan) -> Decimal:
        """
        Periodic payment rounded half-up to the cent.

        A positive payment below half a cent is charged one cent rather than
        rounding to zero.
        """
        exact = self.exact_payment(loan)
        rounded = round_to_cent(exact)
        if rounded == 0 and exact > 0:
            return CENT
        return rounded

    def number_of_payments(self, loan: Loan) -> int:
        """
        Payments needed to retire the loan.

        Regular frequencies pay amortization_years * payments_per_year times.
        Accelerated schedules pay more per year, so the count is the smallest n
        whose n payments at the accelerated frequency's periodic rate cover the
        principal: n = ceil(-ln(1 - r*p/a) / ln(1 + r)), or ceil(p / a) at r == 0.
        """
        frequency = loan.payment_frequency
        if not frequency.is_accelerated:
            return loan.amortization_years * frequency.payments_per_year
        amount = self.exact_payment(loan)
        rate = self._rate(loan, frequency.payments_per_year)
        with localcontext() as ctx:
            ctx.prec = settings.decimal_precision
            if rate == 0:
                periods = loan.principal / amount
            else:
                periods = -(ONE - rate * loan.principal / amount).ln() / (ONE + rate).ln()
            # Absorbs rounding noise when the exact count is an integer.
            slack = Decimal(10) ** -(ctx.prec // 2)
            count = int((periods - slack).to_integral_value(rounding=ROUND_CEILING))
        logger.debug("%s payments retire %r", count, loan)
        return count

    def _rate(self, loan: Loan, payments_per_year: int) -> Decimal:
        try:
            return self.periodic_rate(loan, payments_per_year)
        except RootFindingError as exc:
            raise NonConvergence(str(exc)) from exc
        except (decimal.Overflow, decimal.InvalidOperation) as exc:
            raise Overflow(f"periodic rate not representable for {loan!r}") from exc

    def _level_payment(self, loan: Loan, payments_per_year: int) -> Decimal:
        periods = loan.amortization_years * payments_per_year
        rate = self._rate(loan, payments_per_year)
        return annuity_payment(loan.principal, rate, periods)
