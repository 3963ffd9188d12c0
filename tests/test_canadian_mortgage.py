"""Tests for CanadianMortgage payments."""

from dataclasses import FrozenInstanceError
from decimal import Decimal, localcontext

import pytest

from mortgage.frequency import PaymentFrequency
from mortgage.products.canadian import CanadianMortgage
from mortgage.config import settings
from mortgage.rates import convert_compounding_basis, periodic_rate


@pytest.mark.parametrize(
    "principal, rate, years, frequency, expected",
    [
        ("500000", "4.59", 25, PaymentFrequency.MONTHLY, "2792.44"),
        ("430000", "4.59", 25, PaymentFrequency.MONTHLY, "2401.50"),
        ("430000", "4.59", 25, PaymentFrequency.ACCELERATED_BI_WEEKLY, "1200.75"),
        ("430000", "4.59", 25, PaymentFrequency.ACCELERATED_WEEKLY, "600.37"),
        ("100000", "6", 25, PaymentFrequency.MONTHLY, "639.81"),
        ("100000", "5", 25, PaymentFrequency.MONTHLY, "581.60"),
    ],
)
def test_reference_payments(principal, rate, years, frequency, expected) -> None:
    """Payments match published Canadian reference figures to the cent."""
    mortgage = CanadianMortgage(Decimal(principal), Decimal(rate), years, frequency)
    assert mortgage.payment() == Decimal(expected)


def test_exact_payment_matches_reference_before_rounding() -> None:
    """430k @ 4.59% / 25y monthly, unrounded: 2401.49536529123381..."""
    mortgage = CanadianMortgage(Decimal("430000"), Decimal("4.59"), 25)
    reference = Decimal("2401.4953652912338141864897025")
    assert abs(mortgage.exact_payment() - reference) < Decimal("1e-6")


def test_payment_is_rounded_to_cents() -> None:
    """payment() has exactly two decimal places and equals the rounded exact payment."""
    mortgage = CanadianMortgage(Decimal("430000"), Decimal("4.59"), 25)
    assert mortgage.payment().as_tuple().exponent == -2
    assert mortgage.payment() == mortgage.exact_payment().quantize(Decimal("0.01"))


@pytest.mark.parametrize("frequency", list(PaymentFrequency))
def test_payment_positive_for_every_frequency(frequency: PaymentFrequency) -> None:
    """Every supported frequency yields a strictly positive payment."""
    mortgage = CanadianMortgage(Decimal("250000"), Decimal("5.25"), 30, frequency)
    assert mortgage.payment() > 0


@pytest.mark.parametrize(
    "frequency, expected",
    [
        (PaymentFrequency.MONTHLY, Decimal("1000.00")),
        (PaymentFrequency.SEMI_MONTHLY, Decimal("500.00")),
        (PaymentFrequency.WEEKLY, Decimal("230.77")),
    ],
)
def test_zero_rate_is_principal_over_payment_count(frequency, expected) -> None:
    """Interest-free loan: payment = principal / n."""
    mortgage = CanadianMortgage(Decimal("120000"), Decimal("0"), 10, frequency)
    assert mortgage.periodic_rate() == 0
    assert mortgage.payment() == expected
    exact = Decimal("120000") / mortgage.number_of_payments
    assert abs(mortgage.exact_payment() - exact) < Decimal("1e-20")


def test_zero_rate_total_paid_equals_principal_within_rounding() -> None:
    """With no interest, n payments repay the principal up to half a cent each."""
    mortgage = CanadianMortgage(Decimal("99999.99"), Decimal("0"), 7, PaymentFrequency.BI_WEEKLY)
    n = mortgage.number_of_payments
    total = mortgage.payment() * n
    assert abs(total - mortgage.principal) <= Decimal("0.005") * n


@pytest.mark.parametrize("frequency", list(PaymentFrequency))
def test_total_paid_exceeds_principal_with_interest(frequency) -> None:
    """payment * n > principal whenever the rate is positive."""
    mortgage = CanadianMortgage(Decimal("300000"), Decimal("0.5"), 20, frequency)
    assert mortgage.payment() * mortgage.number_of_payments > mortgage.principal


def test_payment_increases_with_rate() -> None:
    """Holding everything else fixed, a higher rate means a higher payment."""
    rates = ["0", "1", "2.5", "4.59", "7", "12.75", "25"]
    payments = [
        CanadianMortgage(Decimal("400000"), Decimal(r), 25).payment() for r in rates
    ]
    assert payments == sorted(payments)
    assert len(set(payments)) == len(payments)


def test_payment_decreases_with_amortization_years() -> None:
    """Holding everything else fixed, a longer amortization means a lower payment."""
    years = [1, 5, 10, 15, 20, 25, 30, 35, 40]
    payments = [
        CanadianMortgage(Decimal("400000"), Decimal("4.59"), y).payment() for y in years
    ]
    assert payments == sorted(payments, reverse=True)
    assert len(set(payments)) == len(payments)


def test_weekly_payments_cost_slightly_less_per_year_than_monthly() -> None:
    """
    Weekly * 52 is a little below monthly * 12: weekly payments arrive earlier in
    each period, so less interest accrues at the equivalent rate.
    """
    monthly = CanadianMortgage(Decimal("430000"), Decimal("4.59"), 25, PaymentFrequency.MONTHLY)
    weekly = CanadianMortgage(Decimal("430000"), Decimal("4.59"), 25, PaymentFrequency.WEEKLY)
    annual_monthly = monthly.payment() * 12
    annual_weekly = weekly.payment() * 52
    assert annual_weekly < annual_monthly
    assert (annual_monthly - annual_weekly) / annual_monthly < Decimal("0.01")


def test_accelerated_payments_split_the_monthly_payment() -> None:
    """Accelerated bi-weekly/weekly are the monthly payment halved/quartered."""
    args = (Decimal("350000"), Decimal("3.89"), 30)
    monthly = CanadianMortgage(*args, PaymentFrequency.MONTHLY).exact_payment()
    bi_weekly = CanadianMortgage(*args, PaymentFrequency.ACCELERATED_BI_WEEKLY).exact_payment()
    weekly = CanadianMortgage(*args, PaymentFrequency.ACCELERATED_WEEKLY).exact_payment()
    assert abs(bi_weekly - monthly / 2) < Decimal("1e-20")
    assert abs(weekly - monthly / 4) < Decimal("1e-20")


@pytest.mark.parametrize(
    "frequency, expected, count",
    [
        (PaymentFrequency.ACCELERATED_BI_WEEKLY, Decimal("500.00"), 240),
        (PaymentFrequency.ACCELERATED_WEEKLY, Decimal("250.00"), 480),
    ],
)
def test_zero_rate_accelerated_repays_principal_exactly(frequency, expected, count) -> None:
    """Interest-free accelerated schedules pay principal / n over a shortened term."""
    mortgage = CanadianMortgage(Decimal("120000"), Decimal("0"), 10, frequency)
    assert mortgage.payment() == expected
    assert mortgage.number_of_payments == count
    assert mortgage.payment() * mortgage.number_of_payments == mortgage.principal


@pytest.mark.parametrize(
    "frequency", [PaymentFrequency.ACCELERATED_BI_WEEKLY, PaymentFrequency.ACCELERATED_WEEKLY]
)
def test_zero_rate_accelerated_total_paid_within_rounding(frequency) -> None:
    """With no interest, accelerated payments repay the principal up to half a cent each."""
    mortgage = CanadianMortgage(Decimal("99999.99"), Decimal("0"), 7, frequency)
    n = mortgage.number_of_payments
    assert n == 7 * 12 * frequency.monthly_divisor
    assert abs(mortgage.payment() * n - mortgage.principal) <= Decimal("0.005") * n


@pytest.mark.parametrize(
    "frequency", [PaymentFrequency.ACCELERATED_BI_WEEKLY, PaymentFrequency.ACCELERATED_WEEKLY]
)
def test_accelerated_number_of_payments_is_payoff_count(frequency) -> None:
    """
    Accelerated schedules retire the loan early: n is the fewest payments whose
    present value at the periodic rate covers the principal.
    """
    mortgage = CanadianMortgage(Decimal("430000"), Decimal("4.59"), 25, frequency)
    n = mortgage.number_of_payments
    assert n < 25 * frequency.payments_per_year

    amount = mortgage.exact_payment()
    rate = periodic_rate(Decimal("4.59"), frequency.payments_per_year)
    with localcontext() as ctx:
        ctx.prec = settings.decimal_precision
        covered_before = amount * (1 - (1 + rate) ** -(n - 1)) / rate
        covered = amount * (1 - (1 + rate) ** -n) / rate
    assert covered_before < mortgage.principal <= covered


def test_accelerated_bi_weekly_pays_more_per_year_than_regular_bi_weekly() -> None:
    """Accelerated schedules add roughly one monthly payment per year."""
    args = (Decimal("350000"), Decimal("3.89"), 30)
    regular = CanadianMortgage(*args, PaymentFrequency.BI_WEEKLY).payment()
    accelerated = CanadianMortgage(*args, PaymentFrequency.ACCELERATED_BI_WEEKLY).payment()
    assert accelerated > regular


def test_monthly_periodic_rate_matches_compounding_basis_conversion() -> None:
    """Monthly periodic rate = semi-annual nominal converted to monthly compounding / 12."""
    mortgage = CanadianMortgage(Decimal("100000"), Decimal("6"), 25)
    converted = convert_compounding_basis(Decimal("0.06"), 2, 12) / 12
    assert abs(mortgage.periodic_rate() - converted) < Decimal("1e-25")


def test_payment_is_idempotent() -> None:
    """Repeated calls on the same instance return identical results."""
    mortgage = CanadianMortgage(Decimal("500000"), Decimal("4.59"), 25, PaymentFrequency.WEEKLY)
    first = mortgage.payment()
    assert all(mortgage.payment() == first for _ in range(5))
    assert str(mortgage.exact_payment()) == str(mortgage.exact_payment())


def test_tiny_payment_floors_at_one_cent() -> None:
    """A positive payment below half a cent is charged one cent, never zero."""
    weekly = CanadianMortgage(Decimal("1"), Decimal("0"), 40, PaymentFrequency.WEEKLY)
    assert weekly.exact_payment() < Decimal("0.005")
    assert weekly.payment() == Decimal("0.01")
    monthly = CanadianMortgage(Decimal("1"), Decimal("1"), 40)
    assert monthly.payment() == Decimal("0.01")


def test_number_of_payments() -> None:
    """Regular frequencies: n = amortization_years * payments_per_year."""
    assert CanadianMortgage(Decimal("1"), Decimal("1"), 25).number_of_payments == 300
    weekly = CanadianMortgage(Decimal("1"), Decimal("1"), 25, PaymentFrequency.WEEKLY)
    assert weekly.number_of_payments == 1300


def test_mortgage_is_immutable() -> None:
    """Fields cannot be reassigned after construction."""
    mortgage = CanadianMortgage(Decimal("500000"), Decimal("4.59"), 25)
    with pytest.raises(FrozenInstanceError):
        mortgage.principal = Decimal("1")  # type: ignore[misc]


def test_inputs_are_normalized() -> None:
    """Strings, ints and floats normalize to the same value object as Decimals."""
    canonical = CanadianMortgage(Decimal("500000"), Decimal("4.59"), 25, PaymentFrequency.MONTHLY)
    from_strings = CanadianMortgage("500000", "4.59", 25, "monthly")
    from_numbers = CanadianMortgage(500000, 4.59, 25, "Monthly")
    assert from_strings == canonical
    assert from_numbers == canonical
    assert hash(from_numbers) == hash(canonical)
    assert from_numbers.nominal_annual_rate == Decimal("4.59")
    assert isinstance(from_numbers.principal, Decimal)
    assert from_numbers.payment_frequency is PaymentFrequency.MONTHLY


def test_default_frequency_is_monthly() -> None:
    """payment_frequency defaults to MONTHLY."""
    mortgage = CanadianMortgage(Decimal("500000"), Decimal("4.59"), 25)
    assert mortgage.payment_frequency is PaymentFrequency.MONTHLY
