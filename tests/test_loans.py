"""
Test suite for loan module

Tests loan term validation and the Actual/365 daily interest calculators.
"""

import pytest
from decimal import Decimal
from datetime import date

from loan_accrual.currency import Money, CurrencyCode
from loan_accrual.loans import (
    Loan, InvalidDateRange, DAYS_IN_YEAR,
    daily_interest_without_margin, daily_interest_with_margin
)


def make_loan(**overrides) -> Loan:
    terms = dict(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        loan_amount=Decimal('100000'),
        base_rate=Decimal('5'),
        margin=Decimal('1'),
        currency=CurrencyCode.USD,
    )
    terms.update(overrides)
    return Loan(**terms)


class TestLoan:
    """Test loan construction and invariants"""

    def test_valid_loan(self):
        loan = make_loan()
        assert loan.start_date == date(2024, 1, 1)
        assert loan.end_date == date(2024, 1, 31)
        assert loan.loan_amount == Decimal('100000')
        assert loan.currency == CurrencyCode.USD
        assert loan.duration_days == 30

    def test_same_day_loan(self):
        loan = make_loan(end_date=date(2024, 1, 1))
        assert loan.duration_days == 0

    def test_start_after_end_rejected(self):
        with pytest.raises(InvalidDateRange) as exc_info:
            make_loan(start_date=date(2024, 2, 1), end_date=date(2024, 1, 31))

        assert exc_info.value.start_date == date(2024, 2, 1)
        assert exc_info.value.end_date == date(2024, 1, 31)
        assert "2024-02-01" in str(exc_info.value)

    def test_non_positive_amount_rejected(self):
        with pytest.raises(ValueError, match="must be positive"):
            make_loan(loan_amount=Decimal('0'))
        with pytest.raises(ValueError, match="must be positive"):
            make_loan(loan_amount=Decimal('-1000'))

    def test_numeric_terms_coerced_to_decimal(self):
        loan = make_loan(loan_amount='1000.00', base_rate=5.25, margin=1)
        assert loan.loan_amount == Decimal('1000.00')
        assert loan.base_rate == Decimal('5.25')
        assert isinstance(loan.margin, Decimal)

    def test_loan_is_immutable(self):
        loan = make_loan()
        with pytest.raises(AttributeError):
            loan.margin = Decimal('2')


class TestDailyInterest:
    """Test daily interest with and without margin"""

    def test_day_count_is_actual_365(self):
        assert DAYS_IN_YEAR == Decimal('365')

    def test_without_margin(self):
        loan = make_loan()
        interest = daily_interest_without_margin(loan, date(2024, 1, 1))

        expected = Decimal('100000') * (Decimal('5') / Decimal('365') / Decimal('100'))
        assert interest == Money(expected, CurrencyCode.USD)
        assert interest.amount.quantize(Decimal('0.000001')) == Decimal('13.698630')

    def test_with_margin(self):
        loan = make_loan()
        interest = daily_interest_with_margin(loan, date(2024, 1, 1))

        expected = Decimal('100000') * (Decimal('6') / Decimal('365') / Decimal('100'))
        assert interest == Money(expected, CurrencyCode.USD)
        assert interest.amount.quantize(Decimal('0.000001')) == Decimal('16.438356')

    def test_no_rounding_at_calculation(self):
        interest = daily_interest_without_margin(make_loan(), date(2024, 1, 15))
        assert interest.amount.as_tuple().exponent < -2

    def test_result_uses_loan_currency(self):
        loan = make_loan(currency=CurrencyCode.GBP)
        assert daily_interest_with_margin(loan, date(2024, 1, 2)).currency == CurrencyCode.GBP

    def test_same_amount_every_day_including_leap_day(self):
        """Actual/365 does not vary with leap years"""
        loan = make_loan(start_date=date(2024, 2, 27), end_date=date(2024, 3, 2))
        amounts = {
            daily_interest_without_margin(loan, day).amount
            for day in (date(2024, 2, 27), date(2024, 2, 29), date(2024, 3, 2))
        }
        assert len(amounts) == 1

    @pytest.mark.parametrize("outside", [date(2023, 12, 31), date(2024, 2, 1), date(1999, 1, 1)])
    def test_dates_outside_term_accrue_nothing(self, outside):
        loan = make_loan()
        assert daily_interest_without_margin(loan, outside) == Money.zero(CurrencyCode.USD)
        assert daily_interest_with_margin(loan, outside).is_zero()

    def test_term_boundaries_accrue(self):
        loan = make_loan()
        assert not daily_interest_without_margin(loan, loan.start_date).is_zero()
        assert not daily_interest_without_margin(loan, loan.end_date).is_zero()

    def test_loan_methods_match_functions(self):
        loan = make_loan()
        day = date(2024, 1, 10)
        assert loan.daily_interest_without_margin(day) == daily_interest_without_margin(loan, day)
        assert loan.daily_interest_with_margin(day) == daily_interest_with_margin(loan, day)

    def test_zero_margin_equals_base(self):
        loan = make_loan(margin=Decimal('0'))
        day = date(2024, 1, 5)
        assert daily_interest_with_margin(loan, day) == daily_interest_without_margin(loan, day)
