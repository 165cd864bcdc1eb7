"""
Loan Module

Immutable loan contract terms and the simple-interest rate calculators.
Daily rates use the Actual/365 day-count convention regardless of currency
or leap years.
"""

from decimal import Decimal
from datetime import date
from dataclasses import dataclass

from .currency import Money, CurrencyCode


DAYS_IN_YEAR = Decimal('365')
PERCENT = Decimal('100')


class InvalidDateRange(ValueError):
    """Raised when a loan's start date falls after its end date"""

    def __init__(self, start_date: date, end_date: date):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            f"Start date {start_date.isoformat()} is after end date {end_date.isoformat()}"
        )


@dataclass(frozen=True)
class Loan:
    """Fixed-term loan terms. Rates are percentages (5.25 means 5.25%)."""
    start_date: date
    end_date: date
    loan_amount: Decimal
    base_rate: Decimal
    margin: Decimal
    currency: CurrencyCode

    def __post_init__(self):
        for name in ('loan_amount', 'base_rate', 'margin'):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))

        if self.start_date > self.end_date:
            raise InvalidDateRange(self.start_date, self.end_date)

        if self.loan_amount <= Decimal('0'):
            raise ValueError(f"Loan amount must be positive, got {self.loan_amount}")

    @property
    def duration_days(self) -> int:
        """Days between start and end date (0 for a same-day loan)"""
        return (self.end_date - self.start_date).days

    def accrues_on(self, accrual_date: date) -> bool:
        return self.start_date <= accrual_date <= self.end_date

    def daily_interest_without_margin(self, accrual_date: date) -> Money:
        return daily_interest_without_margin(self, accrual_date)

    def daily_interest_with_margin(self, accrual_date: date) -> Money:
        return daily_interest_with_margin(self, accrual_date)


def _daily_interest(loan: Loan, annual_rate: Decimal, accrual_date: date) -> Money:
    if not loan.accrues_on(accrual_date):
        return Money.zero(loan.currency)

    daily_rate = annual_rate / DAYS_IN_YEAR / PERCENT
    return Money(loan.loan_amount * daily_rate, loan.currency)


def daily_interest_without_margin(loan: Loan, accrual_date: date) -> Money:
    """
    Interest accrued on a single day at the base rate.

    Dates outside the loan term accrue nothing. The result is not rounded.
    """
    return _daily_interest(loan, loan.base_rate, accrual_date)


def daily_interest_with_margin(loan: Loan, accrual_date: date) -> Money:
    """Interest accrued on a single day at base rate plus margin"""
    return _daily_interest(loan, loan.base_rate + loan.margin, accrual_date)
