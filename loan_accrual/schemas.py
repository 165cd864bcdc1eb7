"""
Pydantic schemas for loan accrual requests
"""

from decimal import Decimal
from datetime import date
from pydantic import BaseModel, Field

from .currency import CurrencyCode
from .loans import Loan


MAX_LOAN_AMOUNT = Decimal("1e15")
MAX_RATE = Decimal("1000")


class LoanRequest(BaseModel):
    start_date: date = Field(..., description="Start date (YYYY-MM-DD)")
    end_date: date = Field(..., description="End date (YYYY-MM-DD)")
    loan_amount: Decimal = Field(..., gt=0, lt=MAX_LOAN_AMOUNT, description="Loan principal")
    base_rate: Decimal = Field(..., ge=-MAX_RATE, le=MAX_RATE, description="Annual base rate as a percentage (5.25 = 5.25%)")
    margin: Decimal = Field(..., ge=-MAX_RATE, le=MAX_RATE, description="Annual margin as a percentage")
    currency: str = Field(..., pattern=r"^[A-Z]{3,5}$", description="Currency code (USD, EUR, GBP)")

    def to_loan(self) -> Loan:
        """
        Build the domain loan.

        Raises:
            UnknownCurrency: If the currency code is not supported
            InvalidDateRange: If start_date is after end_date
        """
        return Loan(
            start_date=self.start_date,
            end_date=self.end_date,
            loan_amount=self.loan_amount,
            base_rate=self.base_rate,
            margin=self.margin,
            currency=CurrencyCode.parse(self.currency)
        )
