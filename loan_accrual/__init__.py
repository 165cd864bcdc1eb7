"""
Loan Interest Accrual

Day-by-day simple-interest accrual schedules for fixed-term loans, with
currency-tagged Decimal amounts and banker's-rounded totals.
"""

__version__ = "1.0.0"
