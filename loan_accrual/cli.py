"""
Command-line entry point

Validates arguments, builds the loan and its accrual schedule, and prints
the report. All diagnostic logging lives here, not in the calculation
modules.
"""

import argparse
import sys
from decimal import InvalidOperation
from typing import List, Optional

from pydantic import ValidationError

from .config import get_config
from .currency import UnknownCurrency
from .loans import InvalidDateRange
from .logging_config import setup_logging, get_logger, log_action
from .reporting import ReportFormat, render_report
from .schedule import Schedule, ScheduleTooLong
from .schemas import LoanRequest


def build_parser() -> argparse.ArgumentParser:
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="loan-accrual",
        description="Daily simple-interest accrual schedule for a fixed-term loan"
    )
    parser.add_argument("--start-date", required=True, help="Start date (format: YYYY-MM-DD)")
    parser.add_argument("--end-date", required=True, help="End date (format: YYYY-MM-DD)")
    parser.add_argument("--loan-amount", required=True, help="Loan amount")
    parser.add_argument("--loan-currency", required=True, help="Loan currency (e.g. USD, EUR, GBP)")
    parser.add_argument("--base-interest-rate", required=True, help="Base interest rate, percent")
    parser.add_argument("--margin", required=True, help="Margin interest rate, percent")
    parser.add_argument(
        "--format",
        choices=[f.value for f in ReportFormat],
        default=config.default_report_format,
        help="Report output format"
    )
    parser.add_argument("--log-level", default=config.log_level, help="Diagnostic log level")
    return parser


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"])
        problems.append(f"{field}: {item['msg']} (got {item.get('input')!r})")
    return "; ".join(problems)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the calculator; returns the process exit status"""
    args = build_parser().parse_args(argv)
    config = get_config()

    try:
        setup_logging(args.log_level, log_format=config.log_format)
    except ValueError as e:
        print(f"Error invalid log level: {e}", file=sys.stderr)
        return 1
    logger = get_logger(__name__)

    try:
        request = LoanRequest(
            start_date=args.start_date,
            end_date=args.end_date,
            loan_amount=args.loan_amount,
            base_rate=args.base_interest_rate,
            margin=args.margin,
            currency=args.loan_currency,
        )
    except ValidationError as e:
        print(f"Error invalid input: {_describe_validation_error(e)}", file=sys.stderr)
        return 1

    try:
        loan = request.to_loan()
    except UnknownCurrency as e:
        print(f"Error invalid currency: {e.text}", file=sys.stderr)
        return 1
    except InvalidDateRange as e:
        print(f"Error invalid date range: {e}", file=sys.stderr)
        return 1

    log_action(
        logger, "info", "Calculating accrual schedule",
        action="calculate_schedule", resource="loan",
        extra={
            "start_date": loan.start_date.isoformat(),
            "end_date": loan.end_date.isoformat(),
            "loan_amount": str(loan.loan_amount),
            "base_rate": str(loan.base_rate),
            "margin": str(loan.margin),
            "currency": loan.currency.code,
            "duration_days": loan.duration_days,
        }
    )

    try:
        schedule = Schedule.build(loan, max_days=config.max_schedule_days)
    except ScheduleTooLong as e:
        print(f"Error loan term too long: {e}", file=sys.stderr)
        return 1

    try:
        total = schedule.total()
        if total is None:
            print("Error: schedule has no entries, no total interest", file=sys.stderr)
            return 1
        report = render_report(schedule, total, ReportFormat(args.format))
    except InvalidOperation:
        print("Error amount out of range: interest exceeds decimal precision", file=sys.stderr)
        return 1

    print(report)
    return 0
