#!/usr/bin/env python3
"""Main entry point for the loan accrual calculator"""

import sys

from loan_accrual.cli import main


if __name__ == "__main__":
    sys.exit(main())
