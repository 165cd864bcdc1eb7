#!/usr/bin/env python3
"""
Loan Accrual Calculator Entry Point

Example:
    python run.py --start-date 2023-01-01 --end-date 2023-12-31 \
        --loan-amount 1000.00 --loan-currency GBP --base-interest-rate 5.0 --margin 1.5
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from loan_accrual.cli import main


if __name__ == "__main__":
    sys.exit(main())
