"""
Reporting Module

Renders an accrual schedule and its total as a text table, CSV or JSON.
Amounts in entry rows are displayed with Money's two-decimal formatting;
the total row carries the banker's-rounded figures.
"""

from enum import Enum
from typing import Any, Dict, Iterator, List, Optional
import csv
import io
import json

from .schedule import Schedule, TotalInterest


class ReportFormat(Enum):
    """Output formats for reports"""
    TABLE = "table"
    CSV = "csv"
    JSON = "json"


HEADERS = [
    "Accrual Date",
    "Days Elapsed",
    "Interest Without Margin",
    "Interest With Margin",
    "Currency",
]


def schedule_rows(schedule: Schedule) -> Iterator[Dict[str, str]]:
    """Yield one display row per schedule entry, in schedule order"""
    currency = schedule.loan.currency.code
    for entry in schedule:
        yield {
            "Accrual Date": entry.accrual_date.isoformat(),
            "Days Elapsed": str(entry.days_elapsed),
            "Interest Without Margin": entry.daily_interest_without_margin.to_string(),
            "Interest With Margin": entry.daily_interest_with_margin.to_string(),
            "Currency": currency,
        }


def total_row(schedule: Schedule, total: Optional[TotalInterest]) -> Dict[str, str]:
    if total is None:
        row = {header: "" for header in HEADERS}
        row["Accrual Date"] = "Total"
        return row
    return {
        "Accrual Date": "Total",
        "Days Elapsed": "",
        "Interest Without Margin": total.without_margin.to_string(),
        "Interest With Margin": total.with_margin.to_string(),
        "Currency": schedule.loan.currency.code,
    }


def _render_table(rows: List[Dict[str, str]]) -> str:
    widths = [len(header) for header in HEADERS]
    for row in rows:
        for i, header in enumerate(HEADERS):
            widths[i] = max(widths[i], len(row[header]))

    separator = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    def format_line(values: List[str]) -> str:
        cells = [f" {value:<{width}} " for value, width in zip(values, widths)]
        return "|" + "|".join(cells) + "|"

    lines = [separator, format_line(HEADERS), separator]
    for row in rows[:-1]:
        lines.append(format_line([row[header] for header in HEADERS]))
    lines.append(separator)
    lines.append(format_line([rows[-1][header] for header in HEADERS]))
    lines.append(separator)
    return "\n".join(lines)


def _render_csv(rows: List[Dict[str, str]]) -> str:
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=HEADERS)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)

    csv_content = output.getvalue()
    output.close()
    return csv_content


def report_dict(schedule: Schedule, total: Optional[TotalInterest]) -> Dict[str, Any]:
    """Plain-data view of a schedule; amounts are full-precision strings"""
    loan = schedule.loan
    return {
        "loan": {
            "start_date": loan.start_date.isoformat(),
            "end_date": loan.end_date.isoformat(),
            "loan_amount": str(loan.loan_amount),
            "base_rate": str(loan.base_rate),
            "margin": str(loan.margin),
            "currency": loan.currency.code,
        },
        "entries": [
            {
                "accrual_date": entry.accrual_date.isoformat(),
                "days_elapsed": entry.days_elapsed,
                "daily_interest_without_margin": str(entry.daily_interest_without_margin.amount),
                "daily_interest_with_margin": str(entry.daily_interest_with_margin.amount),
            }
            for entry in schedule
        ],
        "total": None if total is None else {
            "without_margin": str(total.without_margin.amount),
            "with_margin": str(total.with_margin.amount),
        },
    }


def render_report(schedule: Schedule, total: Optional[TotalInterest],
                  format: ReportFormat = ReportFormat.TABLE) -> str:
    """
    Render a schedule followed by its total row.

    Raises:
        ValueError: If the format is not supported
    """
    if format == ReportFormat.JSON:
        return json.dumps(report_dict(schedule, total), indent=2)

    rows = list(schedule_rows(schedule))
    rows.append(total_row(schedule, total))

    if format == ReportFormat.TABLE:
        return _render_table(rows)
    elif format == ReportFormat.CSV:
        return _render_csv(rows)
    else:
        raise ValueError(f"Unsupported report format: {format}")
