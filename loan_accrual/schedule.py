"""
Accrual Schedule Module

Builds the ordered, one-entry-per-day accrual schedule for a loan and
aggregates it into totals. Each entry's amounts are rounded with banker's
rounding BEFORE they are summed; summing first and rounding once gives
different cent totals and is not what is reported.
"""

from collections.abc import Sequence
from datetime import date, timedelta
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .config import get_config
from .currency import Money, CurrencyMismatch
from .loans import Loan


class EmptySchedule(ValueError):
    """Raised when a total is required from a schedule with no entries"""

    def __init__(self):
        super().__init__("Cannot total an empty schedule")


class ScheduleTooLong(ValueError):
    """Raised when a loan term has more days than the configured maximum"""

    def __init__(self, days: int, max_days: int):
        self.days = days
        self.max_days = max_days
        super().__init__(f"Loan term of {days} days exceeds maximum of {max_days} days")


@dataclass(frozen=True)
class Entry:
    """Single day in the accrual schedule"""
    accrual_date: date
    days_elapsed: int
    daily_interest_without_margin: Money
    daily_interest_with_margin: Money


@dataclass(frozen=True)
class TotalInterest:
    """Rounded interest totals for a schedule"""
    with_margin: Money
    without_margin: Money


class Schedule(Sequence):
    """
    Read-only ordered sequence of daily accrual entries.

    Entries are kept in strictly ascending date order, one per calendar day
    starting at days_elapsed 0, with no gaps or duplicates. The schedule can
    be traversed any number of times.
    """

    def __init__(self, loan: Loan, entries=()):
        self._loan = loan
        self._entries: Tuple[Entry, ...] = tuple(entries)
        self._validate_entries()

    def _validate_entries(self) -> None:
        currency = self._loan.currency
        for index, entry in enumerate(self._entries):
            expected_date = self._loan.start_date + timedelta(days=index)
            if entry.days_elapsed != index or entry.accrual_date != expected_date:
                raise ValueError(
                    f"Schedule entry {index} is out of order: expected day {index} "
                    f"({expected_date.isoformat()}), got day {entry.days_elapsed} "
                    f"({entry.accrual_date.isoformat()})"
                )
            if entry.accrual_date > self._loan.end_date:
                raise ValueError(
                    f"Schedule entry {index} ({entry.accrual_date.isoformat()}) is after "
                    f"loan end date {self._loan.end_date.isoformat()}"
                )
            for amount in (entry.daily_interest_without_margin, entry.daily_interest_with_margin):
                if amount.currency != currency:
                    raise CurrencyMismatch(currency, amount.currency)

    @classmethod
    def build(cls, loan: Loan, max_days: Optional[int] = None) -> 'Schedule':
        """
        Build the schedule for every day from start_date to end_date inclusive.

        A same-day loan yields exactly one entry.

        Raises:
            ScheduleTooLong: If the term exceeds max_days (configured default)
        """
        if max_days is None:
            max_days = get_config().max_schedule_days

        day_count = loan.duration_days + 1
        if day_count > max_days:
            raise ScheduleTooLong(day_count, max_days)

        entries: List[Entry] = []
        for days_elapsed in range(day_count):
            accrual_date = loan.start_date + timedelta(days=days_elapsed)
            entries.append(Entry(
                accrual_date=accrual_date,
                days_elapsed=days_elapsed,
                daily_interest_without_margin=loan.daily_interest_without_margin(accrual_date),
                daily_interest_with_margin=loan.daily_interest_with_margin(accrual_date),
            ))

        return cls(loan, entries)

    @property
    def loan(self) -> Loan:
        return self._loan

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Schedule(loan={self._loan!r}, entries={len(self._entries)})"

    def total(self) -> Optional[TotalInterest]:
        """
        Sum of the per-entry banker's-rounded amounts.

        Returns None for an empty schedule; a zero-interest loan still
        returns a zero total.
        """
        if not self._entries:
            return None

        currency = self._loan.currency
        with_margin = Money.zero(currency)
        without_margin = Money.zero(currency)
        for entry in self._entries:
            with_margin = with_margin + entry.daily_interest_with_margin.rounded()
            without_margin = without_margin + entry.daily_interest_without_margin.rounded()

        return TotalInterest(with_margin=with_margin, without_margin=without_margin)

    def require_total(self) -> TotalInterest:
        """Like total(), but raises EmptySchedule instead of returning None"""
        total = self.total()
        if total is None:
            raise EmptySchedule()
        return total

    def unrounded_total(self) -> Optional[TotalInterest]:
        """Full-precision sum of daily amounts, for diagnostics only"""
        if not self._entries:
            return None

        currency = self._loan.currency
        with_margin = Money.zero(currency)
        without_margin = Money.zero(currency)
        for entry in self._entries:
            with_margin = with_margin + entry.daily_interest_with_margin
            without_margin = without_margin + entry.daily_interest_without_margin

        return TotalInterest(with_margin=with_margin, without_margin=without_margin)
