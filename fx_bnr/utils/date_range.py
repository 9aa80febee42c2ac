"""Date helpers shared by the filter, comparison and synthetic modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator


@dataclass(frozen=True)
class DateRange:
    """Inclusive date window where either bound may be open."""

    start: date | None = None
    end: date | None = None

    def contains(self, day: date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True

    @property
    def is_open(self) -> bool:
        return self.start is None and self.end is None


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip(), "%Y-%m-%d").date()


def try_parse_date(value: str | None) -> date | None:
    """Like :func:`parse_date` but returns ``None`` for blank or invalid input."""

    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError:
        return None


def weekdays(start: date, end: date) -> Iterator[date]:
    """Yield every Monday–Friday between ``start`` and ``end`` inclusive."""

    current = start
    while current <= end:
        if current.weekday() < 5:
            yield current
        current += timedelta(days=1)


def one_month_before(day: date) -> date:
    """Return the same day one calendar month earlier, clamped to month end."""

    year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
    return date(year, month, min(day.day, _end_of_month(date(year, month, 1)).day))


def _end_of_month(day: date) -> date:
    """Return the last day of the month for ``day``."""

    if day.month == 12:
        return date(day.year, 12, 31)
    first_next_month = date(day.year, day.month + 1, 1)
    return first_next_month - timedelta(days=1)
