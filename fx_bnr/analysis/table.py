"""Searchable, sortable table rows with day-over-day change."""

from __future__ import annotations

from bisect import bisect_left
from collections import defaultdict
from datetime import date
from typing import Callable, Sequence

from fx_bnr.ingestion.models import RateRecord, TableRow
from fx_bnr.utils.formatting import format_value, percent_change

DEFAULT_LIMIT = 100
SORT_KEYS: tuple[str, ...] = ("date-desc", "date-asc", "value-desc", "value-asc")

_SORTERS: dict[str, tuple[Callable[[TableRow], object], bool]] = {
    "date-desc": (lambda row: row.rate_date, True),
    "date-asc": (lambda row: row.rate_date, False),
    "value-desc": (lambda row: row.value, True),
    "value-asc": (lambda row: row.value, False),
}


def matches_search(record: RateRecord, term: str) -> bool:
    """Case-insensitive match on currency, ISO date or the 4-decimal value."""

    needle = term.lower()
    return (
        needle in record.currency.lower()
        or needle in record.iso_date
        or needle in format_value(record.value)
    )


def _previous_lookup(records: Sequence[RateRecord]) -> Callable[[RateRecord], RateRecord | None]:
    by_currency: dict[str, list[RateRecord]] = defaultdict(list)
    for record in records:
        by_currency[record.currency].append(record)
    histories = {
        currency: sorted(items, key=lambda item: item.rate_date)
        for currency, items in by_currency.items()
    }
    dates: dict[str, list[date]] = {
        currency: [item.rate_date for item in items] for currency, items in histories.items()
    }

    def previous(record: RateRecord) -> RateRecord | None:
        days = dates[record.currency]
        index = bisect_left(days, record.rate_date)
        if index == 0:
            return None
        # first record (in input order) on the latest earlier day
        return histories[record.currency][bisect_left(days, days[index - 1])]

    return previous


def build_table(
    records: Sequence[RateRecord],
    *,
    search: str = "",
    sort_key: str | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[TableRow]:
    """Return at most ``limit`` rows for the table view.

    ``change_percent`` compares each row with the nearest earlier record of
    the same currency *among the rows that survived the search*, so a
    narrower search can change the figure shown for a row.
    """

    visible = [record for record in records if matches_search(record, search)]
    previous = _previous_lookup(visible)
    rows = []
    for record in visible:
        prior = previous(record)
        rows.append(
            TableRow(
                rate_date=record.rate_date,
                currency=record.currency,
                value=record.value,
                change_percent=percent_change(record.value, prior.value if prior else None),
            )
        )
    sorter = _SORTERS.get(sort_key or "")
    if sorter is not None:
        key, reverse = sorter
        rows.sort(key=key, reverse=reverse)
    return rows[:limit]


def toggle_sort(current: str | None, column: str) -> str | None:
    """Return the sort key after clicking the ``date`` or ``value`` column header."""

    if column == "date":
        return "date-asc" if current == "date-desc" else "date-desc"
    if column == "value":
        return "value-asc" if current == "value-desc" else "value-desc"
    return current


__all__ = ["DEFAULT_LIMIT", "SORT_KEYS", "build_table", "matches_search", "toggle_sort"]
