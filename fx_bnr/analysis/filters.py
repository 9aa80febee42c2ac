"""Currency and date-range filtering."""

from __future__ import annotations

from typing import Iterable

from fx_bnr.ingestion.models import FilterCriteria, RateRecord
from fx_bnr.utils.date_range import DateRange


def within_range(record: RateRecord, date_range: DateRange) -> bool:
    return date_range.contains(record.rate_date)


def filter_records(
    records: Iterable[RateRecord], criteria: FilterCriteria
) -> tuple[RateRecord, ...]:
    """Keep records whose currency is selected and whose date is in range.

    Input order is preserved. A range with ``start > end`` matches nothing.
    """

    selected = set(criteria.currencies)
    return tuple(
        record
        for record in records
        if record.currency in selected and within_range(record, criteria.date_range)
    )


__all__ = ["filter_records", "within_range"]
