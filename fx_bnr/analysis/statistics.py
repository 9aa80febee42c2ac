"""Per-currency summary statistics over a filtered dataset."""

from __future__ import annotations

from typing import Iterable, Sequence

from fx_bnr.ingestion.models import CurrencyStatistics, RateRecord
from fx_bnr.utils.formatting import percent_change


def currency_history(records: Iterable[RateRecord], currency: str) -> list[RateRecord]:
    """Return the records of ``currency`` ascending by date (stable)."""

    return sorted(
        (record for record in records if record.currency == currency),
        key=lambda record: record.rate_date,
    )


def summarise(history: Sequence[RateRecord]) -> CurrencyStatistics | None:
    if not history:
        return None
    values = [record.value for record in history]
    latest = history[-1]
    change = percent_change(latest.value, history[-2].value) if len(history) > 1 else 0.0
    return CurrencyStatistics(
        currency=latest.currency,
        latest_date=latest.rate_date,
        latest_value=latest.value,
        latest_change_percent=change,
        minimum=min(values),
        maximum=max(values),
        average=sum(values) / len(values),
        count=len(values),
    )


def compute_statistics(
    records: Sequence[RateRecord], currencies: Iterable[str]
) -> list[CurrencyStatistics]:
    """Summarise each currency in ``currencies`` order, omitting empty ones."""

    results: list[CurrencyStatistics] = []
    for currency in currencies:
        stats = summarise(currency_history(records, currency))
        if stats is not None:
            results.append(stats)
    return results


__all__ = ["compute_statistics", "currency_history", "summarise"]
