"""Baseline-relative comparison series across currencies."""

from __future__ import annotations

from typing import Iterable, Sequence

from fx_bnr.analysis.filters import within_range
from fx_bnr.analysis.statistics import currency_history
from fx_bnr.ingestion.models import ComparisonPoint, ComparisonSeries, RateRecord
from fx_bnr.utils.date_range import DateRange
from fx_bnr.utils.formatting import PERCENT_DECIMALS


def build_comparison(
    records: Sequence[RateRecord],
    currencies: Iterable[str],
    date_range: DateRange,
) -> list[ComparisonSeries]:
    """Express each currency as percent change from its first value in ``date_range``.

    ``records`` is the full dataset: only the date range applies here, not
    the main currency selection. Currencies without data are left out.
    """

    windowed = [record for record in records if within_range(record, date_range)]
    series: list[ComparisonSeries] = []
    for currency in currencies:
        history = currency_history(windowed, currency)
        if not history:
            continue
        baseline = history[0].value
        points = tuple(
            ComparisonPoint(
                rate_date=record.rate_date,
                percent_change=round((record.value - baseline) / baseline * 100, PERCENT_DECIMALS),
            )
            for record in history
        )
        series.append(ComparisonSeries(currency=currency, baseline=baseline, points=points))
    return series


def toggle_currency(selection: Sequence[str], currency: str) -> tuple[str, ...]:
    """Add ``currency`` to the comparison selection, or remove it if present."""

    if currency in selection:
        return tuple(code for code in selection if code != currency)
    return (*selection, currency)


__all__ = ["build_comparison", "toggle_currency"]
