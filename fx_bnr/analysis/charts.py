"""Chart payloads and the currency colour mapping."""

from __future__ import annotations

import zlib
from typing import Iterable, Sequence

from fx_bnr.analysis.statistics import currency_history
from fx_bnr.ingestion.models import ChartSeries, ComparisonSeries, RateRecord

CURRENCY_COLORS: dict[str, str] = {
    "EUR": "#2563eb",
    "USD": "#22c55e",
    "GBP": "#f59e0b",
}
FALLBACK_PALETTE: tuple[str, ...] = (
    "#ef4444",
    "#8b5cf6",
    "#ec4899",
    "#14b8a6",
    "#f97316",
    "#6366f1",
    "#84cc16",
    "#06b6d4",
)


def currency_color(currency: str) -> str:
    """Return a stable colour for ``currency``.

    Known currencies have fixed colours; anything else is hashed with CRC-32
    into :data:`FALLBACK_PALETTE`, so the result never depends on the process.
    """

    if currency in CURRENCY_COLORS:
        return CURRENCY_COLORS[currency]
    digest = zlib.crc32(currency.upper().encode("utf-8"))
    return FALLBACK_PALETTE[digest % len(FALLBACK_PALETTE)]


def build_chart_series(
    records: Sequence[RateRecord], currencies: Iterable[str]
) -> list[ChartSeries]:
    """One line per selected currency, even when it has no points."""

    return [
        ChartSeries(
            currency=currency,
            label=currency,
            color=currency_color(currency),
            points=tuple(
                {"x": record.iso_date, "y": record.value}
                for record in currency_history(records, currency)
            ),
        )
        for currency in currencies
    ]


def comparison_chart_series(series: Iterable[ComparisonSeries]) -> list[ChartSeries]:
    return [
        ChartSeries(
            currency=item.currency,
            label=f"{item.currency} (%)",
            color=currency_color(item.currency),
            points=tuple(
                {"x": point.rate_date.isoformat(), "y": point.percent_change}
                for point in item.points
            ),
        )
        for item in series
    ]


__all__ = [
    "CURRENCY_COLORS",
    "FALLBACK_PALETTE",
    "build_chart_series",
    "comparison_chart_series",
    "currency_color",
]
