"""Presentation rounding shared by the table, statistics and exporter."""

from __future__ import annotations

VALUE_DECIMALS = 4
PERCENT_DECIMALS = 2


def format_value(value: float) -> str:
    """Format an exchange rate with four decimals (``4.9753``)."""

    return f"{value:.{VALUE_DECIMALS}f}"


def format_percent(value: float) -> str:
    return f"{value:.{PERCENT_DECIMALS}f}"


def percent_change(current: float, previous: float | None) -> float:
    """Return the change from ``previous`` to ``current`` in percent.

    The result is rounded to two decimals. A missing or zero ``previous``
    yields ``0.0``.
    """

    if not previous:
        return 0.0
    return round((current - previous) / previous * 100, PERCENT_DECIMALS)
