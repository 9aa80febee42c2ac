"""Data models shared across ingestion and analysis modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from fx_bnr.config import SUPPORTED_CURRENCIES
from fx_bnr.utils.date_range import DateRange, parse_date
from fx_bnr.utils.formatting import format_percent, format_value


@dataclass(frozen=True, slots=True)
class RateRecord:
    """A single BNR observation: RON per one unit of ``currency`` on ``rate_date``."""

    rate_date: date
    currency: str
    value: float

    @classmethod
    def from_iso(cls, rate_date: str, currency: str, value: float) -> "RateRecord":
        return cls(rate_date=parse_date(rate_date), currency=currency, value=value)

    @property
    def iso_date(self) -> str:
        return self.rate_date.isoformat()


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Currency selection plus an inclusive (optionally open) date window."""

    currencies: tuple[str, ...] = SUPPORTED_CURRENCIES
    date_range: DateRange = field(default_factory=DateRange)


@dataclass(frozen=True, slots=True)
class CurrencyStatistics:
    """Summary of one currency over a filtered window, at full precision."""

    currency: str
    latest_date: date
    latest_value: float
    latest_change_percent: float
    minimum: float
    maximum: float
    average: float
    count: int

    def as_display(self) -> dict[str, str]:
        """Return the rounded strings shown on a statistics card."""

        return {
            "currency": self.currency,
            "latest": format_value(self.latest_value),
            "change": format_percent(self.latest_change_percent),
            "min": format_value(self.minimum),
            "max": format_value(self.maximum),
            "average": format_value(self.average),
        }


@dataclass(frozen=True, slots=True)
class TableRow:
    rate_date: date
    currency: str
    value: float
    change_percent: float


@dataclass(frozen=True, slots=True)
class ComparisonPoint:
    rate_date: date
    percent_change: float


@dataclass(frozen=True, slots=True)
class ComparisonSeries:
    """Percent change of ``currency`` relative to its first value in a window."""

    currency: str
    baseline: float
    points: tuple[ComparisonPoint, ...]


@dataclass(frozen=True, slots=True)
class ChartSeries:
    """Payload handed to a chart renderer: ``{"x": iso date, "y": value}`` points."""

    currency: str
    label: str
    color: str
    points: tuple[dict[str, object], ...]


__all__ = [
    "ChartSeries",
    "ComparisonPoint",
    "ComparisonSeries",
    "CurrencyStatistics",
    "FilterCriteria",
    "RateRecord",
    "TableRow",
]
