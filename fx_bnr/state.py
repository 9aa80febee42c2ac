"""Immutable dashboard state and the pure updates applied to it.

Every user action maps to a function ``(state, ...) -> state``; nothing is
mutated in place. :func:`render` derives everything a front end needs from a
state snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Iterable

from fx_bnr.analysis.charts import build_chart_series, comparison_chart_series
from fx_bnr.analysis.comparison import build_comparison, toggle_currency
from fx_bnr.analysis.filters import filter_records
from fx_bnr.analysis.statistics import compute_statistics
from fx_bnr.analysis.table import DEFAULT_LIMIT, build_table, toggle_sort
from fx_bnr.config import SUPPORTED_CURRENCIES
from fx_bnr.ingestion.acquisition import AcquisitionResult
from fx_bnr.ingestion.models import (
    ChartSeries,
    ComparisonSeries,
    CurrencyStatistics,
    FilterCriteria,
    RateRecord,
    TableRow,
)
from fx_bnr.utils.date_range import DateRange, one_month_before


@dataclass(frozen=True, slots=True)
class DashboardState:
    records: tuple[RateRecord, ...] = ()
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    comparison_currencies: tuple[str, ...] = SUPPORTED_CURRENCIES
    search: str = ""
    sort_key: str | None = None
    table_limit: int = DEFAULT_LIMIT
    synthetic: bool = False
    notice: str | None = None


@dataclass(frozen=True, slots=True)
class DashboardView:
    filtered: tuple[RateRecord, ...]
    statistics: list[CurrencyStatistics]
    table: list[TableRow]
    chart: list[ChartSeries]
    comparison: list[ComparisonSeries]
    comparison_chart: list[ChartSeries]


def default_state(today: date | None = None) -> DashboardState:
    """All currencies selected and the trailing month as date range."""

    end = today or date.today()
    return DashboardState(
        criteria=FilterCriteria(date_range=DateRange(start=one_month_before(end), end=end))
    )


def load_dataset(state: DashboardState, result: AcquisitionResult) -> DashboardState:
    return replace(
        state, records=result.records, synthetic=result.synthetic, notice=result.notice
    )


def _validated(currencies: Iterable[str]) -> tuple[str, ...]:
    selected = tuple(dict.fromkeys(currencies))
    unknown = [code for code in selected if code not in SUPPORTED_CURRENCIES]
    if unknown:
        raise ValueError(f"Unsupported currencies: {', '.join(unknown)}")
    return selected


def select_currencies(state: DashboardState, currencies: Iterable[str]) -> DashboardState:
    criteria = replace(state.criteria, currencies=_validated(currencies))
    return replace(state, criteria=criteria)


def set_date_range(
    state: DashboardState, start: date | None = None, end: date | None = None
) -> DashboardState:
    criteria = replace(state.criteria, date_range=DateRange(start=start, end=end))
    return replace(state, criteria=criteria)


def set_search(state: DashboardState, term: str) -> DashboardState:
    return replace(state, search=term)


def set_sort(state: DashboardState, sort_key: str | None) -> DashboardState:
    return replace(state, sort_key=sort_key)


def toggle_sort_column(state: DashboardState, column: str) -> DashboardState:
    return replace(state, sort_key=toggle_sort(state.sort_key, column))


def set_comparison_currencies(state: DashboardState, currencies: Iterable[str]) -> DashboardState:
    return replace(state, comparison_currencies=_validated(currencies))


def toggle_comparison(state: DashboardState, currency: str) -> DashboardState:
    _validated((currency,))
    return replace(
        state,
        comparison_currencies=toggle_currency(state.comparison_currencies, currency),
    )


def render(state: DashboardState) -> DashboardView:
    """Compute every derived view for ``state``."""

    filtered = filter_records(state.records, state.criteria)
    currencies = state.criteria.currencies
    comparison = build_comparison(
        state.records, state.comparison_currencies, state.criteria.date_range
    )
    return DashboardView(
        filtered=filtered,
        statistics=compute_statistics(filtered, currencies),
        table=build_table(
            filtered, search=state.search, sort_key=state.sort_key, limit=state.table_limit
        ),
        chart=build_chart_series(filtered, currencies),
        comparison=comparison,
        comparison_chart=comparison_chart_series(comparison),
    )


__all__ = [
    "DashboardState",
    "DashboardView",
    "default_state",
    "load_dataset",
    "render",
    "select_currencies",
    "set_date_range",
    "set_comparison_currencies",
    "set_search",
    "set_sort",
    "toggle_comparison",
    "toggle_sort_column",
]
