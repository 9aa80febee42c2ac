"""Pure transformations over a BNR dataset."""

from __future__ import annotations

from fx_bnr.analysis.charts import build_chart_series, comparison_chart_series, currency_color
from fx_bnr.analysis.comparison import build_comparison, toggle_currency
from fx_bnr.analysis.filters import filter_records
from fx_bnr.analysis.statistics import compute_statistics
from fx_bnr.analysis.table import SORT_KEYS, build_table, toggle_sort

__all__ = [
    "SORT_KEYS",
    "build_chart_series",
    "build_comparison",
    "build_table",
    "comparison_chart_series",
    "compute_statistics",
    "currency_color",
    "filter_records",
    "toggle_currency",
    "toggle_sort",
]
