"""CLI for loading BNR rates and printing the dashboard views."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from fx_bnr import FxBnr
from fx_bnr.analysis.table import SORT_KEYS
from fx_bnr.config import BASE_CURRENCY, SUPPORTED_CURRENCIES, BNRSourceConfig
from fx_bnr.exceptions import EmptyExportError
from fx_bnr.state import DashboardView
from fx_bnr.utils.date_range import parse_date
from fx_bnr.utils.formatting import format_percent, format_value

__all__ = ["parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--from", dest="start", type=parse_date, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="end", type=parse_date, help="End date (YYYY-MM-DD)")
    parser.add_argument(
        "--currency",
        dest="currencies",
        action="append",
        choices=SUPPORTED_CURRENCIES,
        help="Currency to include; repeat for several (default: all)",
    )
    parser.add_argument(
        "--compare",
        dest="compare",
        action="append",
        choices=SUPPORTED_CURRENCIES,
        help="Currency for the comparison view; repeat for several (default: all)",
    )
    parser.add_argument("--search", default="", help="Free-text filter for the table")
    parser.add_argument("--sort", dest="sort_key", choices=SORT_KEYS, help="Table sort order")
    parser.add_argument("--limit", type=int, default=20, help="Rows of the table to print")
    parser.add_argument("--export", dest="export_dir", help="Write the filtered rows as CSV here")
    parser.add_argument("--base-url", dest="base_url", help="Root URL of a BNR mirror or proxy")
    parser.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace) -> BNRSourceConfig:
    if args.base_url:
        return BNRSourceConfig.from_base_url(args.base_url, timeout=args.timeout)
    return BNRSourceConfig(timeout=args.timeout)


def format_report(view: DashboardView, *, limit: int) -> str:
    lines: list[str] = []
    if not view.statistics:
        lines.append("No data to display.")
    for stats in view.statistics:
        shown = stats.as_display()
        lines.append(
            f"{shown['currency']}: latest {shown['latest']} {BASE_CURRENCY} ({shown['change']}%), "
            f"min {shown['min']}, max {shown['max']}, avg {shown['average']}"
        )
    lines.append("")
    for row in view.table[:limit]:
        lines.append(
            f"{row.rate_date.isoformat()}  {row.currency}  {format_value(row.value)}  "
            f"{format_percent(row.change_percent)}%"
        )
    if view.comparison:
        lines.append("")
    for series in view.comparison:
        last = series.points[-1]
        lines.append(
            f"{series.currency} vs {format_value(series.baseline)}: "
            f"{format_percent(last.percent_change)}% on {last.rate_date.isoformat()}"
        )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    app = FxBnr(_build_config(args))
    result = app.refresh()
    if result.notice:
        print(result.notice, file=sys.stderr)
    if args.currencies:
        app.select_currencies(args.currencies)
    if args.start or args.end:
        app.set_date_range(args.start, args.end)
    if args.compare:
        app.compare(args.compare)
    app.search(args.search)
    app.sort(args.sort_key)
    print(format_report(app.view(), limit=args.limit))
    if args.export_dir:
        try:
            path = app.export_csv(Path(args.export_dir))
        except EmptyExportError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(f"Exported → {path}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
