"""Public interface for the fx_bnr package."""

from __future__ import annotations

from datetime import date
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Iterable

from fx_bnr import state as dashboard
from fx_bnr.config import SUPPORTED_CURRENCIES, BNRSourceConfig
from fx_bnr.exceptions import EmptyExportError, FxBnrError, ParseError, RetrievalError
from fx_bnr.analysis.filters import filter_records
from fx_bnr.ingestion.acquisition import AcquisitionResult, acquire_rates, target_years
from fx_bnr.ingestion.bnr_requests import BNRRequestsClient
from fx_bnr.ingestion.bnr_xml import BNRXMLParser, parse_publishing_date
from fx_bnr.ingestion.csv_export import BNRCSVExporter
from fx_bnr.ingestion.models import RateRecord
from fx_bnr.ingestion.strategy import ArchiveSource
from fx_bnr.ingestion.synthetic import SyntheticRateGenerator
from fx_bnr.utils.logger import get_logger

__all__ = [
    "__version__",
    "AcquisitionResult",
    "BNRSourceConfig",
    "EmptyExportError",
    "FxBnr",
    "FxBnrError",
    "ParseError",
    "RateRecord",
    "RetrievalError",
    "SUPPORTED_CURRENCIES",
]

LOGGER = get_logger(__name__)

try:
    __version__ = importlib_metadata.version("fx-bnr")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class FxBnr:
    """Package facade holding the current dashboard snapshot.

    Each call replaces ``self.state`` with a new immutable
    :class:`~fx_bnr.state.DashboardState`; calls are expected to run one at a
    time, and a refresh swaps the dataset in a single assignment.
    """

    __slots__ = ("config", "source", "generator", "exporter", "state")

    __version__ = __version__

    def __init__(
        self,
        config: BNRSourceConfig | str | None = None,
        *,
        source: ArchiveSource | None = None,
        generator: SyntheticRateGenerator | None = None,
        today: date | None = None,
    ) -> None:
        """Configure where BNR archives come from.

        ``config`` may be a :class:`BNRSourceConfig` or the root URL of a BNR
        mirror. ``source`` overrides the HTTP client entirely, which is how
        tests and offline callers plug in local archives.
        """

        if isinstance(config, str):
            config = BNRSourceConfig.from_base_url(config)
        self.config = config or BNRSourceConfig()
        self.source: ArchiveSource = source or BNRRequestsClient(self.config)
        self.generator = generator or SyntheticRateGenerator(currencies=self.config.currencies)
        self.exporter = BNRCSVExporter()
        self.state = dashboard.default_state(today)

    def refresh(self, today: date | None = None) -> AcquisitionResult:
        """Reload the dataset from BNR (or the synthetic fallback)."""

        resolved = today or date.today()
        years = target_years(resolved, self.config.years_back)
        result = acquire_rates(
            self.source,
            years=years,
            today=resolved,
            parser=BNRXMLParser(self.config.currencies),
            generator=self.generator,
        )
        self.state = dashboard.load_dataset(self.state, result)
        return result

    def latest(self) -> list[RateRecord]:
        """Return today's published rates from the daily BNR document."""

        fetch_latest = getattr(self.source, "fetch_latest", None)
        if not callable(fetch_latest):
            raise TypeError(f"{type(self.source).__name__} cannot fetch the daily document")
        text = fetch_latest()
        records = BNRXMLParser(self.config.currencies).parse(text, document_id="nbrfxrates.xml")
        published = parse_publishing_date(text)
        LOGGER.info(
            "Parsed %s daily BNR rates published %s",
            len(records),
            published.isoformat() if published else "on an unknown date",
        )
        return records

    @property
    def records(self) -> tuple[RateRecord, ...]:
        return self.state.records

    def select_currencies(self, currencies: Iterable[str]) -> None:
        self.state = dashboard.select_currencies(self.state, currencies)

    def set_date_range(self, start: date | None = None, end: date | None = None) -> None:
        self.state = dashboard.set_date_range(self.state, start, end)

    def search(self, term: str) -> None:
        self.state = dashboard.set_search(self.state, term)

    def sort(self, sort_key: str | None) -> None:
        self.state = dashboard.set_sort(self.state, sort_key)

    def toggle_sort_column(self, column: str) -> None:
        self.state = dashboard.toggle_sort_column(self.state, column)

    def compare(self, currencies: Iterable[str]) -> None:
        self.state = dashboard.set_comparison_currencies(self.state, currencies)

    def toggle_comparison(self, currency: str) -> None:
        self.state = dashboard.toggle_comparison(self.state, currency)

    def view(self) -> dashboard.DashboardView:
        return dashboard.render(self.state)

    def export_csv(
        self, output_dir: str | Path | None = None, *, export_date: date | None = None
    ) -> Path:
        """Write the currently filtered records to ``cursuri_valutare_<date>.csv``."""

        filtered = filter_records(self.state.records, self.state.criteria)
        return self.exporter.write(
            filtered,
            output_dir=Path(output_dir) if output_dir else None,
            export_date=export_date,
        )
