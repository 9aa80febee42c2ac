"""CSV export of rate records in the layout used by the dashboard download."""

from __future__ import annotations

import csv
import io
from datetime import date
from pathlib import Path
from typing import Sequence

from fx_bnr.config import BASE_CURRENCY
from fx_bnr.exceptions import EmptyExportError
from fx_bnr.ingestion.models import RateRecord
from fx_bnr.utils.formatting import format_value
from fx_bnr.utils.logger import get_logger

LOGGER = get_logger(__name__)

CSV_HEADER = ("Data", "Valuta", f"Curs ({BASE_CURRENCY})")


class BNRCSVExporter:
    """Serialise records to ``Data,Valuta,Curs (RON)`` CSV in their given order."""

    def __init__(self, *, filename_prefix: str = "cursuri_valutare") -> None:
        self.filename_prefix = filename_prefix

    def render(self, records: Sequence[RateRecord]) -> str:
        if not records:
            raise EmptyExportError()
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for record in records:
            writer.writerow((record.iso_date, record.currency, format_value(record.value)))
        return buffer.getvalue()

    def write(
        self,
        records: Sequence[RateRecord],
        *,
        output_dir: Path | None = None,
        export_date: date | None = None,
    ) -> Path:
        content = self.render(records)
        directory = Path(output_dir) if output_dir else Path.cwd()
        directory.mkdir(parents=True, exist_ok=True)
        csv_path = directory / self.build_filename(export_date or date.today())
        csv_path.write_text(content, encoding="utf-8")
        LOGGER.info("Exported %s records → %s", len(records), csv_path)
        return csv_path

    def build_filename(self, export_date: date) -> str:
        return f"{self.filename_prefix}_{export_date.isoformat()}.csv"


__all__ = ["BNRCSVExporter", "CSV_HEADER"]
