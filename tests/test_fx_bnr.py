"""Tests for the public package facade."""

from __future__ import annotations

import logging
import random
from datetime import date
from pathlib import Path
from typing import Callable

import pytest

from fx_bnr import FxBnr, __version__
from fx_bnr.config import BNRSourceConfig
from fx_bnr.exceptions import EmptyExportError, RetrievalError
from fx_bnr.ingestion.bnr_requests import BNRRequestsClient
from fx_bnr.ingestion.synthetic import SyntheticRateGenerator


class _ArchiveSource:
    def __init__(self, documents: dict[int, str], latest: str | None = None) -> None:
        self.documents = documents
        self.latest = latest

    def fetch_year(self, year: int) -> str:
        if year not in self.documents:
            raise RetrievalError(f"https://bnr.test/{year}.xml", "HTTP 404", year=year)
        return self.documents[year]

    def fetch_latest(self) -> str:
        if self.latest is None:
            raise RetrievalError("https://bnr.test/nbrfxrates.xml", "HTTP 404")
        return self.latest


class _YearOnlySource:
    def fetch_year(self, year: int) -> str:
        raise RetrievalError("https://bnr.test", "offline", year=year)


@pytest.fixture()
def archive(make_document: Callable) -> _ArchiveSource:
    return _ArchiveSource(
        {
            2024: make_document(
                {
                    "2024-03-01": {"EUR": 4.97, "USD": 4.55},
                    "2024-03-04": {"EUR": 4.98, "USD": 4.60},
                }
            ),
            2023: make_document({"2023-12-29": {"EUR": 4.96}}),
        },
        latest=make_document({"2024-03-05": {"EUR": 4.9712, "GBP": 5.81}}),
    )


def test_version_is_exposed() -> None:
    assert FxBnr.__version__ == __version__


def test_defaults_to_bnr_http_client() -> None:
    app = FxBnr()

    assert isinstance(app.source, BNRRequestsClient)
    assert app.config.archive_base_url.startswith("https://www.bnr.ro")


def test_accepts_mirror_url() -> None:
    app = FxBnr("https://mirror.example/bnr")

    assert app.config.latest_url == "https://mirror.example/bnr/nbrfxrates.xml"


def test_refresh_loads_and_sorts_archives(archive: _ArchiveSource) -> None:
    app = FxBnr(source=archive, today=date(2024, 3, 10))

    result = app.refresh(today=date(2024, 3, 10))

    assert not result.synthetic
    assert result.loaded_years == (2024, 2023)
    assert [r.rate_date for r in app.records][0] == date(2023, 12, 29)
    assert app.state.notice is None


def test_view_and_export(archive: _ArchiveSource, tmp_path: Path) -> None:
    app = FxBnr(source=archive, today=date(2024, 3, 10))
    app.refresh(today=date(2024, 3, 10))
    app.select_currencies(["EUR"])

    view = app.view()
    path = app.export_csv(tmp_path, export_date=date(2024, 3, 10))

    assert [s.currency for s in view.statistics] == ["EUR"]
    assert view.statistics[0].latest_change_percent == pytest.approx(0.2)
    assert path.read_text(encoding="utf-8").splitlines() == [
        "Data,Valuta,Curs (RON)",
        "2024-03-01,EUR,4.9700",
        "2024-03-04,EUR,4.9800",
    ]


def test_export_of_empty_window_raises(archive: _ArchiveSource, tmp_path: Path) -> None:
    app = FxBnr(source=archive, today=date(2024, 3, 10))
    app.refresh(today=date(2024, 3, 10))
    app.set_date_range(date(2020, 1, 1), date(2020, 1, 31))

    with pytest.raises(EmptyExportError):
        app.export_csv(tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_refresh_falls_back_to_synthetic() -> None:
    generator = SyntheticRateGenerator(rng=random.Random(5))
    app = FxBnr(source=_YearOnlySource(), generator=generator)

    result = app.refresh(today=date(2024, 6, 14))

    assert result.synthetic
    assert app.state.synthetic
    assert app.state.notice
    assert app.records[-1].rate_date == date(2024, 6, 14)


def test_refresh_replaces_dataset_wholesale(
    archive: _ArchiveSource, make_document: Callable
) -> None:
    app = FxBnr(source=archive, today=date(2024, 3, 10))
    app.refresh(today=date(2024, 3, 10))
    archive.documents = {2024: make_document({"2024-03-08": {"GBP": 5.9}})}

    app.refresh(today=date(2024, 3, 10))

    assert [(r.currency, r.value) for r in app.records] == [("GBP", 5.9)]


def test_interactions_delegate_to_state(archive: _ArchiveSource) -> None:
    app = FxBnr(source=archive, today=date(2024, 3, 10))
    app.refresh(today=date(2024, 3, 10))

    app.search("usd")
    app.sort("value-asc")
    app.toggle_sort_column("date")
    app.toggle_comparison("GBP")
    app.compare(["USD"])

    assert app.state.search == "usd"
    assert app.state.sort_key == "date-desc"
    assert app.state.comparison_currencies == ("USD",)
    assert [row.value for row in app.view().table] == [4.60, 4.55]


def test_latest_parses_daily_document(archive: _ArchiveSource) -> None:
    app = FxBnr(source=archive)

    records = app.latest()

    assert [(r.currency, r.value) for r in records] == [("EUR", 4.9712), ("GBP", 5.81)]


def test_latest_logs_publishing_date(
    sample_document: str, caplog: pytest.LogCaptureFixture
) -> None:
    app = FxBnr(source=_ArchiveSource({}, latest=sample_document))

    with caplog.at_level(logging.INFO, logger="fx_bnr"):
        records = app.latest()

    assert records
    assert "published 2024-01-04" in caplog.text


def test_latest_requires_capable_source() -> None:
    app = FxBnr(BNRSourceConfig(), source=_YearOnlySource())

    with pytest.raises(TypeError):
        app.latest()
