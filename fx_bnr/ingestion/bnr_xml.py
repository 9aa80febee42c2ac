"""Parse BNR ``nbrfxrates`` XML documents into :class:`RateRecord` rows."""

from __future__ import annotations

import math
import re
import warnings
from datetime import date
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from fx_bnr.config import SUPPORTED_CURRENCIES
from fx_bnr.exceptions import ParseError
from fx_bnr.ingestion.models import RateRecord
from fx_bnr.utils.date_range import try_parse_date
from fx_bnr.utils.logger import get_logger

LOGGER = get_logger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_multiplier(raw: str | None) -> int:
    if raw is None:
        return 1
    match = _LEADING_INT.match(raw)
    if not match:
        return 1
    return int(match.group(1)) or 1


def _parse_value(raw: str) -> float | None:
    # Longest numeric prefix, so "4.97 RON" reads as 4.97.
    match = _LEADING_FLOAT.match(raw)
    if not match:
        return None
    value = float(match.group(1))
    return value if math.isfinite(value) else None


def _soup(text: str) -> BeautifulSoup:
    # html.parser tolerates broken markup and the default BNR namespace;
    # tag and attribute names come back lower-cased.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
        return BeautifulSoup(text, "html.parser")


class BNRXMLParser:
    """Convert BNR rate documents into structured rows.

    A document holds ``<Cube date="YYYY-MM-DD">`` blocks, each with
    ``<Rate currency="EUR" multiplier="100">4.9700</Rate>`` entries. The
    yearly archives and the daily ``nbrfxrates.xml`` share this shape.
    """

    def __init__(self, currencies: Iterable[str] = SUPPORTED_CURRENCIES) -> None:
        self.currencies = tuple(currencies)

    def parse(self, text: str, *, document_id: str = "<document>") -> list[RateRecord]:
        if not text or not text.strip():
            raise ParseError(document_id, "document is empty")
        soup = _soup(text)
        cubes = soup.find_all("cube")
        if not cubes and soup.find("dataset") is None:
            raise ParseError(document_id, "no DataSet root or Cube blocks found")
        return list(self._iter_records(cubes, document_id))

    def _iter_records(self, cubes, document_id: str) -> Iterator[RateRecord]:
        for cube in cubes:
            rate_date = try_parse_date(cube.get("date"))
            if rate_date is None:
                LOGGER.debug("Skipping Cube without a usable date in %s", document_id)
                continue
            for rate in cube.find_all("rate"):
                record = self._build_record(rate, rate_date)
                if record is not None:
                    yield record

    def _build_record(self, rate, rate_date: date) -> RateRecord | None:
        currency = (rate.get("currency") or "").strip()
        if currency not in self.currencies:
            return None
        value = _parse_value(rate.get_text())
        if value is None:
            LOGGER.debug("Skipping %s on %s: unparseable rate", currency, rate_date)
            return None
        value = value / _parse_multiplier(rate.get("multiplier"))
        if value <= 0:
            LOGGER.debug("Skipping %s on %s: non-positive rate", currency, rate_date)
            return None
        return RateRecord(rate_date=rate_date, currency=currency, value=value)


def parse_publishing_date(text: str) -> date | None:
    """Return the ``<PublishingDate>`` header of a BNR document, if any."""

    if not text:
        return None
    node = _soup(text).find("publishingdate")
    if node is None:
        return None
    return try_parse_date(node.get_text(strip=True))


__all__ = ["BNRXMLParser", "parse_publishing_date"]
