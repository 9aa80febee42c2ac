"""requests-based downloader for the BNR yearly and daily XML documents."""

from __future__ import annotations

from typing import Optional

import requests

from fx_bnr.config import BNRSourceConfig
from fx_bnr.exceptions import RetrievalError
from fx_bnr.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "fx-bnr/0.1 (+https://www.bnr.ro)",
    "Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
}


class BNRRequestsClient:
    """Fetch BNR documents over HTTP. Each call is a single attempt."""

    def __init__(
        self,
        config: Optional[BNRSourceConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or BNRSourceConfig()
        self._owns_session = session is None
        self.session = session or requests.Session()
        for key, value in DEFAULT_HEADERS.items():
            self.session.headers.setdefault(key, value)

    def fetch_year(self, year: int) -> str:
        """Return the XML text of the archive for ``year``."""

        return self._get(self.config.archive_url(year), year=year)

    def fetch_latest(self) -> str:
        """Return the XML text of the most recent daily publication."""

        return self._get(self.config.latest_url)

    def _get(self, url: str, *, year: int | None = None) -> str:
        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as exc:
            raise RetrievalError(url, str(exc), year=year) from exc
        if not 200 <= response.status_code < 300:
            raise RetrievalError(url, f"HTTP {response.status_code}", year=year)
        LOGGER.info("Fetched %s (%s bytes)", url, len(response.content))
        return response.text

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "BNRRequestsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["BNRRequestsClient"]
