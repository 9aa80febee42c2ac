"""Source configuration for talking to the BNR XML endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final
from urllib.parse import urlparse

SUPPORTED_CURRENCIES: Final[tuple[str, ...]] = ("EUR", "USD", "GBP")
BASE_CURRENCY: Final[str] = "RON"

BNR_ARCHIVE_BASE_URL: Final[str] = "https://www.bnr.ro/files/xml/years/nbrfxrates"
BNR_LATEST_URL: Final[str] = "https://www.bnr.ro/nbrfxrates.xml"


@dataclass(slots=True)
class BNRSourceConfig:
    """Where and how the yearly BNR archives are downloaded.

    ``archive_base_url`` is the URL prefix to which ``<year>.xml`` is
    appended, matching the layout of ``https://www.bnr.ro/files/xml/years``.
    """

    archive_base_url: str = BNR_ARCHIVE_BASE_URL
    latest_url: str = BNR_LATEST_URL
    timeout: float = 30.0
    currencies: tuple[str, ...] = field(default=SUPPORTED_CURRENCIES)
    years_back: int = 2

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.years_back <= 0:
            raise ValueError("years_back must be positive")
        unknown = [code for code in self.currencies if code not in SUPPORTED_CURRENCIES]
        if unknown:
            raise ValueError(f"Unsupported currencies: {', '.join(unknown)}")

    @classmethod
    def from_base_url(cls, base_url: str, **overrides) -> "BNRSourceConfig":
        """Create a config for a BNR mirror or reverse proxy.

        ``base_url`` is the root that mirrors ``https://www.bnr.ro`` (for
        instance ``https://example.org/api/bnr``). Both the archive prefix and
        the latest-rates URL are derived from it.
        """

        parsed = urlparse(base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("base_url must be absolute (e.g. https://www.bnr.ro)")
        root = base_url.rstrip("/")
        return cls(
            archive_base_url=f"{root}/files/xml/years/nbrfxrates",
            latest_url=f"{root}/nbrfxrates.xml",
            **overrides,
        )

    def archive_url(self, year: int) -> str:
        return f"{self.archive_base_url}{year}.xml"


__all__ = [
    "BASE_CURRENCY",
    "BNR_ARCHIVE_BASE_URL",
    "BNR_LATEST_URL",
    "BNRSourceConfig",
    "SUPPORTED_CURRENCIES",
]
