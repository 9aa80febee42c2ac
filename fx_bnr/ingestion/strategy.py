"""Abstractions for pluggable archive sources."""

from __future__ import annotations

from typing import Protocol


class ArchiveSource(Protocol):
    """Contract for retrieving raw BNR documents.

    Implementations return the XML text of the yearly archive and raise
    :class:`fx_bnr.exceptions.RetrievalError` when it cannot be fetched.
    """

    def fetch_year(self, year: int) -> str:
        ...  # pragma: no cover - protocol definition


__all__ = ["ArchiveSource"]
