"""Exceptions raised by the fx_bnr package."""

from __future__ import annotations


class FxBnrError(Exception):
    """Base exception for all fx_bnr errors."""


class RetrievalError(FxBnrError):
    """Raised when a BNR document could not be downloaded."""

    def __init__(self, url: str, reason: str, *, year: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.year = year
        label = f"year {year}" if year is not None else "document"
        super().__init__(f"Could not retrieve BNR {label} from {url}: {reason}")


class ParseError(FxBnrError):
    """Raised when a document is not recognisable as a BNR rate document."""

    def __init__(self, document_id: str, reason: str) -> None:
        self.document_id = document_id
        self.reason = reason
        super().__init__(f"Unable to parse {document_id}: {reason}")


class EmptyExportError(FxBnrError):
    """Raised when an export is requested for an empty record set."""

    def __init__(self, message: str = "There is no data to export.") -> None:
        super().__init__(message)


__all__ = ["FxBnrError", "RetrievalError", "ParseError", "EmptyExportError"]
