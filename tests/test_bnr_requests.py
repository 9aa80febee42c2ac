from __future__ import annotations

import pytest
import requests

from fx_bnr.config import BNRSourceConfig
from fx_bnr.exceptions import RetrievalError
from fx_bnr.ingestion.bnr_requests import BNRRequestsClient


class _FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "<DataSet/>") -> None:
        self.status_code = status_code
        self.text = text
        self.content = text.encode("utf-8")


class _FakeSession:
    def __init__(self, response: _FakeResponse | None = None, error: Exception | None = None):
        self.headers: dict[str, str] = {}
        self.response = response or _FakeResponse()
        self.error = error
        self.calls: list[tuple[str, float]] = []
        self.closed = False

    def get(self, url: str, timeout: float):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


def test_fetch_year_uses_archive_url_and_timeout() -> None:
    session = _FakeSession(_FakeResponse(text="<DataSet>2024</DataSet>"))
    client = BNRRequestsClient(BNRSourceConfig(timeout=5), session=session)

    text = client.fetch_year(2024)

    assert text == "<DataSet>2024</DataSet>"
    assert session.calls == [("https://www.bnr.ro/files/xml/years/nbrfxrates2024.xml", 5)]
    assert "User-Agent" in session.headers


def test_fetch_latest_uses_daily_url() -> None:
    session = _FakeSession()
    client = BNRRequestsClient(session=session)

    client.fetch_latest()

    assert session.calls[0][0] == "https://www.bnr.ro/nbrfxrates.xml"


def test_non_success_status_raises_retrieval_error() -> None:
    client = BNRRequestsClient(session=_FakeSession(_FakeResponse(status_code=503)))

    with pytest.raises(RetrievalError) as excinfo:
        client.fetch_year(2023)

    assert excinfo.value.year == 2023
    assert "HTTP 503" in str(excinfo.value)


def test_network_error_raises_retrieval_error() -> None:
    session = _FakeSession(error=requests.ConnectionError("connection refused"))
    client = BNRRequestsClient(session=session)

    with pytest.raises(RetrievalError):
        client.fetch_year(2024)
    assert len(session.calls) == 1


def test_injected_session_is_not_closed() -> None:
    session = _FakeSession()
    with BNRRequestsClient(session=session):
        pass

    assert not session.closed
