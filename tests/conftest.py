from __future__ import annotations

from typing import Callable

import pytest

SAMPLE_DOCUMENT = """<?xml version="1.0" encoding="utf-8"?>
<DataSet xmlns="http://www.bnr.ro/xsd"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="http://www.bnr.ro/xsd nbrfxrates.xsd">
  <Header>
    <Publisher>National Bank of Romania</Publisher>
    <PublishingDate>2024-01-04</PublishingDate>
    <MessageType>DR</MessageType>
  </Header>
  <Body>
    <Subject>Reference rates</Subject>
    <OrigCurrency>RON</OrigCurrency>
    <Cube date="2024-01-03">
      <Rate currency="EUR">4.9703</Rate>
      <Rate currency="HUF" multiplier="100">1.3012</Rate>
      <Rate currency="USD">4.5422</Rate>
    </Cube>
    <Cube date="2024-01-04">
      <Rate currency="GBP">5.7511</Rate>
      <Rate currency="EUR">4.9712</Rate>
    </Cube>
  </Body>
</DataSet>
"""


def build_document(cubes: dict[str, dict[str, float]]) -> str:
    """Render a minimal BNR document from ``{date: {currency: value}}``."""

    blocks = []
    for day, rates in cubes.items():
        entries = "".join(
            f'<Rate currency="{code}">{value:.4f}</Rate>' for code, value in rates.items()
        )
        blocks.append(f'<Cube date="{day}">{entries}</Cube>')
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<DataSet xmlns="http://www.bnr.ro/xsd"><Body>'
        + "".join(blocks)
        + "</Body></DataSet>"
    )


@pytest.fixture()
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture()
def make_document() -> Callable[[dict[str, dict[str, float]]], str]:
    return build_document
