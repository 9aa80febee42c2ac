from __future__ import annotations

import random
from collections import Counter
from datetime import date, timedelta

import pytest

from fx_bnr.ingestion.synthetic import DEFAULT_BASE_RATES, SyntheticRateGenerator


class _ConstantRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def test_generates_weekdays_only_for_every_currency() -> None:
    today = date(2024, 6, 14)  # Friday
    records = SyntheticRateGenerator(rng=random.Random(7)).generate(today)

    assert all(record.rate_date.weekday() < 5 for record in records)
    counts = Counter(record.currency for record in records)
    # 2023-06-15 (Thursday) .. 2024-06-14 holds 52 full weeks plus Thursday and Friday.
    assert counts == {"EUR": 262, "USD": 262, "GBP": 262}
    assert records[0].rate_date == date(2023, 6, 15)
    assert records[-1].rate_date == today


def test_five_records_per_full_week_per_currency() -> None:
    records = SyntheticRateGenerator(rng=random.Random(1)).generate(date(2024, 6, 14))
    monday = date(2024, 1, 8)
    week = {monday + timedelta(days=offset) for offset in range(7)}

    in_week = Counter(record.currency for record in records if record.rate_date in week)

    assert in_week == {"EUR": 5, "USD": 5, "GBP": 5}


def test_values_stay_within_ten_percent_of_base() -> None:
    generator = SyntheticRateGenerator(rng=random.Random(42))

    for record in generator.generate(date(2025, 1, 31)):
        base = DEFAULT_BASE_RATES[record.currency]
        assert base * 0.9 <= record.value <= base * 1.1


def test_walk_is_clamped_after_perturbation() -> None:
    records = SyntheticRateGenerator(rng=_ConstantRandom(1.0)).generate(date(2024, 6, 14))
    eur = [record.value for record in records if record.currency == "EUR"]

    # each step adds +1% (half the 2% volatility) until the ceiling is reached
    assert eur[0] == pytest.approx(4.97 * 1.01)
    assert eur[-1] == pytest.approx(4.97 * 1.1)
    assert max(eur) == pytest.approx(4.97 * 1.1)


def test_running_rate_carries_forward() -> None:
    records = SyntheticRateGenerator(rng=_ConstantRandom(0.25)).generate(date(2024, 6, 14))
    usd = [record.value for record in records if record.currency == "USD"]

    # change is -0.25 * 0.03 each day
    assert usd[1] == pytest.approx(4.55 * (1 - 0.0075) ** 2)


def test_missing_base_rate_is_rejected() -> None:
    with pytest.raises(ValueError):
        SyntheticRateGenerator(base_rates={"EUR": 4.97}, volatility={"EUR": 0.02})
