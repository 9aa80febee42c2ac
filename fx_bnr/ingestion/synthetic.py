"""Synthetic fallback series used when no BNR archive could be loaded."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Mapping

from fx_bnr.config import SUPPORTED_CURRENCIES
from fx_bnr.ingestion.models import RateRecord
from fx_bnr.utils.date_range import weekdays

DEFAULT_BASE_RATES: dict[str, float] = {"EUR": 4.97, "USD": 4.55, "GBP": 5.78}
DEFAULT_VOLATILITY: dict[str, float] = {"EUR": 0.02, "USD": 0.03, "GBP": 0.04}
WINDOW_DAYS = 365
CLAMP_RATIO = 0.1


class SyntheticRateGenerator:
    """Bounded random walk producing one record per currency per weekday.

    Each step multiplies the running rate by ``1 + u`` with ``u`` drawn
    uniformly from ``[-volatility/2, volatility/2]`` and then clamps it to
    ``base * (1 ± 0.1)``.
    """

    def __init__(
        self,
        base_rates: Mapping[str, float] | None = None,
        volatility: Mapping[str, float] | None = None,
        *,
        currencies: tuple[str, ...] = SUPPORTED_CURRENCIES,
        rng: random.Random | None = None,
    ) -> None:
        self.base_rates = dict(base_rates or DEFAULT_BASE_RATES)
        self.volatility = dict(volatility or DEFAULT_VOLATILITY)
        self.currencies = currencies
        missing = [c for c in currencies if c not in self.base_rates or c not in self.volatility]
        if missing:
            raise ValueError(f"Missing base rate or volatility for: {', '.join(missing)}")
        self.rng = rng or random.Random()

    def bounds(self, currency: str) -> tuple[float, float]:
        base = self.base_rates[currency]
        return base * (1 - CLAMP_RATIO), base * (1 + CLAMP_RATIO)

    def generate(self, today: date | None = None) -> list[RateRecord]:
        end = today or date.today()
        start = end - timedelta(days=WINDOW_DAYS)
        current = {currency: self.base_rates[currency] for currency in self.currencies}
        records: list[RateRecord] = []
        for day in weekdays(start, end):
            for currency in self.currencies:
                change = (self.rng.random() - 0.5) * self.volatility[currency]
                low, high = self.bounds(currency)
                current[currency] = max(low, min(high, current[currency] * (1 + change)))
                records.append(RateRecord(rate_date=day, currency=currency, value=current[currency]))
        return records


__all__ = ["DEFAULT_BASE_RATES", "DEFAULT_VOLATILITY", "SyntheticRateGenerator"]
