"""Synthetic daily price history via a chained random walk.

Each bar opens at the previous bar's close, so the series is one continuous
walk from the base rate rather than independent random days. The open is
never clamped; with high and low both built outward from it, it lies within
the day's range anyway.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import numpy as np

from fxmonitor.domain import PriceBar


MIN_DAILY_VOLATILITY = 0.01
MAX_DAILY_VOLATILITY = 0.03
VOLUME_SCALE = 10_000_000


def generate_historical_data(
    base_rate: float,
    days: int,
    rng: np.random.Generator,
    now: datetime | None = None,
) -> list[PriceBar]:
    """
    Generate ``days`` daily bars ending today, oldest first.

    Args:
        base_rate: Opening rate of the oldest bar
        days: Number of bars (one per calendar day)
        rng: Random source
        now: Timestamp of the newest bar (defaults to the current UTC time)

    Returns:
        Bars with strictly increasing timestamps one day apart

    Raises:
        ValueError: if ``days`` is less than 1
    """
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")

    end = now or datetime.now(timezone.utc)
    bars: list[PriceBar] = []
    current_rate = base_rate

    for offset in range(days - 1, -1, -1):
        open_ = current_rate
        volatility = float(rng.uniform(MIN_DAILY_VOLATILITY, MAX_DAILY_VOLATILITY))
        high = open_ * (1 + float(rng.uniform()) * volatility)
        low = open_ * (1 - float(rng.uniform()) * volatility)
        close = low + float(rng.uniform()) * (high - low)

        bars.append(
            PriceBar(
                timestamp=end - timedelta(days=offset),
                open=open_,
                high=high,
                low=low,
                close=close,
                volume=float(rng.uniform()) * VOLUME_SCALE,
            )
        )
        current_rate = close

    return bars
