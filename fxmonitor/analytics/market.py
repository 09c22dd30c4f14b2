"""Cross-sectional market summary over a set of quotes."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from fxmonitor.domain import ExchangeRate, MarketSummary


# Illustrative only; FX has no market capitalisation
MARKET_CAP_MULTIPLIER = 1.5


def calculate_market_summary(
    rates: Sequence[ExchangeRate],
    now: datetime | None = None,
) -> MarketSummary:
    """Count gainers and losers and total the volume; unchanged quotes count as neither."""
    total_volume = sum(rate.volume_24h for rate in rates)
    return MarketSummary(
        total_pairs=len(rates),
        gainers=sum(1 for rate in rates if rate.change_percent_24h > 0),
        losers=sum(1 for rate in rates if rate.change_percent_24h < 0),
        total_volume=total_volume,
        market_cap=total_volume * MARKET_CAP_MULTIPLIER,
        last_updated=now or datetime.now(timezone.utc),
    )
