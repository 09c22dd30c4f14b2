"""Instantaneous quote synthesis.

Each quote is the pair's base rate nudged by a bounded uniform perturbation.
Nothing here keeps state: the caller supplies the random generator and,
optionally, the previous quote whose rate becomes the previous close.
"""

from __future__ import annotations

from datetime import datetime, timezone

import numpy as np

from fxmonitor.core.technical_utils import percentage_change
from fxmonitor.domain import CurrencyPair, ExchangeRate


DEFAULT_VOLATILITY = 0.015
PIP = 0.0001
RANGE_FACTOR = 0.1
VOLUME_SCALE = 1_000_000_000


def generate_rate_fluctuation(
    base_rate: float,
    rng: np.random.Generator,
    volatility: float = DEFAULT_VOLATILITY,
) -> float:
    """Perturb ``base_rate`` by a uniform draw in [-0.5, 0.5] scaled by ``volatility``."""
    return base_rate * (1 + float(rng.uniform(-0.5, 0.5)) * volatility)


def generate_exchange_rate(
    pair: CurrencyPair,
    rng: np.random.Generator,
    previous: ExchangeRate | None = None,
    volatility: float = DEFAULT_VOLATILITY,
    now: datetime | None = None,
) -> ExchangeRate:
    """
    Synthesize a quote for ``pair``.

    Args:
        pair: Catalog pair (carries the base rate)
        rng: Random source
        previous: Prior quote for the same pair; its rate is the previous close
        volatility: Perturbation scale, must stay below 1 for the rate to remain positive
        now: Quote timestamp (defaults to the current UTC time)

    Returns:
        A fresh ExchangeRate
    """
    rate = generate_rate_fluctuation(pair.base_rate, rng, volatility)
    previous_close = previous.rate if previous is not None else pair.base_rate

    change_percent = percentage_change(rate, previous_close)
    range_fraction = abs(change_percent) * RANGE_FACTOR
    spread = rate * PIP

    return ExchangeRate(
        id=pair.id,
        pair=pair,
        rate=rate,
        change_24h=rate - previous_close,
        change_percent_24h=change_percent,
        high_24h=rate * (1 + range_fraction),
        low_24h=rate * (1 - range_fraction),
        volume_24h=float(rng.uniform()) * VOLUME_SCALE,
        bid=rate - spread / 2,
        ask=rate + spread / 2,
        spread=spread,
        last_updated=now or datetime.now(timezone.utc),
    )


def generate_exchange_rates(
    pairs: list[CurrencyPair],
    rng: np.random.Generator,
    volatility: float = DEFAULT_VOLATILITY,
    previous: dict[str, ExchangeRate] | None = None,
) -> list[ExchangeRate]:
    """Quote every pair in order, chaining from ``previous`` where available."""
    previous = previous or {}
    now = datetime.now(timezone.utc)
    return [
        generate_exchange_rate(
            pair, rng, previous=previous.get(pair.id), volatility=volatility, now=now
        )
        for pair in pairs
    ]
