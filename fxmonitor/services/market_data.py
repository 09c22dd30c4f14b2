"""Market data service - resolves pairs against the catalog and runs the analytics."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fxmonitor.analytics import (
    calculate_trend_analysis,
    calculate_volatility_metrics,
    generate_exchange_rate,
    generate_exchange_rates,
    generate_historical_data,
)
from fxmonitor.core.exceptions import NotFoundError
from fxmonitor.core.logging import get_logger
from fxmonitor.domain import (
    CurrencyCatalog,
    CurrencyPair,
    ExchangeRate,
    PriceHistory,
    TimeRange,
    TrendAnalysis,
    VolatilityMetrics,
)


logger = get_logger("services.market_data")


@dataclass(frozen=True)
class PairHistory:
    """Generated history for one pair with its derived analysis."""

    pair: CurrencyPair
    prices: PriceHistory
    trend: TrendAnalysis
    volatility: VolatilityMetrics


class MarketDataService:
    """Entry point for quotes and history, wired with the catalog and random source."""

    def __init__(
        self,
        catalog: CurrencyCatalog,
        rng: np.random.Generator,
        volatility: float,
    ) -> None:
        self.catalog = catalog
        self.rng = rng
        self.volatility = volatility

    def resolve(self, pair_id: str) -> CurrencyPair:
        """Look up a pair by id (case-insensitive).

        Raises:
            NotFoundError: if the catalog has no such pair.
        """
        pair = self.catalog.get(pair_id.strip().upper())
        if pair is None:
            raise NotFoundError(f"Invalid currency pair: {pair_id}")
        return pair

    def quote(self, pair: CurrencyPair, previous: ExchangeRate | None = None) -> ExchangeRate:
        return generate_exchange_rate(pair, self.rng, previous=previous, volatility=self.volatility)

    def quotes(self, pair_ids: list[str] | None = None) -> list[ExchangeRate]:
        """Quote the known pairs among ``pair_ids`` (every pair when None)."""
        if pair_ids is not None:
            pair_ids = [pair_id.strip().upper() for pair_id in pair_ids]
        pairs = self.catalog.select(pair_ids)
        logger.debug(f"Quoting {len(pairs)} pair(s)")
        return generate_exchange_rates(pairs, self.rng, volatility=self.volatility)

    def history(self, pair: CurrencyPair, time_range: TimeRange) -> PairHistory:
        prices = PriceHistory(
            pair_id=pair.id,
            bars=generate_historical_data(pair.base_rate, time_range.days, self.rng),
        )
        return PairHistory(
            pair=pair,
            prices=prices,
            trend=calculate_trend_analysis(prices),
            volatility=calculate_volatility_metrics(prices),
        )
