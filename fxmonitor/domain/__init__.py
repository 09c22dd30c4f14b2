"""Domain models for strongly-typed data throughout the application.

Frozen Pydantic models: created fresh per computation and never mutated.

Usage:
    from fxmonitor.domain import CurrencyCatalog, PriceBar, TrendAnalysis

    catalog = CurrencyCatalog()
    eurusd = catalog["EURUSD"]
"""

from fxmonitor.domain.alert import AlertType, CurrencyAlert
from fxmonitor.domain.analysis import (
    BollingerBands,
    MovingAverages,
    TrendAnalysis,
    TrendDirection,
    VolatilityMetrics,
)
from fxmonitor.domain.currency import CURRENCY_PAIRS, CurrencyCatalog, CurrencyPair
from fxmonitor.domain.price import PriceBar, PriceHistory
from fxmonitor.domain.quote import ConversionResult, ExchangeRate, MarketSummary
from fxmonitor.domain.time_range import TimeRange

__all__ = [
    # Currency
    "CURRENCY_PAIRS",
    "CurrencyCatalog",
    "CurrencyPair",
    # Price
    "PriceBar",
    "PriceHistory",
    "TimeRange",
    # Quotes
    "ConversionResult",
    "ExchangeRate",
    "MarketSummary",
    # Analysis
    "BollingerBands",
    "MovingAverages",
    "TrendAnalysis",
    "TrendDirection",
    "VolatilityMetrics",
    # Alerts
    "AlertType",
    "CurrencyAlert",
]
