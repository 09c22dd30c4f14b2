"""
FX analytics engine.

Stateless functions over explicit inputs:
- Quote synthesis around fixed base rates
- Chained random-walk daily history
- Trend classification (moving averages, support/resistance)
- Volatility metrics (log-return volatility, Bollinger Bands)
- Market summary across quotes
- Amount conversion
"""

from fxmonitor.analytics.conversion import convert_currency, convert_with_quote
from fxmonitor.analytics.history import generate_historical_data
from fxmonitor.analytics.market import calculate_market_summary
from fxmonitor.analytics.rates import (
    generate_exchange_rate,
    generate_exchange_rates,
    generate_rate_fluctuation,
)
from fxmonitor.analytics.trend import calculate_trend_analysis
from fxmonitor.analytics.volatility import calculate_volatility_metrics, log_returns

__all__ = [
    "calculate_market_summary",
    "calculate_trend_analysis",
    "calculate_volatility_metrics",
    "convert_currency",
    "convert_with_quote",
    "generate_exchange_rate",
    "generate_exchange_rates",
    "generate_historical_data",
    "generate_rate_fluctuation",
    "log_returns",
]
