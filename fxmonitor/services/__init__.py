"""Service layer: market data and alert bookkeeping."""

from fxmonitor.services.alerts import AlertStore, demo_alerts
from fxmonitor.services.market_data import MarketDataService, PairHistory

__all__ = [
    "AlertStore",
    "MarketDataService",
    "PairHistory",
    "demo_alerts",
]
