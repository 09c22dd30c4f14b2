"""API dependencies: the per-app market data service and alert store."""

from __future__ import annotations

from fastapi import Request

from fxmonitor.core.config import Settings
from fxmonitor.services import AlertStore, MarketDataService


__all__ = [
    "get_alert_store",
    "get_app_settings",
    "get_market_data",
]


def get_market_data(request: Request) -> MarketDataService:
    """Market data service built once when the API app was created."""
    return request.app.state.market_data


def get_alert_store(request: Request) -> AlertStore:
    """Alert store shared by every request to this app."""
    return request.app.state.alerts


def get_app_settings(request: Request) -> Settings:
    """Settings the API app was created with."""
    return request.app.state.settings

