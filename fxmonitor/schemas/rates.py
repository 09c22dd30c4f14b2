"""Exchange rate and conversion schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from fxmonitor.domain import ConversionResult, ExchangeRate, MarketSummary


class RatesRequest(BaseModel):
    """Request quotes for an explicit list of pairs."""

    pairs: list[str] = Field(..., description="Pair identifiers, e.g. ['EURUSD', 'USDJPY']")


class RatesData(BaseModel):
    rates: list[ExchangeRate]
    market_summary: MarketSummary | None = None
    timestamp: datetime


class RatesResponse(BaseModel):
    success: bool = True
    data: RatesData


class ConversionResponse(BaseModel):
    success: bool = True
    data: ConversionResult
