"""Historical data schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from fxmonitor.domain import (
    CurrencyPair,
    PriceBar,
    TimeRange,
    TrendAnalysis,
    VolatilityMetrics,
)


class HistoryRequest(BaseModel):
    """Batch history request for several pairs."""

    pairs: list[str] = Field(..., description="Pair identifiers")
    time_range: str = Field(default="30D", description="Range token; unknown tokens mean 30D")


class PairHistoryData(BaseModel):
    """History and analysis for one pair."""

    pair: CurrencyPair
    historical_data: list[PriceBar]
    trend_analysis: TrendAnalysis
    volatility_metrics: VolatilityMetrics


class HistoryData(PairHistoryData):
    time_range: TimeRange
    timestamp: datetime


class HistoryResponse(BaseModel):
    success: bool = True
    data: HistoryData


class BatchHistoryData(BaseModel):
    time_range: TimeRange
    results: list[PairHistoryData]
    timestamp: datetime


class BatchHistoryResponse(BaseModel):
    success: bool = True
    data: BatchHistoryData
