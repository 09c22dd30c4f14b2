"""Trend and volatility analysis results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


TrendDirection = Literal["bullish", "bearish", "neutral"]


class MovingAverages(BaseModel):
    """Trailing simple moving averages of closes."""

    ma20: float = 0.0
    ma50: float = 0.0
    ma200: float = 0.0

    model_config = {"frozen": True}


class TrendAnalysis(BaseModel):
    """Trend classification derived from a price series."""

    trend: TrendDirection = "neutral"
    strength: float = Field(default=50.0, ge=0, le=100)
    support: float = 0.0
    resistance: float = 0.0
    moving_average: MovingAverages = Field(default_factory=MovingAverages)

    model_config = {"frozen": True}


class BollingerBands(BaseModel):
    """Volatility envelope around the 20-period moving average."""

    upper: float = 0.0
    middle: float = 0.0
    lower: float = 0.0

    model_config = {"frozen": True}


class VolatilityMetrics(BaseModel):
    """Volatility statistics derived from a price series.

    ``volatility`` is annualized and ``standard_deviation`` is the daily
    log-return deviation, both in percent. ``average_true_range`` is a proxy:
    the 20-period standard deviation of closes.
    """

    volatility: float = Field(default=0.0, ge=0)
    standard_deviation: float = Field(default=0.0, ge=0)
    average_true_range: float = Field(default=0.0, ge=0)
    bollinger_bands: BollingerBands = Field(default_factory=BollingerBands)

    model_config = {"frozen": True}
