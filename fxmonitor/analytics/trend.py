"""Trend classification from moving-average alignment."""

from __future__ import annotations

from typing import Sequence

from fxmonitor.core.technical_utils import percentage_change, sma
from fxmonitor.domain import MovingAverages, PriceBar, PriceHistory, TrendAnalysis


MIN_BARS = 20
MOMENTUM_LOOKBACK = 10
STRENGTH_BASELINE = 50.0
STRENGTH_PER_PERCENT = 5.0


def calculate_trend_analysis(bars: PriceHistory | Sequence[PriceBar]) -> TrendAnalysis:
    """
    Classify the trend of a daily series.

    Bullish when close > MA20 > MA50, bearish when close < MA20 < MA50,
    neutral otherwise. Directional trends score 50 plus five points per
    percent of recent momentum (capped at 100); neutral stays at 50.
    Support and resistance are the extremes of the last 20 closes.

    Series shorter than 20 bars get the neutral default with all levels at 0.
    """
    history = PriceHistory.of(bars)
    if len(history) < MIN_BARS:
        return TrendAnalysis()

    closes = history.closes()
    ma20 = sma(closes, 20)
    ma50 = sma(closes, 50)
    ma200 = sma(closes, 200)

    current = closes[-1]
    momentum = percentage_change(current, closes[-MOMENTUM_LOOKBACK])

    trend = "neutral"
    strength = STRENGTH_BASELINE
    if current > ma20 > ma50:
        trend = "bullish"
    elif current < ma20 < ma50:
        trend = "bearish"
    if trend != "neutral":
        strength = min(100.0, STRENGTH_BASELINE + abs(momentum) * STRENGTH_PER_PERCENT)

    recent = closes[-MIN_BARS:]
    return TrendAnalysis(
        trend=trend,
        strength=strength,
        support=min(recent),
        resistance=max(recent),
        moving_average=MovingAverages(ma20=ma20, ma50=ma50, ma200=ma200),
    )
