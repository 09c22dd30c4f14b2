"""Volatility statistics and Bollinger Bands."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pandas as pd

from fxmonitor.core.technical_utils import annualize, sma, std
from fxmonitor.domain import BollingerBands, PriceBar, PriceHistory, VolatilityMetrics


BAND_PERIOD = 20
BAND_WIDTH = 2.0


def log_returns(closes: Sequence[float]) -> pd.Series:
    """Log returns of consecutive closes (one shorter than the input)."""
    series = pd.Series(closes, dtype=float)
    return np.log(series / series.shift(1)).dropna()


def calculate_volatility_metrics(bars: PriceHistory | Sequence[PriceBar]) -> VolatilityMetrics:
    """
    Derive volatility metrics from a daily series.

    Variance is the population variance of log returns; it is taken as 0
    when fewer than two bars leave no return to measure.

    Returns:
        Annualized volatility and daily deviation (both in percent), the
        20-period close deviation as an ATR proxy (divided by 20 even when
        fewer closes exist), and Bollinger Bands at MA20 +/- 2 deviations
    """
    history = PriceHistory.of(bars)
    closes = history.closes()

    returns = log_returns(history.to_dataframe()["close"])
    variance = float(returns.var(ddof=0)) if len(returns) else 0.0
    daily_volatility = math.sqrt(variance)

    ma20 = sma(closes, BAND_PERIOD)
    std20 = std(closes, BAND_PERIOD)

    return VolatilityMetrics(
        volatility=annualize(daily_volatility) * 100,
        standard_deviation=daily_volatility * 100,
        average_true_range=std20,
        bollinger_bands=BollingerBands(
            upper=ma20 + BAND_WIDTH * std20,
            middle=ma20,
            lower=ma20 - BAND_WIDTH * std20,
        ),
    )
