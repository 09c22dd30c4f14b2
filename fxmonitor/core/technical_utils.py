"""
Simple Technical Indicator Utilities.

Lightweight calculations over plain Python sequences, shared by the trend and
volatility analyzers.

Usage:
    from fxmonitor.core.technical_utils import sma, std, percentage_change

    closes = [1.0875, 1.0891, 1.0866, ...]
    ma20 = sma(closes, period=20)
"""

from __future__ import annotations

import math
from typing import Sequence


TRADING_DAYS_PER_YEAR = 252


def sma(values: Sequence[float], period: int) -> float:
    """
    Calculate a trailing Simple Moving Average.

    Averages the last ``period`` values. Shorter sequences are averaged over
    everything available, and an empty sequence yields 0.

    Args:
        values: Price or value series (oldest first)
        period: Lookback period

    Returns:
        SMA value
    """
    if not values:
        return 0.0
    window = list(values[-period:])
    return sum(window) / len(window)


def std(values: Sequence[float], period: int) -> float:
    """
    Calculate the population standard deviation of the trailing window.

    Squared deviations from ``sma(values, period)`` are summed over the last
    ``period`` values and always divided by ``period``, so a series shorter
    than the period is not rescaled to its own length.

    Args:
        values: Price or value series (oldest first)
        period: Lookback period

    Returns:
        Standard deviation (0 for an empty sequence)
    """
    if not values:
        return 0.0
    window = list(values[-period:])
    mean = sma(values, period)
    variance = sum((x - mean) ** 2 for x in window) / period
    return math.sqrt(variance)


def percentage_change(current: float, previous: float) -> float:
    """Percent change from ``previous`` to ``current`` (5.0 = +5%)."""
    return ((current - previous) / previous) * 100


def annualize(daily_volatility: float) -> float:
    """Scale a daily volatility by the square root of trading days per year."""
    return daily_volatility * math.sqrt(TRADING_DAYS_PER_YEAR)


__all__ = [
    "TRADING_DAYS_PER_YEAR",
    "annualize",
    "percentage_change",
    "sma",
    "std",
]
