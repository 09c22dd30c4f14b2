"""Tests for the shared numeric helpers."""

from __future__ import annotations

import math

import pytest

from fxmonitor.core.technical_utils import annualize, percentage_change, sma, std


class TestSma:
    """Tests for the trailing-window average."""

    def test_averages_last_period_values(self):
        assert sma([1.0, 2.0, 3.0, 4.0, 5.0], 2) == pytest.approx(4.5)

    def test_short_series_averages_everything(self):
        """Fewer values than the period: average the whole sequence."""
        assert sma([2.0, 4.0], 20) == pytest.approx(3.0)

    def test_empty_series_is_zero(self):
        assert sma([], 20) == 0.0

    def test_exact_period(self):
        assert sma([1.0, 2.0, 3.0], 3) == pytest.approx(2.0)


class TestStd:
    """Tests for the trailing population standard deviation."""

    def test_population_divisor(self):
        # mean 5, squared deviations 9+1+1+9 = 20, /4 -> 5
        assert std([2.0, 4.0, 6.0, 8.0], 4) == pytest.approx(math.sqrt(5.0))

    def test_short_series_still_divides_by_period(self):
        # mean 5, squared deviations sum to 20, /20 -> 1
        assert std([2.0, 4.0, 6.0, 8.0], 20) == pytest.approx(1.0)

    def test_uses_trailing_window_only(self):
        assert std([100.0, 1.0, 1.0, 1.0], 3) == 0.0

    def test_constant_series_is_zero(self):
        assert std([1.25] * 25, 20) == 0.0

    def test_empty_series_is_zero(self):
        assert std([], 20) == 0.0


class TestPercentageChange:
    def test_gain(self):
        assert percentage_change(110.0, 100.0) == pytest.approx(10.0)

    def test_loss(self):
        assert percentage_change(95.0, 100.0) == pytest.approx(-5.0)


def test_annualize_uses_252_trading_days():
    assert annualize(0.01) == pytest.approx(0.01 * math.sqrt(252))
