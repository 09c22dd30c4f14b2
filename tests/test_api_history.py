"""Tests for the historical data endpoints."""

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi import status
from fastapi.testclient import TestClient


class TestGetHistory:
    """Tests for GET /history."""

    def test_defaults_to_30_days(self, client: TestClient):
        response = client.get("/history", params={"pair": "EURUSD"})
        assert response.status_code == status.HTTP_200_OK

        data = response.json()["data"]
        assert data["time_range"] == "30D"
        assert data["pair"]["id"] == "EURUSD"
        assert len(data["historical_data"]) == 30
        assert data["historical_data"][0]["open"] == pytest.approx(1.0875)

    @pytest.mark.parametrize("token,days", [("7D", 7), ("1H", 1), ("1y", 365), ("ALL", 1000)])
    def test_range_sets_bar_count(self, client: TestClient, token, days):
        data = client.get("/history", params={"pair": "USDJPY", "range": token}).json()["data"]

        assert len(data["historical_data"]) == days

    def test_bars_are_chronological_and_consistent(self, client: TestClient):
        bars = client.get(
            "/history", params={"pair": "GBPUSD", "range": "90D"}
        ).json()["data"]["historical_data"]

        stamps = [datetime.fromisoformat(bar["timestamp"]) for bar in bars]
        assert stamps == sorted(stamps)
        for previous, bar in zip(bars, bars[1:]):
            assert bar["open"] == pytest.approx(previous["close"])
        for bar in bars:
            assert bar["low"] <= min(bar["open"], bar["close"])
            assert bar["high"] >= max(bar["open"], bar["close"])
            assert bar["range"] == pytest.approx(bar["high"] - bar["low"])

    def test_includes_analysis(self, client: TestClient):
        data = client.get("/history", params={"pair": "EURUSD"}).json()["data"]

        trend = data["trend_analysis"]
        assert trend["trend"] in {"bullish", "bearish", "neutral"}
        assert trend["support"] <= trend["resistance"]
        bands = data["volatility_metrics"]["bollinger_bands"]
        assert bands["upper"] >= bands["middle"] >= bands["lower"]

    def test_short_range_gets_neutral_trend(self, client: TestClient):
        trend = client.get(
            "/history", params={"pair": "EURUSD", "range": "7D"}
        ).json()["data"]["trend_analysis"]

        assert trend["trend"] == "neutral"
        assert trend["strength"] == 50
        assert trend["support"] == 0

    def test_missing_pair_is_400(self, client: TestClient):
        response = client.get("/history")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Pair ID is required"

    def test_unknown_pair_is_404(self, client: TestClient):
        response = client.get("/history", params={"pair": "XXXYYY"})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Invalid currency pair: XXXYYY"

    def test_unknown_range_is_400(self, client: TestClient):
        response = client.get("/history", params={"pair": "EURUSD", "range": "2W"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestPostHistory:
    """Tests for POST /history."""

    def test_batch_skips_unknown_pairs(self, client: TestClient):
        response = client.post(
            "/history", json={"pairs": ["EURUSD", "NOPE", "usdcad"], "time_range": "7D"}
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()["data"]
        assert data["time_range"] == "7D"
        assert [r["pair"]["id"] for r in data["results"]] == ["EURUSD", "USDCAD"]
        assert all(len(r["historical_data"]) == 7 for r in data["results"])

    def test_unknown_range_falls_back_to_30_days(self, client: TestClient):
        data = client.post(
            "/history", json={"pairs": ["EURUSD"], "time_range": "5M"}
        ).json()["data"]

        assert data["time_range"] == "30D"
        assert len(data["results"][0]["historical_data"]) == 30

    def test_range_defaults_to_30_days(self, client: TestClient):
        data = client.post("/history", json={"pairs": ["EURUSD"]}).json()["data"]
        assert data["time_range"] == "30D"

    def test_missing_pairs_is_400(self, client: TestClient):
        response = client.post("/history", json={"time_range": "7D"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestHandlerExecution:
    """CPU-bound handlers are plain functions so Starlette runs them in its threadpool."""

    @pytest.mark.parametrize(
        "module,name",
        [
            ("history", "get_history"),
            ("history", "post_history"),
            ("rates", "get_rates"),
            ("rates", "post_rates"),
            ("rates", "convert"),
            ("alerts", "evaluate_alerts"),
        ],
    )
    def test_handler_is_not_coroutine(self, module, name):
        import importlib
        import inspect

        handler = getattr(importlib.import_module(f"fxmonitor.api.routes.{module}"), name)
        assert not inspect.iscoroutinefunction(handler)


class TestTimestamps:
    def test_response_timestamps_are_utc(self, client: TestClient):
        data = client.post("/history", json={"pairs": ["EURUSD"], "time_range": "7D"}).json()["data"]

        stamps = [data["timestamp"]] + [
            bar["timestamp"] for bar in data["results"][0]["historical_data"]
        ]
        for stamp in stamps:
            assert datetime.fromisoformat(stamp).utcoffset().total_seconds() == 0
