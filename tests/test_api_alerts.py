"""Tests for the rate alert endpoints."""

from __future__ import annotations

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from httpx import AsyncClient


class TestListAlerts:
    def test_demo_alerts(self, client: TestClient):
        response = client.get("/alerts")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()["data"]
        assert data["total"] == 2
        assert data["active"] == 2
        assert [a["id"] for a in data["alerts"]] == ["1", "2"]

    def test_demo_alerts_can_be_disabled(self, test_settings):
        from fxmonitor.api.app import create_api_app

        settings = test_settings.model_copy(update={"seed_demo_alerts": False})
        with TestClient(create_api_app(settings)) as client:
            assert client.get("/alerts").json()["data"]["total"] == 0


class TestCreateAlert:
    def test_create_returns_201(self, client: TestClient):
        response = client.post(
            "/alerts", json={"pair_id": "usdjpy", "type": "below", "target_rate": 148.0}
        )
        assert response.status_code == status.HTTP_201_CREATED

        alert = response.json()["data"]["alert"]
        assert alert["pair_id"] == "USDJPY"
        assert alert["is_active"] is True
        assert alert["triggered_at"] is None

        listed = client.get("/alerts").json()["data"]
        assert listed["total"] == 3
        assert listed["alerts"][0]["id"] == alert["id"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"pair_id": "EURUSD", "type": "sideways", "target_rate": 1.1},
            {"pair_id": "EURUSD", "type": "above", "target_rate": 0},
            {"pair_id": "EURUSD", "type": "above", "target_rate": -1},
            {"pair_id": "EURUSD", "type": "above"},
        ],
    )
    def test_invalid_payload_is_400(self, client: TestClient, payload):
        response = client.post("/alerts", json=payload)
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_pair_is_404(self, client: TestClient):
        response = client.post(
            "/alerts", json={"pair_id": "XXXYYY", "type": "above", "target_rate": 1.0}
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateAndDelete:
    def test_toggle_active(self, client: TestClient):
        response = client.put("/alerts", json={"id": "1", "is_active": False})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["alert"]["is_active"] is False

        assert client.get("/alerts").json()["data"]["active"] == 1

    def test_update_unknown_is_404(self, client: TestClient):
        response = client.put("/alerts", json={"id": "missing", "is_active": False})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, client: TestClient):
        response = client.delete("/alerts", params={"id": "2"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["message"] == "Alert deleted successfully"

        assert [a["id"] for a in client.get("/alerts").json()["data"]["alerts"]] == ["1"]

    def test_delete_without_id_is_400(self, client: TestClient):
        response = client.delete("/alerts")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Alert ID is required"

    def test_delete_unknown_is_404(self, client: TestClient):
        response = client.delete("/alerts", params={"id": "missing"})
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestEvaluate:
    def test_fires_crossed_alert_once(self, client: TestClient):
        created = client.post(
            "/alerts", json={"pair_id": "EURUSD", "type": "above", "target_rate": 0.5}
        ).json()["data"]["alert"]

        data = client.post("/alerts/evaluate").json()["data"]
        assert data["checked"] == 3
        # Demo thresholds sit outside the quote band, only the new alert can fire
        assert [a["id"] for a in data["triggered"]] == [created["id"]]
        assert data["triggered"][0]["triggered_at"] is not None

        again = client.post("/alerts/evaluate").json()["data"]
        assert again["checked"] == 2
        assert again["triggered"] == []

    @pytest.mark.asyncio
    async def test_evaluate_async(self, async_client: AsyncClient):
        response = await async_client.post("/alerts/evaluate")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["triggered"] == []
