"""Rate alert API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from fxmonitor.api.dependencies import get_alert_store, get_market_data
from fxmonitor.core.exceptions import BadRequestError
from fxmonitor.schemas.alerts import (
    AlertCreateRequest,
    AlertData,
    AlertEvaluationData,
    AlertEvaluationResponse,
    AlertListData,
    AlertListResponse,
    AlertResponse,
    AlertUpdateRequest,
)
from fxmonitor.services import AlertStore, MarketDataService


router = APIRouter(prefix="/alerts")


@router.get(
    "",
    response_model=AlertListResponse,
    summary="List alerts",
    description="All alerts, newest first, with total and active counts.",
)
def list_alerts(
    store: Annotated[AlertStore, Depends(get_alert_store)],
):
    alerts = store.list_alerts()
    return AlertListResponse(
        data=AlertListData(
            alerts=alerts,
            total=len(alerts),
            active=sum(1 for alert in alerts if alert.is_active),
        )
    )


@router.post(
    "",
    response_model=AlertResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create alert",
)
def create_alert(
    body: AlertCreateRequest,
    store: Annotated[AlertStore, Depends(get_alert_store)],
    market_data: Annotated[MarketDataService, Depends(get_market_data)],
):
    pair = market_data.resolve(body.pair_id)
    alert = store.create(pair.id, body.type, body.target_rate)
    return AlertResponse(data=AlertData(alert=alert, message="Alert created successfully"))


@router.put(
    "",
    response_model=AlertResponse,
    summary="Update alert",
    description="Toggle an alert's active flag.",
)
def update_alert(
    body: AlertUpdateRequest,
    store: Annotated[AlertStore, Depends(get_alert_store)],
):
    alert = store.update(body.id, is_active=body.is_active)
    return AlertResponse(data=AlertData(alert=alert, message="Alert updated successfully"))


@router.delete(
    "",
    response_model=AlertResponse,
    summary="Delete alert",
)
def delete_alert(
    store: Annotated[AlertStore, Depends(get_alert_store)],
    alert_id: Annotated[str | None, Query(alias="id")] = None,
):
    if not alert_id:
        raise BadRequestError("Alert ID is required")
    alert = store.delete(alert_id)
    return AlertResponse(data=AlertData(alert=alert, message="Alert deleted successfully"))


@router.post(
    "/evaluate",
    response_model=AlertEvaluationResponse,
    summary="Evaluate alerts",
    description="Quote every pair with an active alert and fire the alerts whose threshold is crossed.",
)
def evaluate_alerts(
    store: Annotated[AlertStore, Depends(get_alert_store)],
    market_data: Annotated[MarketDataService, Depends(get_market_data)],
):
    active = store.active()
    quotes = market_data.quotes(sorted({alert.pair_id for alert in active}))
    triggered = store.trigger(quotes)
    return AlertEvaluationResponse(
        data=AlertEvaluationData(triggered=triggered, checked=len(active))
    )
