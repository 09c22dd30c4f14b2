"""Health check endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from fxmonitor.api.dependencies import get_app_settings, get_market_data
from fxmonitor.core.config import Settings
from fxmonitor.schemas.common import HealthResponse
from fxmonitor.services import MarketDataService


router = APIRouter(prefix="/health")


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the API and its reference data.",
)
async def health_check(
    market_data: Annotated[MarketDataService, Depends(get_market_data)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """
    Report overall status.

    The only dependency is the in-memory currency catalog, so the service is
    healthy whenever the catalog is loaded.
    """
    checks = {"catalog": len(market_data.catalog) > 0}

    return HealthResponse(
        status="healthy" if all(checks.values()) else "unhealthy",
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc),
        checks=checks,
    )


@router.get(
    "/live",
    summary="Liveness check",
    description="Check if the API process is alive.",
)
async def liveness_check() -> dict:
    """Kubernetes-style liveness probe."""
    return {"status": "alive"}
