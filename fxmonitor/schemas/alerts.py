"""Alert schemas for API validation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fxmonitor.domain import AlertType, CurrencyAlert


# =============================================================================
# REQUESTS
# =============================================================================


class AlertCreateRequest(BaseModel):
    """Request to create a rate alert."""
    pair_id: str = Field(..., min_length=1, description="Pair identifier")
    type: AlertType = Field(..., description="Fire when the rate goes above or below the target")
    target_rate: float = Field(..., gt=0, description="Threshold rate")


class AlertUpdateRequest(BaseModel):
    """Request to toggle an alert."""
    id: str = Field(..., min_length=1)
    is_active: bool | None = None


# =============================================================================
# RESPONSES
# =============================================================================


class AlertListData(BaseModel):
    alerts: list[CurrencyAlert]
    total: int
    active: int


class AlertListResponse(BaseModel):
    success: bool = True
    data: AlertListData


class AlertData(BaseModel):
    alert: CurrencyAlert
    message: str


class AlertResponse(BaseModel):
    success: bool = True
    data: AlertData


class AlertEvaluationData(BaseModel):
    triggered: list[CurrencyAlert]
    checked: int = Field(..., description="Active alerts evaluated")


class AlertEvaluationResponse(BaseModel):
    success: bool = True
    data: AlertEvaluationData
