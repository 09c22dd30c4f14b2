"""Rate alert domain model."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


AlertType = Literal["above", "below"]


class CurrencyAlert(BaseModel):
    """Threshold alert on a pair's rate."""

    id: str
    pair_id: str
    type: AlertType
    target_rate: float = Field(..., gt=0)
    is_active: bool = True
    created_at: datetime
    triggered_at: datetime | None = None

    model_config = {"frozen": True}

    def is_met_by(self, rate: float) -> bool:
        """Whether ``rate`` crosses this alert's threshold."""
        if self.type == "above":
            return rate >= self.target_rate
        return rate <= self.target_rate
