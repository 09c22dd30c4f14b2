"""Price domain models.

Type-safe representations of synthetic daily price history, with a pandas
view for the indicator code.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

import pandas as pd
from pydantic import BaseModel, Field, computed_field


class PriceBar(BaseModel):
    """Single OHLCV price bar covering one calendar day."""

    timestamp: datetime = Field(..., description="Bar timestamp (one per calendar day)")
    open: float = Field(..., gt=0, description="Opening rate")
    high: float = Field(..., gt=0, description="High rate")
    low: float = Field(..., gt=0, description="Low rate")
    close: float = Field(..., gt=0, description="Closing rate")
    volume: float = Field(default=0.0, ge=0, description="Traded volume")

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }

    @computed_field
    @property
    def range(self) -> float:
        """High-low range."""
        return self.high - self.low


class PriceHistory(BaseModel):
    """Ordered daily bars for one pair, oldest first."""

    pair_id: str = Field(default="", description="Pair identifier (empty for ad-hoc series)")
    bars: tuple[PriceBar, ...] = Field(default=())

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.bars)

    def closes(self) -> list[float]:
        """Closing rates in bar order."""
        return [bar.close for bar in self.bars]

    def to_dataframe(self) -> pd.DataFrame:
        """OHLCV frame indexed by bar timestamp."""
        return pd.DataFrame(
            {
                "open": [bar.open for bar in self.bars],
                "high": [bar.high for bar in self.bars],
                "low": [bar.low for bar in self.bars],
                "close": [bar.close for bar in self.bars],
                "volume": [bar.volume for bar in self.bars],
            },
            index=pd.DatetimeIndex([bar.timestamp for bar in self.bars], name="timestamp"),
            dtype=float,
        )

    @classmethod
    def of(cls, series: PriceHistory | Sequence[PriceBar]) -> PriceHistory:
        """Wrap a bare bar sequence; an existing history is returned as is."""
        if isinstance(series, cls):
            return series
        return cls(bars=tuple(series))
