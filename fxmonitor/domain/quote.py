"""Instantaneous quote models: exchange rates, market summary, conversions."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from fxmonitor.domain.currency import CurrencyPair


class ExchangeRate(BaseModel):
    """A synthesized quote for one pair.

    Recomputed on every request; the only link between two quotes for the
    same pair is that the earlier rate can serve as the later one's
    previous close.
    """

    id: str = Field(..., description="Pair identifier")
    pair: CurrencyPair
    rate: float = Field(..., gt=0, description="Current mid rate")
    change_24h: float = Field(..., description="Absolute change vs previous close")
    change_percent_24h: float = Field(..., description="Percent change vs previous close")
    high_24h: float = Field(..., description="Synthetic 24h high")
    low_24h: float = Field(..., description="Synthetic 24h low")
    volume_24h: float = Field(..., ge=0, description="Synthetic 24h volume")
    bid: float = Field(..., description="Bid (rate minus half the spread)")
    ask: float = Field(..., description="Ask (rate plus half the spread)")
    spread: float = Field(..., ge=0, description="One-pip spread")
    last_updated: datetime

    model_config = {"frozen": True}


class MarketSummary(BaseModel):
    """Cross-sectional statistics over a set of quotes."""

    total_pairs: int = Field(..., ge=0)
    gainers: int = Field(..., ge=0, description="Quotes with a positive 24h change")
    losers: int = Field(..., ge=0, description="Quotes with a negative 24h change")
    total_volume: float = Field(..., ge=0)
    market_cap: float = Field(..., ge=0, description="Illustrative volume multiple")
    last_updated: datetime

    model_config = {"frozen": True}


class ConversionResult(BaseModel):
    """Outcome of converting an amount between the two legs of a pair."""

    from_amount: float
    to_amount: float
    rate: float
    from_currency: str
    to_currency: str
    fees: float = Field(default=0.0, description="Fee percentage deducted")
    timestamp: datetime

    model_config = {"frozen": True}
