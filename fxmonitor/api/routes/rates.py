"""Exchange rate API routes - live quotes, market summary, conversion."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from fxmonitor.analytics import calculate_market_summary, convert_with_quote
from fxmonitor.api.dependencies import get_market_data
from fxmonitor.core.exceptions import NotFoundError
from fxmonitor.core.logging import get_logger
from fxmonitor.schemas.rates import (
    ConversionResponse,
    RatesData,
    RatesRequest,
    RatesResponse,
)
from fxmonitor.services import MarketDataService


logger = get_logger("api.rates")

router = APIRouter()


@router.get(
    "/rates",
    response_model=RatesResponse,
    summary="Current exchange rates",
    description="Quote the requested pairs (all pairs by default) with a market summary.",
)
def get_rates(
    market_data: Annotated[MarketDataService, Depends(get_market_data)],
    pairs: Annotated[
        str | None, Query(description="Comma-separated pair ids, e.g. EURUSD,USDJPY")
    ] = None,
):
    """Unknown pair ids are silently dropped."""
    pair_ids = [p for p in pairs.split(",") if p.strip()] if pairs else None
    rates = market_data.quotes(pair_ids)

    return RatesResponse(
        data=RatesData(
            rates=rates,
            market_summary=calculate_market_summary(rates),
            timestamp=datetime.now(timezone.utc),
        )
    )


@router.post(
    "/rates",
    response_model=RatesResponse,
    response_model_exclude_none=True,
    summary="Quote selected pairs",
    description="Quote an explicit list of pairs; fails when none of them is known.",
)
def post_rates(
    body: RatesRequest,
    market_data: Annotated[MarketDataService, Depends(get_market_data)],
):
    rates = market_data.quotes(body.pairs)
    if not rates:
        raise NotFoundError("No valid currency pairs found")

    return RatesResponse(data=RatesData(rates=rates, timestamp=datetime.now(timezone.utc)))


@router.get(
    "/convert",
    response_model=ConversionResponse,
    summary="Convert an amount",
    description="Convert an amount of the pair's base currency into its quote currency at a fresh rate.",
)
def convert(
    market_data: Annotated[MarketDataService, Depends(get_market_data)],
    pair: Annotated[str, Query(min_length=1, description="Pair id, e.g. EURUSD")],
    amount: Annotated[float, Query(gt=0, description="Amount in the base currency")],
    fees: Annotated[float, Query(ge=0, lt=100, description="Fee percentage")] = 0.0,
):
    currency_pair = market_data.resolve(pair)
    quote = market_data.quote(currency_pair)
    return ConversionResponse(data=convert_with_quote(amount, quote, fees))
