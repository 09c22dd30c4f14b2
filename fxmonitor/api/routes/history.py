"""Historical data API routes - synthetic series with trend and volatility analysis."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from fxmonitor.api.dependencies import get_app_settings, get_market_data
from fxmonitor.core.config import Settings
from fxmonitor.core.exceptions import BadRequestError
from fxmonitor.core.logging import get_logger
from fxmonitor.domain import TimeRange
from fxmonitor.schemas.history import (
    BatchHistoryData,
    BatchHistoryResponse,
    HistoryData,
    HistoryRequest,
    HistoryResponse,
    PairHistoryData,
)
from fxmonitor.services import MarketDataService, PairHistory


logger = get_logger("api.history")

router = APIRouter(prefix="/history")


def _to_schema(history: PairHistory) -> PairHistoryData:
    return PairHistoryData(
        pair=history.pair,
        historical_data=list(history.prices.bars),
        trend_analysis=history.trend,
        volatility_metrics=history.volatility,
    )


@router.get(
    "",
    response_model=HistoryResponse,
    summary="Pair history",
    description="Daily OHLC history for one pair with trend and volatility analysis.",
)
def get_history(
    market_data: Annotated[MarketDataService, Depends(get_market_data)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    pair: Annotated[str | None, Query(description="Pair id, e.g. EURUSD")] = None,
    range_token: Annotated[
        str | None,
        Query(alias="range", description="One of 1H, 24H, 7D, 30D, 90D, 1Y, ALL"),
    ] = None,
):
    if not pair:
        raise BadRequestError("Pair ID is required")

    try:
        time_range = TimeRange.parse(range_token or settings.default_time_range)
    except ValueError as e:
        raise BadRequestError(str(e)) from e

    currency_pair = market_data.resolve(pair)
    history = market_data.history(currency_pair, time_range)

    return HistoryResponse(
        data=HistoryData(
            pair=history.pair,
            historical_data=list(history.prices.bars),
            trend_analysis=history.trend,
            volatility_metrics=history.volatility,
            time_range=time_range,
            timestamp=datetime.now(timezone.utc),
        )
    )


@router.post(
    "",
    response_model=BatchHistoryResponse,
    summary="Batch pair history",
    description="History and analysis for several pairs; unknown pairs are skipped.",
)
def post_history(
    body: HistoryRequest,
    market_data: Annotated[MarketDataService, Depends(get_market_data)],
):
    try:
        time_range = TimeRange.parse(body.time_range)
    except ValueError:
        logger.debug(f"Unknown time range {body.time_range!r}, using 30D")
        time_range = TimeRange.ONE_MONTH

    pair_ids = [pair_id.strip().upper() for pair_id in body.pairs]
    results = [
        _to_schema(market_data.history(pair, time_range))
        for pair in (market_data.catalog.get(pair_id) for pair_id in pair_ids)
        if pair is not None
    ]

    return BatchHistoryResponse(
        data=BatchHistoryData(
            time_range=time_range,
            results=results,
            timestamp=datetime.now(timezone.utc),
        )
    )
