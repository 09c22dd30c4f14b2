"""Pytest configuration and fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Callable, Generator

import numpy as np
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from fxmonitor.core.config import Settings
from fxmonitor.domain import CurrencyCatalog, PriceBar


TEST_SEED = 42


@pytest.fixture
def test_settings() -> Settings:
    """Deterministic settings for API tests."""
    return Settings(random_seed=TEST_SEED, log_format="text")


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    from fxmonitor.api.app import create_api_app

    app = create_api_app(test_settings)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client for the FastAPI app."""
    from fxmonitor.api.app import create_api_app

    app = create_api_app(test_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source."""
    return np.random.default_rng(TEST_SEED)


@pytest.fixture
def catalog() -> CurrencyCatalog:
    return CurrencyCatalog()


@pytest.fixture
def make_bars() -> Callable[[list[float]], list[PriceBar]]:
    """Build a daily series from closing prices (open = previous close)."""

    def _make(closes: list[float]) -> list[PriceBar]:
        start = datetime(2025, 1, 1, tzinfo=timezone.utc)
        bars = []
        previous = closes[0]
        for i, close in enumerate(closes):
            bars.append(
                PriceBar(
                    timestamp=start + timedelta(days=i),
                    open=previous,
                    high=max(previous, close),
                    low=min(previous, close),
                    close=close,
                    volume=1_000_000.0,
                )
            )
            previous = close
        return bars

    return _make
