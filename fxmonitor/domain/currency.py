"""Currency pair reference data.

The catalog is fixed: ten major and cross pairs, each anchored to one
hardcoded base rate that the simulation fluctuates around.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field


class CurrencyPair(BaseModel):
    """A tradable currency pair and its simulation anchor rate."""

    id: str = Field(..., description="Pair identifier, e.g. EURUSD")
    base: str = Field(..., min_length=3, max_length=3, description="Base currency code")
    quote: str = Field(..., min_length=3, max_length=3, description="Quote currency code")
    symbol: str = Field(..., description="Display symbol, e.g. EUR/USD")
    name: str = Field(..., description="Display name")
    base_rate: float = Field(..., gt=0, description="Rate the simulation fluctuates around")

    model_config = {"frozen": True}


CURRENCY_PAIRS: tuple[CurrencyPair, ...] = (
    CurrencyPair(id="EURUSD", base="EUR", quote="USD", symbol="EUR/USD", name="Euro / US Dollar", base_rate=1.0875),
    CurrencyPair(id="GBPUSD", base="GBP", quote="USD", symbol="GBP/USD", name="British Pound / US Dollar", base_rate=1.2634),
    CurrencyPair(id="USDJPY", base="USD", quote="JPY", symbol="USD/JPY", name="US Dollar / Japanese Yen", base_rate=149.82),
    CurrencyPair(id="USDCHF", base="USD", quote="CHF", symbol="USD/CHF", name="US Dollar / Swiss Franc", base_rate=0.8756),
    CurrencyPair(id="AUDUSD", base="AUD", quote="USD", symbol="AUD/USD", name="Australian Dollar / US Dollar", base_rate=0.6542),
    CurrencyPair(id="USDCAD", base="USD", quote="CAD", symbol="USD/CAD", name="US Dollar / Canadian Dollar", base_rate=1.3698),
    CurrencyPair(id="NZDUSD", base="NZD", quote="USD", symbol="NZD/USD", name="New Zealand Dollar / US Dollar", base_rate=0.5892),
    CurrencyPair(id="EURGBP", base="EUR", quote="GBP", symbol="EUR/GBP", name="Euro / British Pound", base_rate=0.8607),
    CurrencyPair(id="EURJPY", base="EUR", quote="JPY", symbol="EUR/JPY", name="Euro / Japanese Yen", base_rate=162.95),
    CurrencyPair(id="GBPJPY", base="GBP", quote="JPY", symbol="GBP/JPY", name="British Pound / Japanese Yen", base_rate=189.34),
)


class CurrencyCatalog(Mapping[str, CurrencyPair]):
    """Read-only lookup of pairs by identifier, in catalog order."""

    def __init__(self, pairs: tuple[CurrencyPair, ...] = CURRENCY_PAIRS) -> None:
        self._pairs: Mapping[str, CurrencyPair] = MappingProxyType(
            {pair.id: pair for pair in pairs}
        )

    def __getitem__(self, pair_id: str) -> CurrencyPair:
        return self._pairs[pair_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def select(self, pair_ids: list[str] | None) -> list[CurrencyPair]:
        """Known pairs among ``pair_ids`` in catalog order (all when None)."""
        if pair_ids is None:
            return list(self._pairs.values())
        wanted = set(pair_ids)
        return [pair for pair in self._pairs.values() if pair.id in wanted]
