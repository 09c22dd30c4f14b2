"""Currency amount conversion."""

from __future__ import annotations

from datetime import datetime, timezone

from fxmonitor.domain import ConversionResult, ExchangeRate


def convert_currency(
    amount: float,
    from_rate: float,
    to_rate: float,
    fees: float = 0.0,
) -> float:
    """
    Convert ``amount`` between two rates quoted against a common currency.

    ``fees`` is a percentage deducted from the converted amount (0.5 = 0.5%).
    """
    converted = (amount / from_rate) * to_rate
    return converted * (1 - fees / 100)


def convert_with_quote(
    amount: float,
    quote: ExchangeRate,
    fees: float = 0.0,
) -> ConversionResult:
    """Convert ``amount`` of the pair's base currency into its quote currency."""
    return ConversionResult(
        from_amount=amount,
        to_amount=convert_currency(amount, 1.0, quote.rate, fees),
        rate=quote.rate,
        from_currency=quote.pair.base,
        to_currency=quote.pair.quote,
        fees=fees,
        timestamp=datetime.now(timezone.utc),
    )
