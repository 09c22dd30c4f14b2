"""API routes package."""

from . import (
    alerts,
    health,
    history,
    rates,
)


__all__ = [
    "alerts",
    "health",
    "history",
    "rates",
]
