"""Named chart time ranges and their lookback windows."""

from __future__ import annotations

from enum import Enum


class TimeRange(str, Enum):
    """Chart time range selectable on the history endpoints."""

    ONE_HOUR = "1H"
    ONE_DAY = "24H"
    ONE_WEEK = "7D"
    ONE_MONTH = "30D"
    THREE_MONTHS = "90D"
    ONE_YEAR = "1Y"
    ALL = "ALL"

    @property
    def days(self) -> int:
        """Number of daily bars generated for this range."""
        return _LOOKBACK_DAYS[self]

    @classmethod
    def parse(cls, value: str) -> "TimeRange":
        """Resolve a range token case-insensitively.

        Raises:
            ValueError: if the token names no known range.
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            valid = ", ".join(r.value for r in cls)
            raise ValueError(f"Unknown time range {value!r}; expected one of {valid}") from None


# Daily series have no intraday resolution, so both 1H and 24H get one bar
_LOOKBACK_DAYS: dict[TimeRange, int] = {
    TimeRange.ONE_HOUR: 1,
    TimeRange.ONE_DAY: 1,
    TimeRange.ONE_WEEK: 7,
    TimeRange.ONE_MONTH: 30,
    TimeRange.THREE_MONTHS: 90,
    TimeRange.ONE_YEAR: 365,
    TimeRange.ALL: 1000,
}
