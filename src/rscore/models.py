"""Core data models shared by every analytics engine.

Candles come in from the market-data layer already parsed; engines read
them and emit LinePoint series keyed by the candle's display date so a
chart can overlay any series without knowing which engine produced it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, TypeGuard


@dataclass
class Candle:
    """A single OHLCV observation for one day or intraday bucket.

    ``close`` may be zero when the upstream feed has a gap. A missing close
    (None) is stored as 0.0, and engines that divide by close guard against zero.
    """

    timestamp_ms: int
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    date_str: str | None = None

    def __post_init__(self) -> None:
        if self.close is None:
            self.close = 0.0

    @property
    def time(self) -> str:
        """Display label: the feed's date string, else the UTC date of the timestamp."""
        if self.date_str:
            return self.date_str
        return millis_to_date_str(self.timestamp_ms)


@dataclass
class LinePoint:
    """One scalar observation aligned to a candle's display time."""

    time: str
    value: float


@dataclass(frozen=True)
class InsufficientData:
    """Returned in place of a result when a series is shorter than required.

    This is an expected data-availability outcome, not a failure. Callers
    check it with is_insufficient_data() before using the result.
    """

    indicator: str
    required: int
    available: int

    @property
    def message(self) -> str:
        return f"Not enough data to calculate {self.indicator}: {self.available} < {self.required}"


def is_insufficient_data(value: Any) -> TypeGuard[InsufficientData]:
    """Return True if an engine result is an InsufficientData marker."""
    return isinstance(value, InsufficientData)


def ordered(candles: Iterable[Candle]) -> list[Candle]:
    """Return a new list of candles sorted ascending by timestamp.

    The sort is stable and never touches the caller's list.
    """
    return sorted(candles, key=lambda c: c.timestamp_ms)


def millis_to_date_str(timestamp_ms: int) -> str:
    """Format epoch milliseconds as a UTC ``YYYY-MM-DD`` string."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d")
