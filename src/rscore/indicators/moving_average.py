"""Simple and exponential moving averages, in scalar and series form.

Scalar forms (sma, ema) work on plain number sequences and return a single
value. Series forms (calculate_sma, calculate_ema) work on candles and return
a MovingAverageLine ready to overlay on a price chart.

The scalar ema and the series calculate_ema seed differently:
- ema() starts smoothing at the first value with no warm-up window.
- calculate_ema() seeds with the plain mean of the first ``period`` values
  and emits its first point at index ``period``.
Both behaviours are relied on by callers and are kept distinct.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from rscore.exceptions import require_period
from rscore.models import Candle, InsufficientData, LinePoint, ordered


class MovingAverageType(str, Enum):
    """Moving average flavour, used to label insufficient-data results."""

    SMA = "SMA"
    EMA = "EMA"


@dataclass
class MovingAverageLine:
    """A moving average series for one period."""

    period: int
    timeseries: list[LinePoint]


def close_price(candle: Candle) -> float:
    """Default extractor: the candle's close."""
    return candle.close


def _alpha(period: int) -> float:
    return 2 / (period + 1)


def sma(period: int, data: Sequence[float]) -> float | InsufficientData:
    """Mean of the trailing ``period`` values."""
    require_period(period)
    if len(data) < period:
        return InsufficientData(MovingAverageType.SMA.value, period, len(data))

    window = data[-period:]
    return sum(window) / len(window)


def ema(period: int, data: Sequence[float]) -> float | InsufficientData:
    """Exponential moving average of the whole sequence.

    Seeds with data[0] and applies ``ema = alpha * x + (1 - alpha) * ema``
    to every later point, alpha = 2 / (period + 1).
    """
    require_period(period)
    if len(data) < period:
        return InsufficientData(MovingAverageType.EMA.value, period, len(data))

    alpha = _alpha(period)
    value = data[0]
    for x in data[1:]:
        value = alpha * x + (1 - alpha) * value
    return value


def sma_seq(period: int, data: Sequence[float]) -> list[float] | InsufficientData:
    """SMA at every index from ``period - 1`` on, using a running sum."""
    require_period(period)
    if len(data) < period:
        return InsufficientData(MovingAverageType.SMA.value, period, len(data))

    out: list[float] = []
    total = 0.0
    for i, x in enumerate(data):
        total += x
        if i >= period - 1:
            out.append(total / period)
            total -= data[i - period + 1]
    return out


def calculate_sma(
    candles: Sequence[Candle],
    period: int,
    extractor: Callable[[Candle], float] = close_price,
) -> MovingAverageLine | InsufficientData:
    """SMA series over candles, one point per candle from index ``period - 1``.

    Args:
        candles: OHLCV candles. Sorted by timestamp before use.
        period: Window length in bars.
        extractor: Value to average for each candle. Defaults to close.

    Returns:
        MovingAverageLine, or InsufficientData when fewer than ``period`` candles.
    """
    require_period(period)
    if len(candles) < period:
        return InsufficientData(MovingAverageType.SMA.value, period, len(candles))

    bars = ordered(candles)
    values = [extractor(c) for c in bars]

    timeseries: list[LinePoint] = []
    total = 0.0
    for i, x in enumerate(values):
        total += x
        if i >= period - 1:
            timeseries.append(LinePoint(time=bars[i].time, value=total / period))
            total -= values[i - period + 1]

    return MovingAverageLine(period=period, timeseries=timeseries)


def calculate_ema(
    candles: Sequence[Candle],
    period: int,
    extractor: Callable[[Candle], float] = close_price,
) -> MovingAverageLine | InsufficientData:
    """EMA series over candles, seeded with the mean of the first ``period`` values.

    The extractor only feeds the seed. The recurrence
    ``ema = (close - ema) * alpha + ema`` runs over candles
    ``period .. n-1`` and emits one point per candle, so the series is
    ``period`` points shorter than the input. With exactly ``period``
    candles the series is empty.

    Args:
        candles: OHLCV candles. Sorted by timestamp before use.
        period: Smoothing period; alpha = 2 / (period + 1).
        extractor: Value averaged for the seed. Defaults to close.

    Returns:
        MovingAverageLine, or InsufficientData when fewer than ``period`` candles.
    """
    require_period(period)
    if len(candles) < period:
        return InsufficientData(MovingAverageType.EMA.value, period, len(candles))

    bars = ordered(candles)
    alpha = _alpha(period)
    value = sum(extractor(c) for c in bars[:period]) / period

    timeseries: list[LinePoint] = []
    for candle in bars[period:]:
        value = (candle.close - value) * alpha + value
        timeseries.append(LinePoint(time=candle.time, value=value))

    return MovingAverageLine(period=period, timeseries=timeseries)
