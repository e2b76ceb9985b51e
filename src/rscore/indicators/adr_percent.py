"""Average Daily Range percent (ADR%).

ADR% is the mean of each bar's high-low range expressed as a percentage of
its close. A bar with a zero or missing close contributes 0 instead of
dividing by zero.
"""

from collections.abc import Sequence

from rscore.exceptions import require_period
from rscore.models import Candle, InsufficientData, LinePoint, ordered
from rscore.stats import compute_mean

ADR_PERCENT = "ADR%"


def daily_range_percent(candle: Candle) -> float:
    """Return 100 * (high - low) / close, or 0 when close is zero or missing."""
    if not candle.close:
        return 0.0
    return 100 * ((candle.high - candle.low) / candle.close)


def adr_percent(candles: Sequence[Candle], period: int) -> float | InsufficientData:
    """ADR% over the most recent ``period`` candles.

    Args:
        candles: OHLCV candles in any order. The caller's list is not reordered.
        period: Number of trailing bars to average.

    Returns:
        ADR% as a float, or InsufficientData when fewer than ``period`` candles.
    """
    require_period(period)
    if len(candles) < period:
        return InsufficientData(ADR_PERCENT, period, len(candles))

    window = ordered(candles)[-period:]
    return compute_mean([daily_range_percent(c) for c in window])


def adr_percent_seq(
    candles: Sequence[Candle], period: int
) -> list[LinePoint] | InsufficientData:
    """ADR% for every trailing window of ``period`` candles.

    Each point is stamped with the last candle of its window. Every window
    is recomputed from scratch; periods and bar counts are small.
    """
    require_period(period)
    if len(candles) < period:
        return InsufficientData(ADR_PERCENT, period, len(candles))

    bars = ordered(candles)
    timeseries: list[LinePoint] = []
    for end in range(period, len(bars) + 1):
        window = bars[end - period : end]
        value = compute_mean([daily_range_percent(c) for c in window])
        timeseries.append(LinePoint(time=window[-1].time, value=value))

    return timeseries
