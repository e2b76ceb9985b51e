"""Average True Range (ATR).

TR  = max(high - low, |high - prev_close|, |low - prev_close|)
ATR = simple moving average of TR over ``period`` bars

The first bar has no previous close and uses its own close, so its TR is
just high - low.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from rscore.exceptions import require_period
from rscore.models import Candle, LinePoint, ordered


@dataclass
class AtrResult:
    """ATR series for one period. Empty when there are fewer than ``period`` candles."""

    period: int
    timeseries: list[LinePoint]


def true_range(candle: Candle, prev_close: float) -> float:
    """True range of a bar given the previous bar's close."""
    return max(
        candle.high - candle.low,
        abs(candle.high - prev_close),
        abs(candle.low - prev_close),
    )


def atr(candles: Sequence[Candle], period: int) -> AtrResult:
    """Compute the ATR series with a running sum over a sliding window.

    Once ``i >= period - 1`` the ATR at candle i is emitted, then the TR
    leaving the window (index ``i - period + 1``) is subtracted from the sum.

    Args:
        candles: OHLCV candles. Sorted by timestamp before use.
        period: Window length in bars.

    Returns:
        AtrResult with one point per candle from index ``period - 1``.
    """
    require_period(period)
    bars = ordered(candles)

    timeseries: list[LinePoint] = []
    true_ranges: list[float] = []
    running_sum = 0.0

    for i, candle in enumerate(bars):
        prev_close = bars[i - 1].close if i > 0 else candle.close
        tr = true_range(candle, prev_close)
        true_ranges.append(tr)
        running_sum += tr

        if i >= period - 1:
            timeseries.append(LinePoint(time=candle.time, value=running_sum / period))
            running_sum -= true_ranges[i - period + 1]

    return AtrResult(period=period, timeseries=timeseries)


def atr_multiple_from_sma(
    last_close: float, sma_value: float, atr_value: float
) -> float | None:
    """How many ATRs (as % of price) the close sits away from an SMA.

    Formula: ((close - sma) / sma * 100) / (atr / close * 100), rounded to 2 places.

    Returns:
        The multiple, or None when the SMA, close or ATR is zero or missing.
    """
    if not sma_value or not last_close or not atr_value:
        return None

    atr_percent = 100 * (atr_value / last_close)
    percent_from_sma = ((last_close - sma_value) / sma_value) * 100
    return round(percent_from_sma / atr_percent, 2)
