"""Relative rotation graph (RRG) coordinates.

RS          = symbol close / benchmark close (optionally SMA-smoothed)
RS-Ratio    = 100 * RS / WMA(RS, rs_period)
RS-Momentum = 100 * RS-Ratio / WMA(RS-Ratio, momentum_period)

Both axes centre on 100; see RotationQuadrant for how a point is read.
A zero benchmark close gives an RS of 0 for that bar rather than an error.
A trail is the same calculation repeated on windows stepped back one bar
at a time, newest point first.
"""

import math
from collections.abc import Sequence

from rscore.exceptions import MisalignedSeriesError, require_period
from rscore.indicators.moving_average import sma_seq
from rscore.models import Candle, InsufficientData, is_insufficient_data, ordered
from rscore.strength.models import RotationCoordinates, RotationPoint

ROTATION = "RRG"


def wma(data: Sequence[float], period: int) -> float:
    """Weighted mean of the first ``period`` values, weight ``period - i`` on data[i].

    Returns nan when there are fewer than ``period`` values.
    """
    if len(data) < period:
        return math.nan

    total = 0.0
    weight_sum = 0
    for i in range(period):
        weight = period - i
        total += data[i] * weight
        weight_sum += weight
    return total / weight_sum


def _ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, 0.0 when the denominator is zero."""
    if not denominator:
        return 0.0
    return numerator / denominator


def calculate_rrg_point(
    symbol_candles: Sequence[Candle],
    benchmark_candles: Sequence[Candle],
    rs_period: int,
    momentum_period: int,
    smoothing_period: int = 3,
) -> RotationCoordinates | InsufficientData:
    """Latest RS-Ratio and RS-Momentum for a pair of bar-aligned series.

    Args:
        symbol_candles: Symbol candles, one per benchmark candle.
        benchmark_candles: Benchmark candles on the same dates.
        rs_period: WMA window for RS-Ratio.
        momentum_period: WMA window for RS-Momentum.
        smoothing_period: SMA applied to raw RS first; 0 or 1 disables it.

    Returns:
        RotationCoordinates, or InsufficientData when either series is
        shorter than ``smoothing_period + rs_period + momentum_period``.

    Raises:
        MisalignedSeriesError: If the two series differ in length.
    """
    require_period(rs_period, name="rs_period")
    require_period(momentum_period, name="momentum_period")
    require_period(smoothing_period, minimum=0, name="smoothing_period")

    required = smoothing_period + rs_period + momentum_period
    available = min(len(symbol_candles), len(benchmark_candles))
    if available < required:
        return InsufficientData(ROTATION, required, available)
    if len(symbol_candles) != len(benchmark_candles):
        raise MisalignedSeriesError(
            f"symbol has {len(symbol_candles)} candles, benchmark has {len(benchmark_candles)}"
        )

    prices = [c.close for c in ordered(symbol_candles)]
    benchmark_prices = [c.close for c in ordered(benchmark_candles)]
    rs = [_ratio(p, b) for p, b in zip(prices, benchmark_prices)]

    smoothed = sma_seq(smoothing_period, rs) if smoothing_period > 1 else rs
    if is_insufficient_data(smoothed):
        return smoothed

    rs_ratios: list[float] = []
    for i in range(rs_period - 1, len(smoothed)):
        window = smoothed[i - rs_period + 1 : i + 1]
        rs_ratios.append(_ratio(smoothed[i], wma(window, rs_period)) * 100)

    rs_momentums: list[float] = []
    for i in range(momentum_period, len(rs_ratios)):
        window = rs_ratios[i - momentum_period : i + 1]
        rs_momentums.append(_ratio(rs_ratios[i], wma(window, momentum_period)) * 100)

    return RotationCoordinates(rs_ratio=rs_ratios[-1], rs_momentum=rs_momentums[-1])


def get_rrg_trail(
    ticker: str,
    symbol_candles: Sequence[Candle],
    benchmark_candles: Sequence[Candle],
    rs_period: int = 125,
    number_of_observations: int = 10,
    momentum_period: int = 10,
    smoothing_period: int = 0,
) -> list[RotationPoint]:
    """RRG trail for one symbol, newest observation first.

    Observation i uses the window ending i bars before the latest candle.
    The trail stops early at the first window without enough history or
    without a benchmark bar for every date in it.
    """
    require_period(number_of_observations, minimum=0, name="number_of_observations")
    total_period = rs_period + momentum_period + smoothing_period
    bars = ordered(symbol_candles)
    benchmark_by_date = {c.time: c for c in benchmark_candles}

    points: list[RotationPoint] = []
    for i in range(number_of_observations):
        start = len(bars) - (total_period + i)
        if start < 0:
            break

        window_symbol = bars[start : start + total_period]
        window_benchmark = [
            benchmark_by_date[c.time] for c in window_symbol if c.time in benchmark_by_date
        ]
        if len(window_benchmark) < total_period:
            break

        coords = calculate_rrg_point(
            window_symbol, window_benchmark, rs_period, momentum_period, smoothing_period
        )
        if is_insufficient_data(coords):
            break

        last, last_benchmark = window_symbol[-1], window_benchmark[-1]
        points.append(
            RotationPoint(
                symbol=ticker,
                timestamp_ms=last.timestamp_ms,
                date_str=last.time,
                price=last.close,
                benchmark_price=last_benchmark.close,
                rs_value=_ratio(last.close, last_benchmark.close),
                rs_ratio=coords.rs_ratio,
                rs_momentum=coords.rs_momentum,
            )
        )

    return points
