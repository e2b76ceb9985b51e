"""Beta and correlation of a symbol against a benchmark.

Both are computed from daily % returns on the dates the two series share,
using population (N) covariance and variance.
"""

import math
from collections.abc import Sequence

from rscore.indicators.linear_regression import DataPoint, calculate_linear_regression
from rscore.models import Candle, InsufficientData, is_insufficient_data
from rscore.stats import compute_mean
from rscore.strength.alignment import align_to_benchmark
from rscore.strength.models import BetaStats

BETA = "BETA"
MIN_OBSERVATIONS = 2


def daily_returns_against(
    symbol_candles: Sequence[Candle],
    benchmark_candles: Sequence[Candle],
) -> list[DataPoint]:
    """Daily % returns as points with x = benchmark return, y = symbol return.

    Days where either previous close is zero or missing are skipped.
    """
    pairs = align_to_benchmark(symbol_candles, benchmark_candles)
    points: list[DataPoint] = []
    for (prev_s, prev_b), (curr_s, curr_b) in zip(pairs, pairs[1:]):
        if not prev_s.close or not prev_b.close:
            continue
        points.append(
            DataPoint(
                x=(curr_b.close - prev_b.close) / prev_b.close * 100,
                y=(curr_s.close - prev_s.close) / prev_s.close * 100,
            )
        )
    return points


def compute_beta(
    symbol_candles: Sequence[Candle],
    benchmark_candles: Sequence[Candle],
) -> BetaStats | InsufficientData:
    """Beta, correlation and regression line of symbol vs benchmark returns.

    Returns:
        BetaStats rounded to 2 places, or InsufficientData with fewer than
        two daily return observations. A flat benchmark (zero variance)
        yields beta 0 and correlation 0.
    """
    points = daily_returns_against(symbol_candles, benchmark_candles)
    n = len(points)
    if n < MIN_OBSERVATIONS:
        return InsufficientData(BETA, MIN_OBSERVATIONS, n)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    x_mean = compute_mean(xs)
    y_mean = compute_mean(ys)

    covariance = sum((x - x_mean) * (y - y_mean) for x, y in zip(xs, ys)) / n
    variance_x = sum((x - x_mean) ** 2 for x in xs) / n
    variance_y = sum((y - y_mean) ** 2 for y in ys) / n

    beta = covariance / variance_x if variance_x else 0.0
    spread = math.sqrt(variance_x) * math.sqrt(variance_y)
    correlation = covariance / spread if spread else 0.0

    line = calculate_linear_regression(points, n)
    if is_insufficient_data(line):
        return line

    return BetaStats(
        beta=round(beta, 2),
        correlation=round(correlation, 2),
        slope=line.slope,
        intercept=line.y_intercept,
        observations=n,
    )
