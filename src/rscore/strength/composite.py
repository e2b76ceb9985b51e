"""Relative strength composite against a benchmark.

For each lookback horizon (1M, 3M, 6M, 1Y in daily bars):

    return       = close[-1] / close[-1 - bars] - 1
    standard     = (symbol_return - benchmark_return) * 100
    vol_adjusted = symbol_return / symbol_vol - benchmark_return / benchmark_vol

where vol is the population standard deviation of daily returns over the
same window. The composite is a weighted sum of the four horizons, weights
taken from RelativeStrengthSettings.

rank_universe() turns raw stats for many symbols into 0-100 percentile
ranks so symbols can be compared on one scale.
"""

from collections.abc import Mapping, Sequence

from rscore.config import RelativeStrengthSettings
from rscore.models import Candle, InsufficientData
from rscore.stats import compute_standard_deviation, simple_returns
from rscore.strength.alignment import aligned_closes
from rscore.strength.models import (
    RelativeStrengthPeriod,
    RelativeStrengthResults,
    RelativeStrengthStats,
)

RELATIVE_STRENGTH = "RS"


def horizon_return(closes: Sequence[float], bars: int) -> float:
    """Simple return over the last ``bars`` bars; 0 when the start close is zero."""
    start = closes[-1 - bars]
    if not start:
        return 0.0
    return closes[-1] / start - 1


def realized_volatility(closes: Sequence[float], bars: int) -> float:
    """Population std dev of the daily returns inside the last ``bars`` bars."""
    return compute_standard_deviation(simple_returns(closes[-1 - bars :]))


def _risk_adjusted(ret: float, vol: float) -> float:
    if vol == 0:
        return 0.0
    return ret / vol


def blend_composite(values: Mapping[str, float], weights: Mapping[str, float]) -> float:
    """Weighted linear combination of horizon values keyed by horizon name."""
    return sum(weights[name] * values[name] for name in weights)


def compute_relative_strength(
    symbol_candles: Sequence[Candle],
    benchmark_candles: Sequence[Candle],
    settings: RelativeStrengthSettings | None = None,
) -> RelativeStrengthResults | InsufficientData:
    """Compute standard and volatility-adjusted relative strength stats.

    Args:
        symbol_candles: The symbol's daily candles, any order.
        benchmark_candles: The benchmark's daily candles, any order.
        settings: Horizons and composite weights. Defaults apply when None.

    Returns:
        RelativeStrengthResults, or InsufficientData when the series share
        fewer than ``longest horizon + 1`` dates.
    """
    settings = settings or RelativeStrengthSettings()
    horizons = settings.horizons()
    required = max(horizons.values()) + 1

    symbol_closes, benchmark_closes = aligned_closes(symbol_candles, benchmark_candles)
    if len(symbol_closes) < required:
        return InsufficientData(RELATIVE_STRENGTH, required, len(symbol_closes))

    standard: dict[str, float] = {}
    vol_adjusted: dict[str, float] = {}
    for name, bars in horizons.items():
        symbol_ret = horizon_return(symbol_closes, bars)
        benchmark_ret = horizon_return(benchmark_closes, bars)
        standard[name] = (symbol_ret - benchmark_ret) * 100
        vol_adjusted[name] = _risk_adjusted(
            symbol_ret, realized_volatility(symbol_closes, bars)
        ) - _risk_adjusted(benchmark_ret, realized_volatility(benchmark_closes, bars))

    weights = settings.weights()
    return RelativeStrengthResults(
        relative_strength_stats=RelativeStrengthStats(
            **standard, composite=blend_composite(standard, weights)
        ),
        vol_adjusted_relative_strength_stats=RelativeStrengthStats(
            **vol_adjusted, composite=blend_composite(vol_adjusted, weights)
        ),
    )


def percentile_rank(value: float, population: Sequence[float]) -> float:
    """Share of the other members of ``population`` strictly below ``value``, 0-100.

    A population of one ranks 100.
    """
    if len(population) <= 1:
        return 100.0
    below = sum(1 for v in population if v < value)
    return 100 * below / (len(population) - 1)


def rank_universe(
    stats_by_symbol: Mapping[str, RelativeStrengthStats],
) -> dict[str, RelativeStrengthStats]:
    """Replace every field with its percentile rank across the universe."""
    columns = {
        period: [stats.value(period) for stats in stats_by_symbol.values()]
        for period in RelativeStrengthPeriod
    }
    return {
        symbol: RelativeStrengthStats(
            **{
                period.value: percentile_rank(stats.value(period), columns[period])
                for period in RelativeStrengthPeriod
            }
        )
        for symbol, stats in stats_by_symbol.items()
    }
