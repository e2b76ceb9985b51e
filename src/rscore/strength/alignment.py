"""Symbol/benchmark alignment by trading date.

Symbol and benchmark bars often come from separate requests and can differ
in coverage (halts, late listings). Comparisons are made only on dates both
series have, matched on the candle's display date.
"""

from collections.abc import Sequence

from rscore.models import Candle, ordered


def align_to_benchmark(
    symbol_candles: Sequence[Candle],
    benchmark_candles: Sequence[Candle],
) -> list[tuple[Candle, Candle]]:
    """Pair symbol and benchmark candles that share a date.

    Args:
        symbol_candles: The symbol's candles in any order.
        benchmark_candles: The benchmark's candles in any order.

    Returns:
        (symbol, benchmark) pairs sorted ascending by the symbol's timestamp.
        Dates missing from either side are dropped.
    """
    benchmark_by_date = {c.time: c for c in benchmark_candles}
    return [
        (candle, benchmark_by_date[candle.time])
        for candle in ordered(symbol_candles)
        if candle.time in benchmark_by_date
    ]


def aligned_closes(
    symbol_candles: Sequence[Candle],
    benchmark_candles: Sequence[Candle],
) -> tuple[list[float], list[float]]:
    """Return (symbol closes, benchmark closes) over the common dates."""
    pairs = align_to_benchmark(symbol_candles, benchmark_candles)
    return [s.close for s, _ in pairs], [b.close for _, b in pairs]
