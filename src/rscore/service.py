"""Analytics service composing the engines for dashboard views.

The AnalyticsService is the one place that reads settings and logs:
1. Chart overlays: every configured SMA/EMA period for a price chart
2. Volatility snapshot: ADR%, latest ATR, ATR multiple from the reference SMA
3. Relative strength vs a benchmark, for one symbol or ranked over a universe
4. RRG trails for a universe of symbols against one benchmark

Processes that own their logging build the service with create_service(),
which configures structlog from the same settings first.

Insufficient data never raises. The affected item is skipped (overlays,
rankings, trails) or reported as None (snapshot fields, single-symbol
relative strength) and logged at DEBUG.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from rscore.config import AppSettings
from rscore.indicators.adr_percent import adr_percent
from rscore.indicators.atr import atr, atr_multiple_from_sma
from rscore.indicators.linear_regression import calculate_linear_regression_from_numbers
from rscore.indicators.moving_average import (
    MovingAverageLine,
    calculate_ema,
    calculate_sma,
    sma,
)
from rscore.logging import get_logger, setup_logging
from rscore.models import Candle, InsufficientData, is_insufficient_data, ordered
from rscore.strength.composite import compute_relative_strength, rank_universe
from rscore.strength.models import RelativeStrengthResults, RelativeStrengthStats, RotationPoint
from rscore.strength.rotation import get_rrg_trail

logger = get_logger(__name__)


@dataclass
class VolatilitySnapshot:
    """Latest volatility readings for one symbol. None = not enough bars."""

    adr_percent: float | None
    atr: float | None
    atr_multiple_from_sma: float | None
    trend_slope: float | None  # regression slope of closes, price units per bar


@dataclass
class ChartOverlays:
    """Moving average lines for a price chart, split by type."""

    sma: list[MovingAverageLine]
    ema: list[MovingAverageLine]


def _log_shortage(event: str, result: InsufficientData, **fields: object) -> None:
    logger.debug(
        event,
        indicator=result.indicator,
        required=result.required,
        available=result.available,
        **fields,
    )


class AnalyticsService:
    """Runs the indicator and relative strength engines with configured parameters.

    Args:
        settings: Application settings. Defaults loaded from the environment when None.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def moving_average_overlays(self, candles: Sequence[Candle]) -> ChartOverlays:
        """SMA and EMA lines for every configured period that has enough bars."""
        cfg = self._settings.indicators
        overlays = ChartOverlays(sma=[], ema=[])

        for period in cfg.sma_periods:
            line = calculate_sma(candles, period)
            if is_insufficient_data(line):
                _log_shortage("overlay_skipped", line, period=period)
                continue
            overlays.sma.append(line)

        for period in cfg.ema_periods:
            line = calculate_ema(candles, period)
            if is_insufficient_data(line):
                _log_shortage("overlay_skipped", line, period=period)
                continue
            overlays.ema.append(line)

        return overlays

    def volatility_snapshot(self, candles: Sequence[Candle]) -> VolatilitySnapshot:
        """ADR%, latest ATR, ATR multiple from the reference SMA, and trend slope."""
        cfg = self._settings.indicators
        closes = [c.close for c in ordered(candles)]

        adr = adr_percent(candles, cfg.adr_period)
        if is_insufficient_data(adr):
            _log_shortage("snapshot_field_missing", adr, field="adr_percent")
            adr = None

        atr_series = atr(candles, cfg.atr_period).timeseries
        latest_atr = atr_series[-1].value if atr_series else None

        reference = sma(cfg.atr_reference_sma, closes)
        multiple = None
        if is_insufficient_data(reference):
            _log_shortage("snapshot_field_missing", reference, field="atr_multiple_from_sma")
        elif latest_atr is not None:
            multiple = atr_multiple_from_sma(closes[-1], reference, latest_atr)

        regression = calculate_linear_regression_from_numbers(closes, cfg.regression_period)
        slope = None
        if is_insufficient_data(regression):
            _log_shortage("snapshot_field_missing", regression, field="trend_slope")
        else:
            slope = regression.slope

        return VolatilitySnapshot(
            adr_percent=adr,
            atr=latest_atr,
            atr_multiple_from_sma=multiple,
            trend_slope=slope,
        )

    def relative_strength(
        self,
        symbol: str,
        candles: Sequence[Candle],
        benchmark_candles: Sequence[Candle],
    ) -> RelativeStrengthResults | None:
        """Relative strength stats for one symbol, or None when history is too short."""
        result = compute_relative_strength(
            candles, benchmark_candles, self._settings.relative_strength
        )
        if is_insufficient_data(result):
            _log_shortage("relative_strength_skipped", result, symbol=symbol)
            return None

        logger.info(
            "relative_strength",
            symbol=symbol,
            **result.relative_strength_stats.formatted(),
            vol_adjusted_composite=result.vol_adjusted_relative_strength_stats.formatted()[
                "composite"
            ],
        )
        return result

    def rank_relative_strength(
        self,
        universe: Mapping[str, Sequence[Candle]],
        benchmark_candles: Sequence[Candle],
        vol_adjusted: bool = False,
    ) -> dict[str, RelativeStrengthStats]:
        """Percentile-ranked stats for every symbol with enough history.

        Args:
            universe: Symbol to candles.
            benchmark_candles: Benchmark candles shared by the whole universe.
            vol_adjusted: Rank the volatility-adjusted stats instead of the standard ones.

        Returns:
            Symbol to ranked stats, sorted by composite rank descending.
        """
        raw: dict[str, RelativeStrengthStats] = {}
        for symbol, candles in universe.items():
            result = self.relative_strength(symbol, candles, benchmark_candles)
            if result is None:
                continue
            raw[symbol] = (
                result.vol_adjusted_relative_strength_stats
                if vol_adjusted
                else result.relative_strength_stats
            )

        ranked = rank_universe(raw)
        logger.info("universe_ranked", symbols=len(ranked), skipped=len(universe) - len(ranked))
        return dict(sorted(ranked.items(), key=lambda kv: kv[1].composite, reverse=True))

    def rotation_trails(
        self,
        universe: Mapping[str, Sequence[Candle]],
        benchmark_candles: Sequence[Candle],
    ) -> dict[str, list[RotationPoint]]:
        """RRG trail per symbol. Symbols with no computable point are left out."""
        cfg = self._settings.rotation
        trails: dict[str, list[RotationPoint]] = {}

        for symbol, candles in universe.items():
            trail = get_rrg_trail(
                symbol,
                candles,
                benchmark_candles,
                rs_period=cfg.rs_period,
                number_of_observations=cfg.trail_length,
                momentum_period=cfg.momentum_period,
                smoothing_period=cfg.smoothing_period,
            )
            if not trail:
                logger.debug("rotation_trail_empty", symbol=symbol)
                continue
            trails[symbol] = trail
            logger.info(
                "rotation_point",
                symbol=symbol,
                rs_ratio=round(trail[0].rs_ratio, 2),
                rs_momentum=round(trail[0].rs_momentum, 2),
                quadrant=trail[0].quadrant.value,
                observations=len(trail),
            )

        return trails


def create_service(settings: AppSettings | None = None) -> AnalyticsService:
    """Load settings, configure logging from them, and return a ready service."""
    settings = settings or AppSettings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "analytics_service_ready",
        log_level=settings.log_level,
        sma_periods=settings.indicators.sma_periods,
        ema_periods=settings.indicators.ema_periods,
        rs_horizons=settings.relative_strength.horizons(),
        rotation_rs_period=settings.rotation.rs_period,
    )
    return AnalyticsService(settings)
