"""Shared test fixtures for the analytics core."""

import logging
from collections.abc import Callable, Sequence

import pytest
import structlog

from rscore.config import (
    AppSettings,
    IndicatorSettings,
    RelativeStrengthSettings,
    RotationSettings,
)
from rscore.models import Candle

DAY_MS = 86_400_000
START_MS = 1_704_067_200_000  # 2024-01-01T00:00:00Z

CandleFactory = Callable[..., list[Candle]]


def build_candles(
    closes: Sequence[float],
    spread: float = 1.0,
    start_ms: int = START_MS,
    interval_ms: int = DAY_MS,
) -> list[Candle]:
    """Daily candles with the given closes and high/low = close +/- spread."""
    return [
        Candle(
            timestamp_ms=start_ms + i * interval_ms,
            open=close,
            high=close + spread,
            low=close - spread,
            close=close,
            volume=1_000.0,
        )
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def make_candles() -> CandleFactory:
    """Return a factory building ascending daily candles from closes."""
    return build_candles


@pytest.fixture
def mock_settings() -> AppSettings:
    """Return AppSettings with small lookbacks so tests need few bars."""
    return AppSettings(
        log_level="DEBUG",
        indicators=IndicatorSettings(
            sma_periods=[3, 5],
            ema_periods=[3],
            adr_period=5,
            atr_period=3,
            atr_reference_sma=5,
            regression_period=5,
        ),
        relative_strength=RelativeStrengthSettings(
            one_month_bars=2,
            three_month_bars=4,
            six_month_bars=6,
            one_year_bars=8,
        ),
        rotation=RotationSettings(
            rs_period=5,
            momentum_period=3,
            smoothing_period=0,
            trail_length=4,
        ),
    )


@pytest.fixture
def restore_logging():
    """Put the root logger and structlog config back after a test configures them."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
