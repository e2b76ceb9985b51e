"""Indicator engines over candle and number series.

Each engine is a stateless function. Shortages are reported as
InsufficientData values, never raised.
"""

from rscore.indicators.adr_percent import adr_percent, adr_percent_seq, daily_range_percent
from rscore.indicators.atr import AtrResult, atr, atr_multiple_from_sma, true_range
from rscore.indicators.linear_regression import (
    DataPoint,
    LinearRegressionResult,
    calculate_linear_regression,
    calculate_linear_regression_from_numbers,
)
from rscore.indicators.moving_average import (
    MovingAverageLine,
    MovingAverageType,
    calculate_ema,
    calculate_sma,
    ema,
    sma,
    sma_seq,
)

__all__ = [
    "AtrResult",
    "DataPoint",
    "LinearRegressionResult",
    "MovingAverageLine",
    "MovingAverageType",
    "adr_percent",
    "adr_percent_seq",
    "atr",
    "atr_multiple_from_sma",
    "calculate_ema",
    "calculate_linear_regression",
    "calculate_linear_regression_from_numbers",
    "calculate_sma",
    "daily_range_percent",
    "ema",
    "sma",
    "sma_seq",
    "true_range",
]
