"""rscore: relative-strength and moving-average analytics core.

Pure, synchronous transforms from OHLCV candles to indicator values and
LinePoint series:
- Moving averages (SMA/EMA, scalar and series)
- ADR% and ATR volatility measures
- Linear regression over a trailing window
- Relative strength composites, RRG rotation and beta against a benchmark

Shortages are returned as InsufficientData values; check results with
is_insufficient_data() before use.
"""

__version__ = "0.1.0"

from rscore.models import Candle, InsufficientData, LinePoint, is_insufficient_data, ordered
from rscore.service import AnalyticsService, create_service

__all__ = [
    "AnalyticsService",
    "Candle",
    "InsufficientData",
    "LinePoint",
    "create_service",
    "is_insufficient_data",
    "ordered",
]
