"""Relative strength and rotation data models.

RelativeStrengthStats/Results are pydantic models because they cross the
JSON boundary to the dashboard (camelCase aliases). Rotation records are
plain dataclasses.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RelativeStrengthPeriod(str, Enum):
    """Field names of a RelativeStrengthStats record, in display order."""

    ONE_MONTH = "one_month"
    THREE_MONTH = "three_month"
    SIX_MONTH = "six_month"
    ONE_YEAR = "one_year"
    COMPOSITE = "composite"


class RelativeStrengthStats(BaseModel):
    """Per-horizon relative strength values plus the blended composite."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    one_month: float = Field(alias="oneMonth")
    three_month: float = Field(alias="threeMonth")
    six_month: float = Field(alias="sixMonth")
    one_year: float = Field(alias="oneYear")
    composite: float

    def value(self, period: RelativeStrengthPeriod) -> float:
        return getattr(self, period.value)

    def formatted(self) -> dict[str, str]:
        """Two-decimal display strings keyed by field name."""
        return {p.value: f"{self.value(p):.2f}" for p in RelativeStrengthPeriod}


class RelativeStrengthResults(BaseModel):
    """Standard and volatility-adjusted stats for one symbol."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    relative_strength_stats: RelativeStrengthStats = Field(alias="relativeStrengthStats")
    vol_adjusted_relative_strength_stats: RelativeStrengthStats = Field(
        alias="volAdjustedRelativeStrengthStats"
    )


class RotationQuadrant(str, Enum):
    """RRG quadrant, split at 100 on both axes."""

    LEADING = "leading"
    WEAKENING = "weakening"
    LAGGING = "lagging"
    IMPROVING = "improving"


def classify_quadrant(rs_ratio: float, rs_momentum: float) -> RotationQuadrant:
    if rs_ratio >= 100:
        return RotationQuadrant.LEADING if rs_momentum >= 100 else RotationQuadrant.WEAKENING
    return RotationQuadrant.IMPROVING if rs_momentum >= 100 else RotationQuadrant.LAGGING


@dataclass
class RotationCoordinates:
    """Latest RS-Ratio (x axis) and RS-Momentum (y axis) for a window."""

    rs_ratio: float
    rs_momentum: float


@dataclass
class RotationPoint:
    """One observation on a symbol's RRG trail."""

    symbol: str
    timestamp_ms: int
    date_str: str
    price: float
    benchmark_price: float
    rs_value: float  # price / benchmark price
    rs_ratio: float
    rs_momentum: float

    @property
    def quadrant(self) -> RotationQuadrant:
        return classify_quadrant(self.rs_ratio, self.rs_momentum)


@dataclass
class BetaStats:
    """Beta and correlation of a symbol's daily % returns against a benchmark's.

    ``slope``/``intercept`` describe the OLS line of symbol return on
    benchmark return, for drawing over the scatter plot.
    """

    beta: float
    correlation: float
    slope: float
    intercept: float
    observations: int
