"""Benchmark-relative analytics.

Relative strength composites across 1M/3M/6M/1Y horizons, relative rotation
graph (RRG) coordinates and trails, and beta/correlation against a benchmark.
"""

from rscore.strength.alignment import align_to_benchmark, aligned_closes
from rscore.strength.beta import compute_beta, daily_returns_against
from rscore.strength.composite import (
    compute_relative_strength,
    percentile_rank,
    rank_universe,
)
from rscore.strength.models import (
    BetaStats,
    RelativeStrengthPeriod,
    RelativeStrengthResults,
    RelativeStrengthStats,
    RotationCoordinates,
    RotationPoint,
    RotationQuadrant,
    classify_quadrant,
)
from rscore.strength.rotation import calculate_rrg_point, get_rrg_trail, wma

__all__ = [
    "BetaStats",
    "RelativeStrengthPeriod",
    "RelativeStrengthResults",
    "RelativeStrengthStats",
    "RotationCoordinates",
    "RotationPoint",
    "RotationQuadrant",
    "align_to_benchmark",
    "aligned_closes",
    "calculate_rrg_point",
    "classify_quadrant",
    "compute_beta",
    "compute_relative_strength",
    "daily_returns_against",
    "get_rrg_trail",
    "percentile_rank",
    "rank_universe",
    "wma",
]
