"""Ordinary least-squares line over a trailing window.

slope      = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
intercept  = (Sy - slope*Sx) / n

where n is the window size. The number form assigns synthetic x values
1..period rather than calendar time.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from rscore.exceptions import require_period
from rscore.models import InsufficientData

LINEAR_REGRESSION = "LINREG"


@dataclass
class DataPoint:
    x: float
    y: float


@dataclass
class LinearRegressionResult:
    slope: float
    y_intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.y_intercept


def calculate_linear_regression_from_numbers(
    data: Sequence[float], period: int
) -> LinearRegressionResult | InsufficientData:
    """Fit a line to the last ``period`` values, using x = 1..period."""
    require_period(period, minimum=2)
    if len(data) < period:
        return InsufficientData(LINEAR_REGRESSION, period, len(data))

    window = data[-period:]
    points = [DataPoint(x=i + 1, y=y) for i, y in enumerate(window)]
    return calculate_linear_regression(points, period)


def calculate_linear_regression(
    points: Sequence[DataPoint], period: int
) -> LinearRegressionResult | InsufficientData:
    """Fit a line to the last ``period`` points.

    Args:
        points: Observations ordered oldest first.
        period: Window size. Must be >= 2 so the denominator is non-zero.

    Returns:
        LinearRegressionResult, or InsufficientData when fewer than ``period`` points.
    """
    require_period(period, minimum=2)
    if len(points) < period:
        return InsufficientData(LINEAR_REGRESSION, period, len(points))

    window = points[-period:]
    n = len(window)

    sum_x = sum(p.x for p in window)
    sum_y = sum(p.y for p in window)
    sum_xy = sum(p.x * p.y for p in window)
    sum_x2 = sum(p.x**2 for p in window)

    denominator = n * sum_x2 - sum_x**2
    if denominator == 0:
        # every x identical: no unique fit, report a flat line through the mean
        return LinearRegressionResult(slope=0.0, y_intercept=sum_y / n)

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    y_intercept = (sum_y - slope * sum_x) / n
    return LinearRegressionResult(slope=slope, y_intercept=y_intercept)
