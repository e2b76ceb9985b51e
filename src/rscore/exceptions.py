"""Custom exceptions for the analytics core.

Only caller mistakes raise. A series that is simply too short for the
requested period is reported as an InsufficientData value instead
(see rscore.models).
"""


class RsCoreError(Exception):
    """Base exception for all analytics core errors."""


class InvalidPeriodError(RsCoreError, ValueError):
    """Raised when a lookback period is outside the range an engine accepts."""


class MisalignedSeriesError(RsCoreError, ValueError):
    """Raised when symbol and benchmark series do not line up bar for bar."""


def require_period(period: int, minimum: int = 1, name: str = "period") -> None:
    """Raise InvalidPeriodError unless ``period`` is an int >= ``minimum``."""
    if isinstance(period, bool) or not isinstance(period, int) or period < minimum:
        raise InvalidPeriodError(f"{name} must be an integer >= {minimum}, got {period!r}")
