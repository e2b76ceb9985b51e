"""Small statistics and display-formatting helpers.

Population statistics (N denominator) are used throughout, matching how the
dashboard reports volatility and beta.
"""

import math
from collections.abc import Sequence


def compute_mean(values: Sequence[float]) -> float:
    """Arithmetic mean. Returns 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def compute_standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation. Returns 0.0 for an empty sequence."""
    if not values:
        return 0.0
    mean = compute_mean(values)
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def simple_returns(closes: Sequence[float]) -> list[float]:
    """Bar-over-bar simple returns. A zero or missing prior close yields 0.0."""
    returns: list[float] = []
    for prev, curr in zip(closes, closes[1:]):
        if not prev:
            returns.append(0.0)
        else:
            returns.append(curr / prev - 1)
    return returns


def percentage_string(fraction: float) -> str:
    """Format a decimal fraction as a percentage, e.g. 0.1234 -> '12.34%'."""
    return f"{fraction * 100:.2f}%"


def format_number_to_short_string(number: float) -> str:
    """Abbreviate large numbers with K/M suffixes, e.g. 1_500_000 -> '2M'."""
    abs_number = abs(number)
    sign = "-" if number < 0 else ""
    if abs_number >= 1_000_000:
        return f"{sign}{abs_number / 1_000_000:.0f}M"
    if abs_number >= 1_000:
        return f"{sign}{abs_number / 1_000:.0f}K"
    return f"{number:g}"


def format_price(price: float) -> str:
    """Format a price with exactly two decimal places."""
    return f"{price:.2f}"
