"""Floating-point comparison with absolute or relative tolerance."""

from __future__ import annotations

import math

__all__ = ["double_compare", "double_delta"]

_SLACK = 1e-15


def double_compare(expected: float, result: float, max_error: float) -> bool:
    """Whether result is within max_error of expected, absolutely or relatively."""
    max_error += _SLACK
    if math.isnan(expected):
        return math.isnan(result)
    if math.isinf(expected):
        if expected > 0:
            return result > 0 and math.isinf(result)
        return result < 0 and math.isinf(result)
    if math.isnan(result) or math.isinf(result):
        return False
    if abs(result - expected) <= max_error + _SLACK:
        return True
    low_bound = expected * (1.0 - max_error)
    high_bound = expected * (1.0 + max_error)
    low, high = min(low_bound, high_bound), max(low_bound, high_bound)
    return result + _SLACK >= low and result <= high + _SLACK


def double_delta(expected: float, result: float) -> float:
    """The smaller of the absolute and the relative error of result."""
    absolute = abs(result - expected)
    if abs(expected) > 1e-9:
        return min(absolute, abs(absolute / expected))
    return absolute