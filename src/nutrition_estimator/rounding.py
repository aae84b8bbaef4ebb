"""Rounding helpers shared by nutrition calculations."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round a non-negative value half-up to the given number of decimals.

    Python's built-in ``round`` uses banker's rounding, which would change
    published totals such as ``round(0.5) == 0``.
    """
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def round_int(value: float) -> int:
    """Round half-up to an integer."""
    return int(round_half_up(value))
