"""Half-up rounding used wherever calculators round to integers."""

import math


def round_half_up(value: float) -> int | float:
    """Round to the nearest integer, ties toward +infinity.

    Python's round() uses banker's rounding (round(2.5) == 2); every
    rounded quantity in this domain uses half-up instead. NaN and
    infinities are returned unchanged so they propagate through the
    arithmetic like any other degenerate value.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
        >>> round_half_up(float("inf"))
        inf
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)
