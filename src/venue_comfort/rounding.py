"""Display rounding.

All displayed figures round halves up (16.5 -> 17, -2.5 -> -2), unlike
Python's built-in ``round``, which rounds halves to the nearest even
number (``round(16.5) == 16``).
"""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float | int:
    """Round to ``ndigits`` decimals with halves rounded up.

    Args:
        value: Number to round
        ndigits: Decimal places to keep

    Returns:
        An int when ``ndigits`` is 0, otherwise a float
    """
    if ndigits == 0:
        return math.floor(value + 0.5)
    scale = 10**ndigits
    return math.floor(value * scale + 0.5) / scale
