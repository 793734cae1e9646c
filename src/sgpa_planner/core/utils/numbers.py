"""Numeric helpers shared by the models and the engine."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


def is_number(value: Any) -> bool:
    """True for finite int/float values. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_whole(value: Any) -> bool:
    """True for ints and integral floats (e.g. 4 or 4.0)."""
    return is_number(value) and float(value).is_integer()


def round_half_up(value: float, places: int) -> float:
    """
    Round to ``places`` decimals, ties away from zero (8.125 -> 8.13).

    Goes through the shortest repr of the float so 2.675 rounds to 2.68
    rather than following its binary expansion.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
