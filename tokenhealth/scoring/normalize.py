"""
Numeric normalization shared by the category scorers.

Provider payloads mix numbers, numeric strings, nulls and junk. Everything
funnels through coerce_number so a bad value reads as "no evidence" instead of
raising.
"""

from __future__ import annotations

import math
from typing import Any

SCORE_MIN = 0
SCORE_MAX = 100


def coerce_number(value: Any) -> float | None:
    """
    Return value as a finite float, or None when it is missing or not numeric.

    Accepts int, float and numeric strings ("1e9", " 42 "). Booleans, NaN and
    infinities are not treated as numbers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Round to nearest int with .5 going up (JavaScript Math.round semantics)."""
    return int(math.floor(value + 0.5))


def get_valid_supply_value(value: Any) -> float | None:
    """Return supply as float; None for missing, non-numeric, NaN or zero (a provider placeholder)."""
    number = coerce_number(value)
    return number or None


def clamp_score(value: float) -> int:
    """Clamp to [SCORE_MIN, SCORE_MAX] and return an int."""
    return max(SCORE_MIN, min(SCORE_MAX, round_half_up(value)))
