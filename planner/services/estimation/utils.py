# design_capacity_planner/planner/services/estimation/utils.py

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


def clamp(value: Optional[float], min_value: float, max_value: float) -> float:
    """Clamp a possibly None float into [min_value, max_value]. None -> min_value."""
    if value is None:
        return min_value
    return max(min_value, min(max_value, value))


def round_half_up(value: float, places: int = 1) -> float:
    """Round to `places` decimals, ties away from zero (0.25 -> 0.3)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def as_valid_score(value: object) -> Optional[int]:
    """Return value as an int if it is an integral score in [1, 5], else None.

    Booleans and non-finite numbers are rejected; 3.0 is accepted as 3.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        value = int(value)
    if 1 <= value <= 5:
        return value
    return None


__all__ = ["clamp", "round_half_up", "as_valid_score"]
