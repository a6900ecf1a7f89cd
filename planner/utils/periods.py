# design_capacity_planner/planner/utils/periods.py
"""
Planning period utilities.
Scenarios are planned per quarter, keyed as "YYYY-QN" (e.g. "2026-Q1").
"""
from __future__ import annotations

import re
from typing import Tuple

QUARTER_PATTERN = re.compile(r"^(\d{4})-Q([1-4])$")


def is_valid_planning_period(period_key: object) -> bool:
    return isinstance(period_key, str) and QUARTER_PATTERN.match(period_key) is not None


def parse_planning_period(period_key: str) -> Tuple[int, int]:
    """
    Parse a "YYYY-QN" key into (year, quarter).

    Raises:
        ValueError: If period_key is not a quarter key
    """
    if not period_key or not isinstance(period_key, str):
        raise ValueError(f"Invalid planning period: must be a non-empty string, got {period_key!r}")

    match = QUARTER_PATTERN.match(period_key.strip().upper())
    if not match:
        raise ValueError(
            f"Invalid planning period '{period_key}': expected format YYYY-QN, e.g. '2026-Q1'"
        )
    return int(match.group(1)), int(match.group(2))


def year_of(period_key: str) -> int:
    return parse_planning_period(period_key)[0]


__all__ = [
    "is_valid_planning_period",
    "parse_planning_period",
    "year_of",
]
