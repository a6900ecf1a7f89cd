# design_capacity_planner/planner/services/estimation/time_model.py

from __future__ import annotations

from typing import Dict, Optional

from planner.services.estimation.interfaces import (
    DEFAULT_FOCUS_TIME_RATIO,
    MAX_FOCUS_TIME_RATIO,
    MIN_FOCUS_TIME_RATIO,
    Role,
    SizeBand,
    TimeEstimate,
)
from planner.services.estimation.utils import clamp, round_half_up

# Sprints are fixed at two weeks; not user-configurable.
SPRINT_LENGTH_WEEKS = 2

# (focus_weeks, work_weeks) per band
UX_TIME_TABLE: Dict[SizeBand, TimeEstimate] = {
    SizeBand.XS: TimeEstimate(focus_weeks=0.5, work_weeks=1.0),
    SizeBand.S: TimeEstimate(focus_weeks=1.0, work_weeks=2.0),
    SizeBand.M: TimeEstimate(focus_weeks=2.0, work_weeks=4.0),
    SizeBand.L: TimeEstimate(focus_weeks=4.0, work_weeks=8.0),
    SizeBand.XL: TimeEstimate(focus_weeks=6.0, work_weeks=12.0),
}

CONTENT_TIME_TABLE: Dict[SizeBand, TimeEstimate] = {
    SizeBand.XS: TimeEstimate(focus_weeks=0.5, work_weeks=1.0),
    SizeBand.S: TimeEstimate(focus_weeks=1.0, work_weeks=2.0),
    SizeBand.M: TimeEstimate(focus_weeks=1.5, work_weeks=3.0),
    SizeBand.L: TimeEstimate(focus_weeks=3.0, work_weeks=6.0),
    SizeBand.XL: TimeEstimate(focus_weeks=5.0, work_weeks=10.0),
}

_TABLES: Dict[Role, Dict[SizeBand, TimeEstimate]] = {
    Role.UX: UX_TIME_TABLE,
    Role.CONTENT: CONTENT_TIME_TABLE,
}


def map_band_to_time(band: SizeBand, role: Role) -> TimeEstimate:
    return _TABLES[Role(role)][SizeBand(band)]


def clamp_focus_time_ratio(value: Optional[float]) -> float:
    """Clamp a configured ratio into [0.4, 0.9]; None falls back to 0.75."""
    if value is None:
        return DEFAULT_FOCUS_TIME_RATIO
    return clamp(float(value), MIN_FOCUS_TIME_RATIO, MAX_FOCUS_TIME_RATIO)


def derive_work_weeks(focus_weeks: float, focus_time_ratio: Optional[float] = None) -> float:
    """Work weeks for a known focus-week figure: focus / ratio, one decimal."""
    ratio = DEFAULT_FOCUS_TIME_RATIO if focus_time_ratio is None else focus_time_ratio
    if ratio <= 0:
        raise ValueError(f"focus_time_ratio must be positive (got {ratio!r})")
    return round_half_up(focus_weeks / ratio, 1)


def estimate_sprints(focus_weeks: float) -> float:
    """Rough sprint count (may be fractional); rounding is left to the caller."""
    return focus_weeks / SPRINT_LENGTH_WEEKS


__all__ = [
    "SPRINT_LENGTH_WEEKS",
    "UX_TIME_TABLE",
    "CONTENT_TIME_TABLE",
    "map_band_to_time",
    "clamp_focus_time_ratio",
    "derive_work_weeks",
    "estimate_sprints",
]
