# design_capacity_planner/planner/services/estimation/interfaces.py

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Role(str, Enum):
    """Design disciplines that carry their own factor model and time table."""
    UX = "ux"
    CONTENT = "content"


class SizeBand(str, Enum):
    """Discrete effort categories, smallest first."""
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"


# Sparse mapping factor name -> score (1-5). Absent factors are excluded, not zero.
FactorScores = Mapping[str, object]


@dataclass(frozen=True)
class FactorDefinition:
    name: str
    weight: float
    label: str
    description: str

    def __post_init__(self) -> None:
        if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
            raise ValueError(f"Factor {self.name} weight must be a number, got {self.weight!r}")
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise ValueError(f"Factor {self.name} weight must be positive, got {self.weight!r}")


class TimeEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    focus_weeks: float
    work_weeks: float


class EffortResult(BaseModel):
    """Result of the score -> band -> time pipeline for one role.

    weighted_score: weighted average of the valid factor scores (0 when none)
    size_band: band the score falls into
    focus_weeks / work_weeks: time table lookup for (band, role)
    """
    model_config = ConfigDict(frozen=True)

    size_band: SizeBand
    focus_weeks: float = Field(..., ge=0)
    work_weeks: float = Field(..., ge=0)
    weighted_score: float


class BandThresholds(BaseModel):
    """Upper (inclusive) score bounds per band.

    A score maps to the first band whose bound it does not exceed; anything
    above ``l`` is XL. ``xl`` is the nominal top of the scoring scale.
    """
    model_config = ConfigDict(frozen=True)

    xs: float = 1.5
    s: float = 2.5
    m: float = 3.5
    l: float = 4.5
    xl: float = 5.0

    @model_validator(mode="after")
    def check_ascending(self) -> "BandThresholds":
        if not (self.xs < self.s < self.m < self.l <= self.xl):
            raise ValueError(
                "size band thresholds must be ascending: xs < s < m < l <= xl"
            )
        return self


DEFAULT_FOCUS_TIME_RATIO = 0.75
MIN_FOCUS_TIME_RATIO = 0.4
MAX_FOCUS_TIME_RATIO = 0.9


class EffortModelConfig(BaseModel):
    """Per-deployment estimation settings, passed explicitly to the kernel."""
    model_config = ConfigDict(frozen=True)

    ux_weights: Dict[str, float] = Field(default_factory=dict)
    content_weights: Dict[str, float] = Field(default_factory=dict)
    pm_intake_multiplier: float = 1.0
    focus_time_ratio: float = DEFAULT_FOCUS_TIME_RATIO
    size_bands: BandThresholds = Field(default_factory=BandThresholds)

    def weights_for(self, role: Role) -> Dict[str, float]:
        return self.ux_weights if role == Role.UX else self.content_weights


class CapacityItem(BaseModel):
    """Roadmap item reduced to what the capacity accumulator needs."""
    model_config = ConfigDict(frozen=True)

    item_id: Optional[str] = None
    initiative: str = ""
    priority: float = 0
    ux_designer_weeks: float = 0.0
    content_designer_weeks: float = 0.0


class ItemCapacityFlags(BaseModel):
    item_id: Optional[str] = None
    initiative: str
    priority: float
    ux_designer_weeks: float
    content_designer_weeks: float
    accumulated_ux_weeks: float
    accumulated_content_weeks: float
    above_cut_line_ux: bool
    above_cut_line_content: bool


class CapacityTotals(BaseModel):
    total_ux_weeks: float
    total_content_weeks: float
    ux_capacity_weeks: float
    content_capacity_weeks: float
    # total - capacity: positive means demand exceeds capacity
    ux_surplus_deficit: float
    content_surplus_deficit: float
    ux_headcount_needed: int
    content_headcount_needed: int


class CapacitySummary(BaseModel):
    items: List[ItemCapacityFlags] = Field(default_factory=list)
    totals: CapacityTotals


__all__ = [
    "Role",
    "SizeBand",
    "FactorScores",
    "FactorDefinition",
    "TimeEstimate",
    "EffortResult",
    "BandThresholds",
    "EffortModelConfig",
    "CapacityItem",
    "ItemCapacityFlags",
    "CapacityTotals",
    "CapacitySummary",
    "DEFAULT_FOCUS_TIME_RATIO",
    "MIN_FOCUS_TIME_RATIO",
    "MAX_FOCUS_TIME_RATIO",
]
