# design_capacity_planner/planner/api/schemas/estimation.py

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from planner.services.estimation import EffortResult, Role, SizeBand, TimeEstimate
from planner.services.estimation.intake_sizing import (
    ContentDesignInputs,
    PMIntake,
    ProductDesignInputs,
    RuleSizing,
)


class FactorOut(BaseModel):
    name: str
    weight: float
    label: str
    description: str


class RoleModelOut(BaseModel):
    role: Role
    label: str
    description: str
    factors: List[FactorOut]
    time_table: Dict[SizeBand, TimeEstimate]


class EffortRequest(BaseModel):
    role: Role
    # Loosely typed on purpose: unknown names and out-of-range scores are dropped
    scores: Dict[str, object] = Field(default_factory=dict)


class EffortResponse(EffortResult):
    role: Role
    sprints: float


class IntakeSizingRequest(BaseModel):
    pm_intake: PMIntake = Field(default_factory=PMIntake)
    product_design: Optional[ProductDesignInputs] = None
    content_design: Optional[ContentDesignInputs] = None
    sprint_length_weeks: Optional[int] = Field(None, ge=1, le=4)


class RoleSizingOut(RuleSizing):
    designer_weeks: float


class IntakeSizingResponse(BaseModel):
    ux: Optional[RoleSizingOut] = None
    content: Optional[RoleSizingOut] = None
