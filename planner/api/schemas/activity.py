# design_capacity_planner/planner/api/schemas/activity.py

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ActivityType = Literal[
    "scenario_created",
    "scenario_committed",
    "scenario_deleted",
    "scenario_renamed",
    "roadmap_item_updated",
    "effort_updated",
]


class ActivityCreate(BaseModel):
    type: ActivityType
    description: str = Field(..., min_length=1)
    scenario_id: Optional[str] = None
    scenario_name: Optional[str] = None


class ActivityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    timestamp: datetime
    type: str
    scenario_id: Optional[str] = None
    scenario_name: Optional[str] = None
    description: str
