# design_capacity_planner/planner/api/schemas/roadmap_items.py

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from planner.services.estimation import SizeBand

ItemStatus = Literal["draft", "ready_for_sizing", "sized", "locked"]


class RoadmapItemCreate(BaseModel):
    scenario_id: str
    key: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    initiative: Optional[str] = None
    priority: Optional[int] = None
    status: ItemStatus = "draft"

    pm_intake: Optional[Dict[str, Any]] = None
    ux_factors: Optional[Dict[str, Any]] = None
    content_factors: Optional[Dict[str, Any]] = None

    # Explicit overrides win over values computed from factor scores
    ux_size: Optional[SizeBand] = None
    content_size: Optional[SizeBand] = None
    ux_focus_weeks: Optional[float] = Field(None, ge=0)
    content_focus_weeks: Optional[float] = Field(None, ge=0)
    ux_work_weeks: Optional[float] = Field(None, ge=0)
    content_work_weeks: Optional[float] = Field(None, ge=0)

    start_date: Optional[str] = None
    end_date: Optional[str] = None


class RoadmapItemUpdate(BaseModel):
    key: Optional[str] = Field(None, min_length=1, max_length=50)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    initiative: Optional[str] = None
    priority: Optional[int] = None
    status: Optional[ItemStatus] = None

    pm_intake: Optional[Dict[str, Any]] = None
    ux_factors: Optional[Dict[str, Any]] = None
    content_factors: Optional[Dict[str, Any]] = None

    ux_size: Optional[SizeBand] = None
    content_size: Optional[SizeBand] = None
    ux_focus_weeks: Optional[float] = Field(None, ge=0)
    content_focus_weeks: Optional[float] = Field(None, ge=0)
    ux_work_weeks: Optional[float] = Field(None, ge=0)
    content_work_weeks: Optional[float] = Field(None, ge=0)

    start_date: Optional[str] = None
    end_date: Optional[str] = None


class RoadmapItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    scenario_id: str
    key: str
    name: str
    initiative: Optional[str] = None
    priority: Optional[int] = None
    status: str

    pm_intake: Optional[Dict[str, Any]] = None
    ux_factors: Optional[Dict[str, Any]] = None
    content_factors: Optional[Dict[str, Any]] = None

    ux_score: Optional[float] = None
    content_score: Optional[float] = None
    ux_size: Optional[str] = None
    content_size: Optional[str] = None
    ux_focus_weeks: Optional[float] = None
    content_focus_weeks: Optional[float] = None
    ux_work_weeks: Optional[float] = None
    content_work_weeks: Optional[float] = None

    start_date: Optional[str] = None
    end_date: Optional[str] = None
    created_at: datetime
    updated_at: datetime
