# design_capacity_planner/planner/api/schemas/scenarios.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from planner.api.schemas.roadmap_items import RoadmapItemOut
from planner.services.estimation import CapacitySummary
from planner.services.paste_import import ImportSummary, ParsedRow
from planner.utils.periods import is_valid_planning_period


class ScenarioCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    quarter: str
    year: Optional[int] = None
    committed: bool = False
    ux_designers: float = Field(0, ge=0, le=100)
    content_designers: float = Field(0, ge=0, le=100)
    weeks_per_period: Optional[int] = Field(None, ge=1, le=52)
    sprint_length_weeks: Optional[int] = Field(None, ge=1, le=4)

    @field_validator("quarter")
    @classmethod
    def check_quarter(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_valid_planning_period(v):
            raise ValueError("quarter must be in YYYY-QN format, e.g. 2026-Q1")
        return v


class ScenarioUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    quarter: Optional[str] = None
    year: Optional[int] = None
    committed: Optional[bool] = None
    ux_designers: Optional[float] = Field(None, ge=0, le=100)
    content_designers: Optional[float] = Field(None, ge=0, le=100)
    weeks_per_period: Optional[int] = Field(None, ge=1, le=52)
    sprint_length_weeks: Optional[int] = Field(None, ge=1, le=4)

    @field_validator("quarter")
    @classmethod
    def check_quarter(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_valid_planning_period(v):
            raise ValueError("quarter must be in YYYY-QN format, e.g. 2026-Q1")
        return v


class ScenarioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    quarter: str
    year: Optional[int] = None
    committed: bool
    ux_designers: float
    content_designers: float
    weeks_per_period: int
    sprint_length_weeks: int
    created_at: datetime
    updated_at: datetime


class ScenarioSummaryOut(BaseModel):
    scenario: ScenarioOut
    summary: CapacitySummary


class PasteImportRequest(BaseModel):
    raw: str
    dry_run: bool = False


class PasteImportResponse(BaseModel):
    rows: List[ParsedRow]
    summary: ImportSummary
    created: List[RoadmapItemOut] = Field(default_factory=list)
