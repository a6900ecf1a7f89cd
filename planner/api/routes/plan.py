# design_capacity_planner/planner/api/routes/plan.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from planner.api.deps import get_db
from planner.services.capacity_service import CapacityService
from planner.services.estimation.plan import CommittedPlanSummary, QuarterCapacity


router = APIRouter(prefix="/plan", tags=["plan"])


@router.get("/committed", response_model=CommittedPlanSummary)
def committed_plan(db: Session = Depends(get_db)) -> CommittedPlanSummary:
    """
    Utilization of designer capacity across all committed scenarios.
    """
    return CapacityService(db).committed_plan()


@router.get("/quarterly", response_model=List[QuarterCapacity])
def quarterly_capacity(
    committed_only: bool = Query(False),
    db: Session = Depends(get_db),
) -> List[QuarterCapacity]:
    return CapacityService(db).quarterly_capacity(committed_only=committed_only)
