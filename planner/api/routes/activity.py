# design_capacity_planner/planner/api/routes/activity.py

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from planner.api.deps import get_db, get_write_db, require_uuid
from planner.api.schemas.activity import ActivityCreate, ActivityOut
from planner.services.activity_service import ActivityService


router = APIRouter(prefix="/activity", tags=["activity"])


@router.get("", response_model=List[ActivityOut])
def list_activity(scenario_id: Optional[str] = Query(None), db: Session = Depends(get_db)) -> List[ActivityOut]:
    """
    Latest activity entries, newest first.
    """
    if scenario_id is not None:
        require_uuid(scenario_id)
    return [ActivityOut.model_validate(e) for e in ActivityService(db).latest(scenario_id)]


@router.post("", response_model=ActivityOut, status_code=201)
def create_activity(req: ActivityCreate, db: Session = Depends(get_write_db)) -> ActivityOut:
    if req.scenario_id is not None:
        require_uuid(req.scenario_id)
    try:
        entry = ActivityService(db).record(
            req.type,
            req.description,
            scenario_id=req.scenario_id,
            scenario_name=req.scenario_name,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ActivityOut.model_validate(entry)
