# design_capacity_planner/planner/api/routes/settings.py

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from planner.api.deps import get_write_db
from planner.api.schemas.settings import SettingsOut, SettingsUpdate
from planner.services.settings_service import SettingsService


router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SettingsOut)
def get_settings(db: Session = Depends(get_write_db)) -> SettingsOut:
    """
    Return the settings row, creating it with defaults on first access.
    """
    return SettingsOut.model_validate(SettingsService(db).get_or_create())


@router.put("", response_model=SettingsOut)
def update_settings(req: SettingsUpdate, db: Session = Depends(get_write_db)) -> SettingsOut:
    try:
        row = SettingsService(db).update(
            effort_model=req.effort_model,
            time_model=req.time_model,
            size_bands=req.size_bands,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return SettingsOut.model_validate(row)
