# design_capacity_planner/planner/api/routes/estimation.py

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from planner.api.deps import get_db
from planner.api.schemas.estimation import (
    EffortRequest,
    EffortResponse,
    FactorOut,
    IntakeSizingRequest,
    IntakeSizingResponse,
    RoleModelOut,
    RoleSizingOut,
)
from planner.config import settings
from planner.services.estimation import (
    calculate_effort,
    estimate_sprints,
    get_role_model,
    resolve_factor_definitions,
)
from planner.services.estimation.intake_sizing import designer_weeks, size_content, size_ux
from planner.services.settings_service import SettingsService


router = APIRouter(prefix="/estimation", tags=["estimation"])


@router.get("/factors/{role}", response_model=RoleModelOut)
def get_factors(role: str, db: Session = Depends(get_db)) -> RoleModelOut:
    """
    Factor definitions for a role, with the deployment's weight overrides applied.
    """
    try:
        info = get_role_model(role)  # type: ignore[arg-type]
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    config = SettingsService(db).effort_config()
    factors = resolve_factor_definitions(info.role, config.weights_for(info.role))
    return RoleModelOut(
        role=info.role,
        label=info.label,
        description=info.description,
        factors=[FactorOut(name=f.name, weight=f.weight, label=f.label, description=f.description) for f in factors],
        time_table=info.time_table,
    )


@router.post("/effort", response_model=EffortResponse)
def estimate_effort(req: EffortRequest, db: Session = Depends(get_db)) -> EffortResponse:
    try:
        config = SettingsService(db).effort_config()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    result = calculate_effort(req.role, req.scores, config)
    return EffortResponse(
        role=req.role,
        sprints=estimate_sprints(result.focus_weeks),
        **result.model_dump(),
    )


@router.post("/intake-sizing", response_model=IntakeSizingResponse)
def intake_sizing(req: IntakeSizingRequest) -> IntakeSizingResponse:
    """
    Rule-based T-shirt sizing from PM intake and design checklists.
    """
    sprint_length = req.sprint_length_weeks or settings.DEFAULT_SPRINT_LENGTH_WEEKS
    out = IntakeSizingResponse()
    if req.product_design is not None:
        sizing = size_ux(req.product_design, req.pm_intake)
        out.ux = RoleSizingOut(designer_weeks=designer_weeks(sizing, sprint_length), **sizing.model_dump())
    if req.content_design is not None:
        sizing = size_content(req.content_design)
        out.content = RoleSizingOut(designer_weeks=designer_weeks(sizing, sprint_length), **sizing.model_dump())
    return out
