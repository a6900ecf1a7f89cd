# design_capacity_planner/planner/api/routes/scenarios.py

from __future__ import annotations

from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from planner.api.deps import get_db, get_write_db, require_uuid
from planner.api.schemas.roadmap_items import RoadmapItemOut
from planner.api.schemas.scenarios import (
    PasteImportRequest,
    PasteImportResponse,
    ScenarioCreate,
    ScenarioOut,
    ScenarioSummaryOut,
    ScenarioUpdate,
)
from planner.services.capacity_service import CapacityService
from planner.services.errors import ConflictError, NotFoundError
from planner.services.estimation import InvalidWeeksPerPeriod
from planner.services.paste_import import import_pasted_items, import_summary, parse_pasted_roadmap_items
from planner.services.scenario_service import ScenarioService


router = APIRouter(prefix="/scenarios", tags=["scenarios"])


@router.get("", response_model=List[ScenarioOut])
def list_scenarios(db: Session = Depends(get_db)) -> List[ScenarioOut]:
    return [ScenarioOut.model_validate(s) for s in ScenarioService(db).list()]


@router.post("", response_model=ScenarioOut, status_code=201)
def create_scenario(req: ScenarioCreate, db: Session = Depends(get_write_db)) -> ScenarioOut:
    try:
        scenario = ScenarioService(db).create(req.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ScenarioOut.model_validate(scenario)


@router.get("/{scenario_id}", response_model=ScenarioOut)
def get_scenario(scenario_id: str, db: Session = Depends(get_db)) -> ScenarioOut:
    require_uuid(scenario_id)
    try:
        return ScenarioOut.model_validate(ScenarioService(db).get(scenario_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.put("/{scenario_id}", response_model=ScenarioOut)
def update_scenario(scenario_id: str, req: ScenarioUpdate, db: Session = Depends(get_write_db)) -> ScenarioOut:
    require_uuid(scenario_id)
    try:
        scenario = ScenarioService(db).update(scenario_id, req.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ScenarioOut.model_validate(scenario)


@router.delete("/{scenario_id}", status_code=204)
def delete_scenario(scenario_id: str, db: Session = Depends(get_write_db)) -> Response:
    require_uuid(scenario_id)
    try:
        ScenarioService(db).delete(scenario_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return Response(status_code=204)


@router.get("/{scenario_id}/summary", response_model=ScenarioSummaryOut)
def get_scenario_summary(
    scenario_id: str,
    basis: Literal["focus", "intake"] = Query("focus"),
    db: Session = Depends(get_db),
) -> ScenarioSummaryOut:
    """
    Capacity summary: items in (initiative, priority) order with cut-line flags, plus totals.
    basis=intake sizes items from their PM intake and checklists times the sprint length.
    """
    require_uuid(scenario_id)
    try:
        scenario = ScenarioService(db).get(scenario_id)
        summary = CapacityService(db).scenario_summary(scenario, basis=basis)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except InvalidWeeksPerPeriod as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return ScenarioSummaryOut(scenario=ScenarioOut.model_validate(scenario), summary=summary)


@router.post("/{scenario_id}/import", response_model=PasteImportResponse)
def import_items(scenario_id: str, req: PasteImportRequest, db: Session = Depends(get_write_db)) -> PasteImportResponse:
    """
    Import roadmap items from a pasted spreadsheet table. With dry_run the parsed rows are returned and nothing is saved.
    """
    require_uuid(scenario_id)
    rows = parse_pasted_roadmap_items(req.raw)
    summary = import_summary(rows)
    try:
        scenario = ScenarioService(db).get(scenario_id)
        if req.dry_run:
            return PasteImportResponse(rows=rows, summary=summary)
        created = import_pasted_items(db, scenario, rows)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return PasteImportResponse(
        rows=rows,
        summary=summary,
        created=[RoadmapItemOut.model_validate(i) for i in created],
    )
