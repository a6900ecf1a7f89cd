# design_capacity_planner/planner/api/routes/roadmap_items.py

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from planner.api.deps import get_db, get_write_db, require_uuid
from planner.api.schemas.roadmap_items import RoadmapItemCreate, RoadmapItemOut, RoadmapItemUpdate
from planner.services.errors import NotFoundError
from planner.services.roadmap_item_service import RoadmapItemService


router = APIRouter(prefix="/roadmap-items", tags=["roadmap-items"])


@router.get("", response_model=List[RoadmapItemOut])
def list_items(scenario_id: Optional[str] = Query(None), db: Session = Depends(get_db)) -> List[RoadmapItemOut]:
    if scenario_id is not None:
        require_uuid(scenario_id)
    return [RoadmapItemOut.model_validate(i) for i in RoadmapItemService(db).list(scenario_id)]


@router.post("", response_model=RoadmapItemOut, status_code=201)
def create_item(req: RoadmapItemCreate, db: Session = Depends(get_write_db)) -> RoadmapItemOut:
    require_uuid(req.scenario_id)
    try:
        item = RoadmapItemService(db).create(req.model_dump(exclude_none=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return RoadmapItemOut.model_validate(item)


@router.get("/{item_id}", response_model=RoadmapItemOut)
def get_item(item_id: str, db: Session = Depends(get_db)) -> RoadmapItemOut:
    require_uuid(item_id)
    try:
        return RoadmapItemOut.model_validate(RoadmapItemService(db).get(item_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.put("/{item_id}", response_model=RoadmapItemOut)
def update_item(item_id: str, req: RoadmapItemUpdate, db: Session = Depends(get_write_db)) -> RoadmapItemOut:
    """
    Partial update. Submitting factor scores recomputes that role's effort; explicit size/weeks win.
    """
    require_uuid(item_id)
    try:
        item = RoadmapItemService(db).update(item_id, req.model_dump(exclude_none=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return RoadmapItemOut.model_validate(item)


@router.delete("/{item_id}", status_code=204)
def delete_item(item_id: str, db: Session = Depends(get_write_db)) -> Response:
    require_uuid(item_id)
    try:
        RoadmapItemService(db).delete(item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return Response(status_code=204)
