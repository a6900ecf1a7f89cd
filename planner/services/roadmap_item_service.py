# design_capacity_planner/planner/services/roadmap_item_service.py
"""
Roadmap item CRUD with effort estimation.

When factor scores are submitted for a role, that role's score, size band,
focus weeks and work weeks are recomputed with the current settings.
Explicit size/weeks values in the same payload override the computed ones,
and a focus-weeks override without work weeks derives work weeks from the
focus-time ratio.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from planner.db.models.roadmap_item import RoadmapItem
from planner.db.models.scenario import Scenario
from planner.services.activity_service import ActivityService
from planner.services.errors import NotFoundError
from planner.services.estimation import (
    EffortModelConfig,
    Role,
    calculate_effort,
    derive_work_weeks,
    extract_factor_scores,
)
from planner.services.settings_service import SettingsService

logger = logging.getLogger("planner.services.roadmap_items")

ITEM_STATUSES = ("draft", "ready_for_sizing", "sized", "locked")

PLAIN_FIELDS = (
    "key",
    "name",
    "initiative",
    "priority",
    "status",
    "pm_intake",
    "start_date",
    "end_date",
)

EFFORT_FIELDS = tuple(
    f"{role.value}_{suffix}"
    for role in Role
    for suffix in ("factors", "size", "focus_weeks", "work_weeks")
)


def apply_effort(
    values: MutableMapping[str, Any],
    payload: Mapping[str, Any],
    config: EffortModelConfig,
) -> List[Role]:
    """Write effort fields for each role touched by `payload` into `values`.

    Returns the roles whose effort changed.
    """
    touched: List[Role] = []
    for role in Role:
        prefix = role.value
        factors = payload.get(f"{prefix}_factors")
        role_touched = False

        if factors is not None:
            values[f"{prefix}_factors"] = dict(factors)
            scores = extract_factor_scores(factors, role)
            # Checkbox-only updates carry no scores and leave the estimate alone
            if scores:
                result = calculate_effort(role, scores, config)
                values[f"{prefix}_score"] = result.weighted_score
                values[f"{prefix}_size"] = result.size_band.value
                values[f"{prefix}_focus_weeks"] = result.focus_weeks
                values[f"{prefix}_work_weeks"] = result.work_weeks
                role_touched = True

        size = payload.get(f"{prefix}_size")
        focus = payload.get(f"{prefix}_focus_weeks")
        work = payload.get(f"{prefix}_work_weeks")
        if size is not None:
            values[f"{prefix}_size"] = getattr(size, "value", size)
            role_touched = True
        if focus is not None:
            values[f"{prefix}_focus_weeks"] = float(focus)
            if work is None:
                values[f"{prefix}_work_weeks"] = derive_work_weeks(float(focus), config.focus_time_ratio)
            role_touched = True
        if work is not None:
            values[f"{prefix}_work_weeks"] = float(work)
            role_touched = True

        if role_touched:
            touched.append(role)
    return touched


class RoadmapItemService:
    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityService(db)
        self.settings = SettingsService(db)

    def list(self, scenario_id: Optional[str] = None) -> List[RoadmapItem]:
        stmt = select(RoadmapItem)
        if scenario_id:
            stmt = stmt.where(RoadmapItem.scenario_id == scenario_id)
        stmt = stmt.order_by(RoadmapItem.created_at.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get(self, item_id: str) -> RoadmapItem:
        item = self.db.get(RoadmapItem, item_id)
        if item is None:
            raise NotFoundError("Roadmap item", item_id)
        return item

    def _scenario(self, scenario_id: str) -> Scenario:
        scenario = self.db.get(Scenario, scenario_id)
        if scenario is None:
            raise NotFoundError("Scenario", scenario_id)
        return scenario

    def create(self, data: Mapping[str, Any], record_activity: bool = True, commit: bool = True) -> RoadmapItem:
        scenario = self._scenario(str(data.get("scenario_id") or ""))

        key = str(data.get("key") or "").strip()
        name = str(data.get("name") or "").strip()
        if not key or not name:
            raise ValueError("key and name are required")
        status = data.get("status") or "draft"
        if status not in ITEM_STATUSES:
            raise ValueError(f"Invalid status: {status}. Valid statuses: {', '.join(ITEM_STATUSES)}")

        values: Dict[str, Any] = {k: data.get(k) for k in PLAIN_FIELDS if data.get(k) is not None}
        values.update(key=key, name=name, status=status)
        apply_effort(values, data, self.settings.effort_config())

        item = RoadmapItem(scenario_id=scenario.id, **values)
        self.db.add(item)
        self.db.flush()

        if record_activity:
            self.activity.record(
                "roadmap_item_updated",
                f'Added roadmap item "{item.name}"',
                scenario_id=scenario.id,  # type: ignore[arg-type]
                scenario_name=scenario.title,  # type: ignore[arg-type]
                commit=False,
            )
        if commit:
            self.db.commit()
            self.db.refresh(item)
        logger.info("roadmap_item.created", extra={"item_id": item.id, "scenario_id": scenario.id})
        return item

    def update(self, item_id: str, data: Mapping[str, Any]) -> RoadmapItem:
        provided = {k: v for k, v in data.items() if v is not None and (k in PLAIN_FIELDS or k in EFFORT_FIELDS)}
        if not provided:
            raise ValueError("No fields to update")
        if "status" in provided and provided["status"] not in ITEM_STATUSES:
            raise ValueError(
                f"Invalid status: {provided['status']}. Valid statuses: {', '.join(ITEM_STATUSES)}"
            )
        for field in ("key", "name"):
            if field in provided:
                provided[field] = str(provided[field]).strip()
                if not provided[field]:
                    raise ValueError(f"{field} cannot be empty")

        item = self.get(item_id)
        values: Dict[str, Any] = {k: v for k, v in provided.items() if k in PLAIN_FIELDS}
        touched = apply_effort(values, provided, self.settings.effort_config())

        for field, value in values.items():
            setattr(item, field, value)

        scenario = item.scenario
        if touched:
            self.activity.record(
                "effort_updated",
                f'Updated {"/".join(r.value for r in touched)} effort for "{item.name}"',
                scenario_id=item.scenario_id,  # type: ignore[arg-type]
                scenario_name=scenario.title if scenario else None,
                commit=False,
            )
        if any(k in PLAIN_FIELDS or k.endswith("_factors") for k in values):
            self.activity.record(
                "roadmap_item_updated",
                f'Updated roadmap item "{item.name}"',
                scenario_id=item.scenario_id,  # type: ignore[arg-type]
                scenario_name=scenario.title if scenario else None,
                commit=False,
            )

        self.db.commit()
        self.db.refresh(item)
        logger.info(
            "roadmap_item.updated",
            extra={"item_id": item.id, "scenario_id": item.scenario_id, "updated": sorted(values)},
        )
        return item

    def delete(self, item_id: str) -> None:
        item = self.get(item_id)
        scenario = item.scenario
        self.activity.record(
            "roadmap_item_updated",
            f'Deleted roadmap item "{item.name}"',
            scenario_id=item.scenario_id,  # type: ignore[arg-type]
            scenario_name=scenario.title if scenario else None,
            commit=False,
        )
        self.db.delete(item)
        self.db.commit()
        logger.info("roadmap_item.deleted", extra={"item_id": item_id})


__all__ = ["ITEM_STATUSES", "apply_effort", "RoadmapItemService"]
