# design_capacity_planner/planner/services/scenario_service.py
"""
Scenario CRUD. Every mutation appends an activity log entry in the same
transaction.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from planner.config import settings
from planner.db.models.roadmap_item import RoadmapItem
from planner.db.models.scenario import Scenario
from planner.services.activity_service import ActivityService
from planner.services.errors import ConflictError, NotFoundError
from planner.utils.periods import is_valid_planning_period, year_of

logger = logging.getLogger("planner.services.scenarios")

UPDATABLE_FIELDS = (
    "title",
    "quarter",
    "year",
    "committed",
    "ux_designers",
    "content_designers",
    "weeks_per_period",
    "sprint_length_weeks",
)


class ScenarioService:
    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityService(db)

    def list(self) -> List[Scenario]:
        stmt = select(Scenario).order_by(Scenario.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get(self, scenario_id: str) -> Scenario:
        scenario = self.db.get(Scenario, scenario_id)
        if scenario is None:
            raise NotFoundError("Scenario", scenario_id)
        return scenario

    def create(self, data: Mapping[str, Any]) -> Scenario:
        title = str(data.get("title") or "").strip()
        if not title:
            raise ValueError("title is required")
        quarter = data.get("quarter")
        if not is_valid_planning_period(quarter):
            raise ValueError("quarter must be in YYYY-QN format, e.g. 2026-Q1")

        scenario = Scenario(
            title=title,
            quarter=quarter,
            year=data.get("year") or year_of(quarter),  # type: ignore[arg-type]
            committed=bool(data.get("committed", False)),
            ux_designers=data.get("ux_designers") or 0,
            content_designers=data.get("content_designers") or 0,
            weeks_per_period=data.get("weeks_per_period") or settings.DEFAULT_WEEKS_PER_PERIOD,
            sprint_length_weeks=data.get("sprint_length_weeks") or settings.DEFAULT_SPRINT_LENGTH_WEEKS,
        )
        self.db.add(scenario)
        self.db.flush()

        self.activity.record(
            "scenario_created",
            f'Created scenario "{scenario.title}" for {scenario.quarter}',
            scenario_id=scenario.id,  # type: ignore[arg-type]
            scenario_name=scenario.title,  # type: ignore[arg-type]
            commit=False,
        )
        self.db.commit()
        self.db.refresh(scenario)

        logger.info("scenario.created", extra={"scenario_id": scenario.id})
        return scenario

    def update(self, scenario_id: str, data: Mapping[str, Any]) -> Scenario:
        changes: Dict[str, Any] = {k: data[k] for k in UPDATABLE_FIELDS if k in data and data[k] is not None}
        if not changes:
            raise ValueError("No fields to update")
        if "quarter" in changes and not is_valid_planning_period(changes["quarter"]):
            raise ValueError("quarter must be in YYYY-QN format, e.g. 2026-Q1")
        if "title" in changes:
            changes["title"] = str(changes["title"]).strip()
            if not changes["title"]:
                raise ValueError("title cannot be empty")

        scenario = self.get(scenario_id)
        old_title = scenario.title
        was_committed = bool(scenario.committed)

        for field, value in changes.items():
            setattr(scenario, field, value)
        if "quarter" in changes and "year" not in changes:
            scenario.year = year_of(changes["quarter"])  # type: ignore[assignment]

        if "title" in changes and changes["title"] != old_title:
            self.activity.record(
                "scenario_renamed",
                f'Renamed scenario "{old_title}" to "{scenario.title}"',
                scenario_id=scenario.id,  # type: ignore[arg-type]
                scenario_name=scenario.title,  # type: ignore[arg-type]
                commit=False,
            )
        if changes.get("committed") is True and not was_committed:
            self.activity.record(
                "scenario_committed",
                f'Committed scenario "{scenario.title}" as the plan for {scenario.quarter}',
                scenario_id=scenario.id,  # type: ignore[arg-type]
                scenario_name=scenario.title,  # type: ignore[arg-type]
                commit=False,
            )

        self.db.commit()
        self.db.refresh(scenario)
        logger.info("scenario.updated", extra={"scenario_id": scenario.id, "updated": sorted(changes)})
        return scenario

    def item_count(self, scenario_id: str) -> int:
        stmt = select(func.count()).select_from(RoadmapItem).where(RoadmapItem.scenario_id == scenario_id)
        return int(self.db.execute(stmt).scalar_one())

    def delete(self, scenario_id: str) -> None:
        scenario = self.get(scenario_id)
        count = self.item_count(scenario_id)
        if count:
            raise ConflictError(
                f"Scenario has {count} roadmap item(s); delete them before deleting the scenario"
            )

        self.activity.record(
            "scenario_deleted",
            f'Deleted scenario "{scenario.title}"',
            scenario_id=scenario.id,  # type: ignore[arg-type]
            scenario_name=scenario.title,  # type: ignore[arg-type]
            commit=False,
        )
        self.db.delete(scenario)
        self.db.commit()
        logger.info("scenario.deleted", extra={"scenario_id": scenario_id})


__all__ = ["ScenarioService"]
