# design_capacity_planner/planner/services/capacity_service.py

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from planner.config import settings
from planner.db.models.roadmap_item import RoadmapItem
from planner.db.models.scenario import Scenario
from planner.services.estimation import (
    CapacityItem,
    CapacitySummary,
    capacity_weeks,
    sort_capacity_items,
    summarize,
)
from planner.services.estimation.intake_sizing import (
    ContentDesignInputs,
    PMIntake,
    ProductDesignInputs,
    designer_weeks,
    size_content,
    size_ux,
)
from planner.services.estimation.plan import (
    CommittedPlanSummary,
    QuarterCapacity,
    ScenarioLoad,
    summarize_committed_plan,
    summarize_quarterly_capacity,
)

logger = logging.getLogger("planner.services.capacity")

# focus: stored focus weeks; intake: rule-based sprints from the PM intake and checklists
SUMMARY_BASES = ("focus", "intake")

InputsT = TypeVar("InputsT", bound=BaseModel)


def to_capacity_item(item: RoadmapItem) -> CapacityItem:
    """Designer weeks are the item's focus weeks; missing values count as 0."""
    return CapacityItem(
        item_id=item.id,  # type: ignore[arg-type]
        initiative=item.initiative or "",  # type: ignore[arg-type]
        priority=item.priority if item.priority is not None else 0,  # type: ignore[arg-type]
        ux_designer_weeks=item.ux_focus_weeks or 0.0,  # type: ignore[arg-type]
        content_designer_weeks=item.content_focus_weeks or 0.0,  # type: ignore[arg-type]
    )


def load_inputs(model: Type[InputsT], raw: Any) -> InputsT:
    """
    Build checklist inputs from a stored JSON blob.
    Unknown keys (factor scores, row ids) are ignored; a blob that fails
    validation falls back to the model defaults.
    """
    if not isinstance(raw, dict):
        return model()
    known: Dict[str, Any] = {k: v for k, v in raw.items() if k in model.model_fields}
    if isinstance(known.get("surfaces_in_scope"), (dict, list)):
        known["surfaces_in_scope"] = json.dumps(known["surfaces_in_scope"])
    try:
        return model.model_validate(known)
    except ValidationError as e:
        logger.warning(
            "capacity.inputs_invalid",
            extra={"model": model.__name__, "error_count": e.error_count()},
        )
        return model()


def to_intake_capacity_item(item: RoadmapItem, sprint_length_weeks: float) -> CapacityItem:
    """Designer weeks are rule-based sprints times the scenario's sprint length."""
    intake = load_inputs(PMIntake, item.pm_intake)
    ux = size_ux(load_inputs(ProductDesignInputs, item.ux_factors), intake)
    content = size_content(load_inputs(ContentDesignInputs, item.content_factors))
    return CapacityItem(
        item_id=item.id,  # type: ignore[arg-type]
        initiative=item.initiative or "",  # type: ignore[arg-type]
        priority=item.priority if item.priority is not None else 0,  # type: ignore[arg-type]
        ux_designer_weeks=designer_weeks(ux, sprint_length_weeks),
        content_designer_weeks=designer_weeks(content, sprint_length_weeks),
    )


def _demand(items: Iterable[RoadmapItem]) -> Tuple[float, float]:
    ux = 0.0
    content = 0.0
    for item in items:
        ux += item.ux_focus_weeks or 0.0  # type: ignore[operator]
        content += item.content_focus_weeks or 0.0  # type: ignore[operator]
    return ux, content


class CapacityService:
    def __init__(self, db: Session):
        self.db = db

    def _items(self, scenario_ids: Sequence[str]) -> Dict[str, List[RoadmapItem]]:
        grouped: Dict[str, List[RoadmapItem]] = {sid: [] for sid in scenario_ids}
        if not scenario_ids:
            return grouped
        stmt = select(RoadmapItem).where(RoadmapItem.scenario_id.in_(list(scenario_ids)))
        for item in self.db.execute(stmt).scalars():
            grouped[item.scenario_id].append(item)  # type: ignore[index]
        return grouped

    def scenario_summary(self, scenario: Scenario, basis: str = "focus") -> CapacitySummary:
        """
        Cut line and totals for one scenario, items in (initiative, priority) order.
        basis="intake" sizes each item from its PM intake and design checklists
        instead of its stored focus weeks.
        """
        if basis not in SUMMARY_BASES:
            raise ValueError(f"Unknown summary basis: {basis}")
        items = self._items([scenario.id])[scenario.id]  # type: ignore[list-item,index]
        if basis == "intake":
            sprint_length = scenario.sprint_length_weeks or settings.DEFAULT_SPRINT_LENGTH_WEEKS
            ordered = sort_capacity_items(to_intake_capacity_item(i, sprint_length) for i in items)  # type: ignore[arg-type]
        else:
            ordered = sort_capacity_items(to_capacity_item(i) for i in items)
        weeks = scenario.weeks_per_period
        summary = summarize(
            ordered,
            ux_capacity=capacity_weeks(scenario.ux_designers, weeks),  # type: ignore[arg-type]
            content_capacity=capacity_weeks(scenario.content_designers, weeks),  # type: ignore[arg-type]
            weeks_per_period=weeks,  # type: ignore[arg-type]
        )
        logger.info(
            "capacity.summarized",
            extra={
                "scenario_id": scenario.id,
                "basis": basis,
                "count": len(ordered),
                "total": summary.totals.total_ux_weeks + summary.totals.total_content_weeks,
            },
        )
        return summary

    def _loads(self, scenarios: Sequence[Scenario]) -> List[ScenarioLoad]:
        items = self._items([s.id for s in scenarios])  # type: ignore[misc]
        loads: List[ScenarioLoad] = []
        for s in scenarios:
            ux_demand, content_demand = _demand(items[s.id])  # type: ignore[index]
            loads.append(
                ScenarioLoad(
                    scenario_id=s.id,  # type: ignore[arg-type]
                    planning_period=s.quarter,  # type: ignore[arg-type]
                    ux_designers=s.ux_designers,  # type: ignore[arg-type]
                    content_designers=s.content_designers,  # type: ignore[arg-type]
                    weeks_per_period=s.weeks_per_period,  # type: ignore[arg-type]
                    ux_demand_weeks=ux_demand,
                    content_demand_weeks=content_demand,
                )
            )
        return loads

    def committed_plan(self) -> CommittedPlanSummary:
        stmt = select(Scenario).where(Scenario.committed.is_(True))
        scenarios = list(self.db.execute(stmt).scalars().all())
        return summarize_committed_plan(self._loads(scenarios), settings.CAPACITY_NEAR_THRESHOLD_PCT)

    def quarterly_capacity(self, committed_only: bool = False) -> List[QuarterCapacity]:
        stmt = select(Scenario)
        if committed_only:
            stmt = stmt.where(Scenario.committed.is_(True))
        scenarios = list(self.db.execute(stmt).scalars().all())
        return summarize_quarterly_capacity(self._loads(scenarios))


__all__ = [
    "SUMMARY_BASES",
    "to_capacity_item",
    "load_inputs",
    "to_intake_capacity_item",
    "CapacityService",
]
