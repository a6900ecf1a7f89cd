# design_capacity_planner/planner/services/estimation/plan.py

from __future__ import annotations

from typing import Dict, List, Literal, Sequence

from pydantic import BaseModel

from planner.services.estimation.capacity import capacity_weeks

CapacityStatus = Literal["surplus", "near_capacity", "over_capacity"]


class ScenarioLoad(BaseModel):
    """Capacity and demand inputs for one scenario."""
    scenario_id: str
    planning_period: str
    ux_designers: float = 0
    content_designers: float = 0
    weeks_per_period: float = 13
    ux_demand_weeks: float = 0.0
    content_demand_weeks: float = 0.0


class RoleUtilization(BaseModel):
    designers: float
    capacity_weeks: float
    demand_weeks: float
    utilization_pct: float
    status: CapacityStatus


class CommittedPlanSummary(BaseModel):
    scenario_count: int
    ux: RoleUtilization
    content: RoleUtilization


class QuarterCapacity(BaseModel):
    planning_period: str
    scenario_count: int
    ux_capacity: float
    ux_demand: float
    ux_balance: float
    content_capacity: float
    content_demand: float
    content_balance: float


def utilization_pct(demand: float, capacity: float) -> float:
    return (demand / capacity) * 100 if capacity > 0 else 0.0


def capacity_status(pct: float, near_threshold_pct: float = 80.0) -> CapacityStatus:
    if pct > 100:
        return "over_capacity"
    if pct >= near_threshold_pct:
        return "near_capacity"
    return "surplus"


def _role(designers: float, capacity: float, demand: float, near_threshold_pct: float) -> RoleUtilization:
    pct = utilization_pct(demand, capacity)
    return RoleUtilization(
        designers=designers,
        capacity_weeks=capacity,
        demand_weeks=demand,
        utilization_pct=pct,
        status=capacity_status(pct, near_threshold_pct),
    )


def summarize_committed_plan(
    scenarios: Sequence[ScenarioLoad],
    near_threshold_pct: float = 80.0,
) -> CommittedPlanSummary:
    ux_designers = sum(s.ux_designers for s in scenarios)
    content_designers = sum(s.content_designers for s in scenarios)
    ux_capacity = sum(capacity_weeks(s.ux_designers, s.weeks_per_period) for s in scenarios)
    content_capacity = sum(capacity_weeks(s.content_designers, s.weeks_per_period) for s in scenarios)
    ux_demand = sum(s.ux_demand_weeks for s in scenarios)
    content_demand = sum(s.content_demand_weeks for s in scenarios)

    return CommittedPlanSummary(
        scenario_count=len(scenarios),
        ux=_role(ux_designers, ux_capacity, ux_demand, near_threshold_pct),
        content=_role(content_designers, content_capacity, content_demand, near_threshold_pct),
    )


def summarize_quarterly_capacity(scenarios: Sequence[ScenarioLoad]) -> List[QuarterCapacity]:
    """Per planning period totals, ordered by period key."""
    grouped: Dict[str, List[ScenarioLoad]] = {}
    for s in scenarios:
        grouped.setdefault(s.planning_period, []).append(s)

    out: List[QuarterCapacity] = []
    for period in sorted(grouped):
        group = grouped[period]
        ux_capacity = sum(capacity_weeks(s.ux_designers, s.weeks_per_period) for s in group)
        content_capacity = sum(capacity_weeks(s.content_designers, s.weeks_per_period) for s in group)
        ux_demand = sum(s.ux_demand_weeks for s in group)
        content_demand = sum(s.content_demand_weeks for s in group)
        out.append(
            QuarterCapacity(
                planning_period=period,
                scenario_count=len(group),
                ux_capacity=ux_capacity,
                ux_demand=ux_demand,
                ux_balance=ux_capacity - ux_demand,
                content_capacity=content_capacity,
                content_demand=content_demand,
                content_balance=content_capacity - content_demand,
            )
        )
    return out


__all__ = [
    "ScenarioLoad",
    "RoleUtilization",
    "CommittedPlanSummary",
    "QuarterCapacity",
    "utilization_pct",
    "capacity_status",
    "summarize_committed_plan",
    "summarize_quarterly_capacity",
]
