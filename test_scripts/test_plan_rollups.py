# design_capacity_planner/test_scripts/test_plan_rollups.py

from __future__ import annotations

import pytest

from planner.services.estimation.plan import (
    ScenarioLoad,
    capacity_status,
    summarize_committed_plan,
    summarize_quarterly_capacity,
    utilization_pct,
)


def _load(sid, period, ux=1, content=1, ux_demand=0.0, content_demand=0.0, weeks=13):
    return ScenarioLoad(
        scenario_id=sid,
        planning_period=period,
        ux_designers=ux,
        content_designers=content,
        weeks_per_period=weeks,
        ux_demand_weeks=ux_demand,
        content_demand_weeks=content_demand,
    )


@pytest.mark.parametrize(
    "pct,status",
    [(0, "surplus"), (79.9, "surplus"), (80, "near_capacity"), (100, "near_capacity"), (100.1, "over_capacity")],
)
def test_capacity_status(pct, status):
    assert capacity_status(pct) == status


def test_utilization_is_zero_without_capacity():
    assert utilization_pct(10, 0) == 0.0
    assert utilization_pct(13, 26) == 50.0


def test_committed_plan_totals():
    summary = summarize_committed_plan(
        [
            _load("a", "2026-Q1", ux=2, content=1, ux_demand=22, content_demand=12),
            _load("b", "2026-Q2", ux=1, content=1, ux_demand=10, content_demand=20),
        ]
    )
    assert summary.scenario_count == 2
    assert summary.ux.capacity_weeks == 39
    assert summary.ux.demand_weeks == 32
    assert summary.ux.status == "near_capacity"
    assert summary.content.capacity_weeks == 26
    assert summary.content.status == "over_capacity"


def test_committed_plan_empty():
    summary = summarize_committed_plan([])
    assert summary.scenario_count == 0
    assert summary.ux.utilization_pct == 0
    assert summary.ux.status == "surplus"


def test_quarterly_capacity_groups_and_orders_by_period():
    rows = summarize_quarterly_capacity(
        [
            _load("a", "2026-Q2", ux=1, ux_demand=5),
            _load("b", "2026-Q1", ux=2, ux_demand=30, weeks=12),
            _load("c", "2026-Q2", ux=1, ux_demand=4),
        ]
    )
    assert [r.planning_period for r in rows] == ["2026-Q1", "2026-Q2"]
    q1, q2 = rows
    assert q1.ux_capacity == 24
    assert q1.ux_balance == -6
    assert q2.scenario_count == 2
    assert q2.ux_capacity == 26
    assert q2.ux_demand == 9
    assert q2.ux_balance == 17
