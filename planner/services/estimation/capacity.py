# design_capacity_planner/planner/services/estimation/capacity.py
"""
Capacity accounting for a planning scenario.

Items are walked in (initiative, priority) order while running totals of
designer-weeks accumulate per role. The first item that pushes a role's
running total past its capacity, and every item after it, sits above the
cut line for that role.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

from planner.services.estimation.errors import InvalidWeeksPerPeriod, PreconditionViolation
from planner.services.estimation.interfaces import (
    CapacityItem,
    CapacitySummary,
    CapacityTotals,
    ItemCapacityFlags,
)


def _order_key(item: CapacityItem) -> Tuple[str, float]:
    # Plain str comparison: case-sensitive, code-point lexicographic
    return (item.initiative, item.priority)


def sort_capacity_items(items: Iterable[CapacityItem]) -> List[CapacityItem]:
    """Stable sort by initiative then priority (both ascending)."""
    return sorted(items, key=_order_key)


def validate_sorted(items: Sequence[CapacityItem]) -> None:
    for i in range(1, len(items)):
        if _order_key(items[i]) < _order_key(items[i - 1]):
            raise PreconditionViolation(
                f"capacity items out of order at index {i}: "
                f"{_order_key(items[i - 1])!r} precedes {_order_key(items[i])!r}"
            )


def capacity_weeks(designers: float, weeks_per_period: float) -> float:
    return designers * weeks_per_period


def headcount_needed(total_weeks: float, weeks_per_period: float) -> int:
    if weeks_per_period <= 0:
        raise InvalidWeeksPerPeriod(weeks_per_period)
    return math.ceil(total_weeks / weeks_per_period)


def summarize(
    items: Sequence[CapacityItem],
    ux_capacity: float,
    content_capacity: float,
    weeks_per_period: float,
    check_order: bool = False,
) -> CapacitySummary:
    """Accumulate designer-weeks over pre-sorted items and flag the cut line.

    `items` must already be ordered by (initiative, priority); pass
    check_order=True to fail fast with PreconditionViolation otherwise.
    Raises InvalidWeeksPerPeriod when weeks_per_period <= 0.
    """
    if weeks_per_period <= 0:
        raise InvalidWeeksPerPeriod(weeks_per_period)
    if check_order:
        validate_sorted(items)

    acc_ux = 0.0
    acc_content = 0.0
    flags: List[ItemCapacityFlags] = []
    for item in items:
        acc_ux += item.ux_designer_weeks
        acc_content += item.content_designer_weeks
        flags.append(
            ItemCapacityFlags(
                item_id=item.item_id,
                initiative=item.initiative,
                priority=item.priority,
                ux_designer_weeks=item.ux_designer_weeks,
                content_designer_weeks=item.content_designer_weeks,
                accumulated_ux_weeks=acc_ux,
                accumulated_content_weeks=acc_content,
                above_cut_line_ux=acc_ux > ux_capacity,
                above_cut_line_content=acc_content > content_capacity,
            )
        )

    total_ux = sum(item.ux_designer_weeks for item in items)
    total_content = sum(item.content_designer_weeks for item in items)

    totals = CapacityTotals(
        total_ux_weeks=total_ux,
        total_content_weeks=total_content,
        ux_capacity_weeks=ux_capacity,
        content_capacity_weeks=content_capacity,
        ux_surplus_deficit=total_ux - ux_capacity,
        content_surplus_deficit=total_content - content_capacity,
        ux_headcount_needed=headcount_needed(total_ux, weeks_per_period),
        content_headcount_needed=headcount_needed(total_content, weeks_per_period),
    )
    return CapacitySummary(items=flags, totals=totals)


def cut_line_index(summary: CapacitySummary) -> int:
    """Index of the first item above the cut line for either role, or -1."""
    for i, flags in enumerate(summary.items):
        if flags.above_cut_line_ux or flags.above_cut_line_content:
            return i
    return -1


__all__ = [
    "sort_capacity_items",
    "validate_sorted",
    "capacity_weeks",
    "headcount_needed",
    "summarize",
    "cut_line_index",
]
