# design_capacity_planner/planner/services/paste_import.py
"""
Import roadmap items pasted from a spreadsheet (tab-separated rows).

Supported layouts:
- 4 columns: Title | Start date | End date | Effort weeks
  (effort is split 50/50 into UX and content focus weeks)
- 5 columns: Title | Start date | End date | UX effort weeks | Content effort weeks

The first row is treated as a header when its first cell mentions "title"
and no cell is numeric. Without a header, a first row with 5+ cells selects
the 5-column layout.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel
from sqlalchemy.orm import Session

from planner.db.models.roadmap_item import RoadmapItem
from planner.db.models.scenario import Scenario
from planner.services.activity_service import ActivityService
from planner.services.estimation import derive_work_weeks
from planner.services.roadmap_item_service import RoadmapItemService

logger = logging.getLogger("planner.services.paste_import")

DEFAULT_PRIORITY = 1
FALLBACK_KEY = "ITEM"


class PastedRoadmapItem(BaseModel):
    title: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    effort_weeks: Optional[float] = None
    ux_effort_weeks: Optional[float] = None
    content_effort_weeks: Optional[float] = None
    five_column: bool = False


class ParsedRow(BaseModel):
    item: PastedRoadmapItem
    is_valid: bool
    error_message: Optional[str] = None


class ImportSummary(BaseModel):
    valid_count: int
    invalid_count: int


def _parse_number(cell: str) -> Optional[float]:
    try:
        value = float(cell)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _is_numeric(cell: str) -> bool:
    return bool(cell) and _parse_number(cell) is not None


def detect_header(row: Sequence[str]) -> Tuple[bool, bool]:
    """Return (is_header, is_five_column) for the first pasted row."""
    if not row or "title" not in row[0].lower():
        return False, False
    if any(_is_numeric(cell) for cell in row):
        return False, False

    def has(idx: int, *labels: str) -> bool:
        cell = row[idx].lower() if idx < len(row) else ""
        return any(label in cell for label in labels)

    five = len(row) >= 5 and has(3, "ux", "effort") and has(4, "content", "effort")
    return True, five


def _effort(cells: Sequence[str], idx: int, label: str, errors: List[str]) -> Optional[float]:
    raw = cells[idx] if idx < len(cells) else ""
    if not raw:
        return None
    value = _parse_number(raw)
    if value is None:
        errors.append(f"{label} is not a number")
    return value


def _parse_row(cells: Sequence[str], five_column: bool) -> ParsedRow:
    def cell(i: int) -> Optional[str]:
        return (cells[i] if i < len(cells) else "") or None

    errors: List[str] = []
    title = cells[0] if cells else ""
    if not title:
        errors.append("Missing title")

    if five_column:
        item = PastedRoadmapItem(
            title=title,
            start_date=cell(1),
            end_date=cell(2),
            ux_effort_weeks=_effort(cells, 3, "UX effort", errors),
            content_effort_weeks=_effort(cells, 4, "Content effort", errors),
            five_column=True,
        )
    else:
        item = PastedRoadmapItem(
            title=title,
            start_date=cell(1),
            end_date=cell(2),
            effort_weeks=_effort(cells, 3, "Effort", errors),
        )

    if errors:
        return ParsedRow(item=item, is_valid=False, error_message=", ".join(errors))
    return ParsedRow(item=item, is_valid=True)


def parse_pasted_roadmap_items(raw: Optional[str]) -> List[ParsedRow]:
    if not raw or not raw.strip():
        return []

    lines = [line for line in raw.replace("\r\n", "\n").split("\n") if line.strip()]
    rows = [[c.strip() for c in line.split("\t")] for line in lines]
    if not rows:
        return []

    is_header, five_column = detect_header(rows[0])
    start = 1 if is_header else 0
    if not is_header and len(rows[0]) >= 5:
        five_column = True

    return [_parse_row(cells, five_column) for cells in rows[start:]]


def import_summary(rows: Sequence[ParsedRow]) -> ImportSummary:
    valid = sum(1 for r in rows if r.is_valid)
    return ImportSummary(valid_count=valid, invalid_count=len(rows) - valid)


def short_key(title: str) -> str:
    """First five title characters, uppercased, keeping only A-Z and 0-9."""
    key = re.sub(r"[^A-Z0-9]", "", re.sub(r"\s+", "", title[:5].upper()))
    return key or FALLBACK_KEY


def _split_effort(item: PastedRoadmapItem) -> Tuple[Optional[float], Optional[float]]:
    if item.five_column:
        return item.ux_effort_weeks, item.content_effort_weeks
    if item.effort_weeks is None:
        return None, None
    half = item.effort_weeks / 2
    return half, half


def to_item_payload(scenario_id: str, item: PastedRoadmapItem, focus_time_ratio: float) -> Dict[str, Any]:
    ux_focus, content_focus = _split_effort(item)
    payload: Dict[str, Any] = {
        "scenario_id": scenario_id,
        "key": short_key(item.title),
        "name": item.title,
        "priority": DEFAULT_PRIORITY,
        "start_date": item.start_date,
        "end_date": item.end_date,
    }
    if ux_focus is not None:
        payload["ux_focus_weeks"] = ux_focus
        payload["ux_work_weeks"] = derive_work_weeks(ux_focus, focus_time_ratio)
    if content_focus is not None:
        payload["content_focus_weeks"] = content_focus
        payload["content_work_weeks"] = derive_work_weeks(content_focus, focus_time_ratio)
    return payload


def import_pasted_items(db: Session, scenario: Scenario, rows: Sequence[ParsedRow]) -> List[RoadmapItem]:
    """Create one roadmap item per valid row in a single transaction."""
    service = RoadmapItemService(db)
    ratio = service.settings.effort_config().focus_time_ratio

    created: List[RoadmapItem] = []
    for row in rows:
        if not row.is_valid:
            continue
        payload = to_item_payload(scenario.id, row.item, ratio)  # type: ignore[arg-type]
        created.append(service.create(payload, record_activity=False, commit=False))

    if created:
        ActivityService(db).record(
            "roadmap_item_updated",
            f"Imported {len(created)} roadmap item(s) from pasted table",
            scenario_id=scenario.id,  # type: ignore[arg-type]
            scenario_name=scenario.title,  # type: ignore[arg-type]
            commit=False,
        )
    db.commit()
    for item in created:
        db.refresh(item)

    logger.info(
        "paste_import.completed",
        extra={"scenario_id": scenario.id, "count": len(created), "total": len(rows)},
    )
    return created


__all__ = [
    "PastedRoadmapItem",
    "ParsedRow",
    "ImportSummary",
    "detect_header",
    "parse_pasted_roadmap_items",
    "import_summary",
    "short_key",
    "to_item_payload",
    "import_pasted_items",
]
