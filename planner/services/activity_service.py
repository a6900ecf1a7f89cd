# design_capacity_planner/planner/services/activity_service.py

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from planner.config import settings
from planner.db.models.activity_log import ACTIVITY_TYPES, ActivityLog

logger = logging.getLogger("planner.services.activity")


class ActivityService:
    def __init__(self, db: Session):
        self.db = db

    def record(
        self,
        type: str,
        description: str,
        scenario_id: Optional[str] = None,
        scenario_name: Optional[str] = None,
        commit: bool = True,
    ) -> ActivityLog:
        """Append an entry. With commit=False the caller owns the transaction."""
        if type not in ACTIVITY_TYPES:
            raise ValueError(f"Unknown activity type: {type}. Valid types: {', '.join(ACTIVITY_TYPES)}")
        if not description or not description.strip():
            raise ValueError("description is required")

        entry = ActivityLog(
            type=type,
            description=description.strip(),
            scenario_id=scenario_id,
            scenario_name=scenario_name,
        )
        self.db.add(entry)
        if commit:
            self.db.commit()
            self.db.refresh(entry)
        logger.debug("activity.recorded", extra={"scenario_id": scenario_id, "reason": type})
        return entry

    def latest(self, scenario_id: Optional[str] = None, limit: Optional[int] = None) -> List[ActivityLog]:
        """Newest first, capped at ACTIVITY_LOG_LIMIT entries."""
        stmt = select(ActivityLog)
        if scenario_id:
            stmt = stmt.where(ActivityLog.scenario_id == scenario_id)
        stmt = stmt.order_by(ActivityLog.timestamp.desc()).limit(limit or settings.ACTIVITY_LOG_LIMIT)
        return list(self.db.execute(stmt).scalars().all())


__all__ = ["ActivityService"]
