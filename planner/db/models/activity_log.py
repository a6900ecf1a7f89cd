# design_capacity_planner/planner/db/models/activity_log.py

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from planner.db.base import Base
from planner.db.models.scenario import new_id

ACTIVITY_TYPES = (
    "scenario_created",
    "scenario_committed",
    "scenario_deleted",
    "scenario_renamed",
    "roadmap_item_updated",
    "effort_updated",
)


class ActivityLog(Base):
    """Append-only audit trail of planning changes."""

    __tablename__ = "activity_log"

    id = Column(String(36), primary_key=True, default=new_id)
    timestamp = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    type = Column(String(50), nullable=False, index=True)

    # Not a foreign key: entries outlive deleted scenarios
    scenario_id = Column(String(36), nullable=True, index=True)
    scenario_name = Column(String(255), nullable=True)
    description = Column(Text, nullable=False)
