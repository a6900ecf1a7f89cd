# design_capacity_planner/planner/db/models/planner_settings.py

from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, String

from planner.db.base import Base

# The settings table holds exactly one row
SETTINGS_ROW_ID = "00000000-0000-0000-0000-000000000000"


class PlannerSettings(Base):
    """Deployment-wide estimation settings (factor weights, time model, size bands)."""

    __tablename__ = "settings"

    id = Column(String(36), primary_key=True, default=SETTINGS_ROW_ID)

    # {"ux": {factorName: weight}, "content": {...}, "pmIntakeMultiplier": 1.0}
    effort_model = Column(JSON, nullable=False, default=dict)
    # {"focusTimeRatio": 0.75}
    time_model = Column(JSON, nullable=False, default=dict)
    # {"xs": 1.5, "s": 2.5, "m": 3.5, "l": 4.5, "xl": 5.0}
    size_bands = Column(JSON, nullable=False, default=dict)

    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
