# planner/db/models/__init__.py

from .scenario import Scenario
from .roadmap_item import RoadmapItem
from .planner_settings import PlannerSettings, SETTINGS_ROW_ID
from .activity_log import ActivityLog, ACTIVITY_TYPES

__all__ = [
    "Scenario",
    "RoadmapItem",
    "PlannerSettings",
    "SETTINGS_ROW_ID",
    "ActivityLog",
    "ACTIVITY_TYPES",
]
# This file ensures that all models are imported when the models package is imported,
