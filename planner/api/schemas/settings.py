# design_capacity_planner/planner/api/schemas/settings.py

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class SettingsUpdate(BaseModel):
    # Partial documents; merged into the stored values and validated by the service
    effort_model: Optional[Dict[str, Any]] = None
    time_model: Optional[Dict[str, Any]] = None
    size_bands: Optional[Dict[str, Any]] = None


class SettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    effort_model: Dict[str, Any]
    time_model: Dict[str, Any]
    size_bands: Dict[str, Any]
    updated_at: Optional[datetime] = None
