# design_capacity_planner/planner/db/models/roadmap_item.py

from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from planner.db.base import Base
from planner.db.models.scenario import new_id


class RoadmapItem(Base):
    __tablename__ = "roadmap_items"

    id = Column(String(36), primary_key=True, default=new_id)
    scenario_id = Column(String(36), ForeignKey("scenarios.id"), nullable=False, index=True)

    # A. Identity & ordering
    key = Column(String(50), nullable=False)
    name = Column(String(255), nullable=False)
    initiative = Column(String(255), nullable=True)
    priority = Column(Integer, nullable=True)
    status = Column(String(30), nullable=False, default="draft")  # draft|ready_for_sizing|sized|locked

    # B. Raw inputs (free-form JSON; factor scores live inside ux_factors/content_factors)
    pm_intake = Column(JSON, nullable=True)
    ux_factors = Column(JSON, nullable=True)
    content_factors = Column(JSON, nullable=True)

    # C. Derived estimates per role
    ux_score = Column(Float, nullable=True)
    content_score = Column(Float, nullable=True)
    ux_size = Column(String(5), nullable=True)
    content_size = Column(String(5), nullable=True)
    ux_focus_weeks = Column(Float, nullable=True)
    content_focus_weeks = Column(Float, nullable=True)
    ux_work_weeks = Column(Float, nullable=True)
    content_work_weeks = Column(Float, nullable=True)

    # D. Timeline
    start_date = Column(String(50), nullable=True)
    end_date = Column(String(50), nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    scenario = relationship("Scenario", back_populates="items")
