# design_capacity_planner/planner/db/models/scenario.py

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import relationship

from planner.db.base import Base


def new_id() -> str:
    return str(uuid.uuid4())


class Scenario(Base):
    """A planning period (quarter) with the team sizes available to it."""

    __tablename__ = "scenarios"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)

    # Planning period, e.g. "2026-Q1"
    quarter = Column(String(10), nullable=False, index=True)
    year = Column(Integer, nullable=True)
    committed = Column(Boolean, nullable=False, default=False, index=True)

    # Team capacity
    ux_designers = Column(Float, nullable=False, default=0)
    content_designers = Column(Float, nullable=False, default=0)
    weeks_per_period = Column(Integer, nullable=False, default=13)
    sprint_length_weeks = Column(Integer, nullable=False, default=2)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    items = relationship("RoadmapItem", back_populates="scenario")
