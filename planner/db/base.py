# design_capacity_planner/planner/db/base.py

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# IMPORTANT: import all model modules so they register with Base.metadata
# and their string-based relationships (like "RoadmapItem") can be resolved.

from planner.db import models  # noqa: F401,E402  (we don't directly use `models`, we just want the side-effects)
