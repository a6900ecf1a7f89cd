# design_capacity_planner/planner/services/estimation/errors.py

from __future__ import annotations


class EstimationError(Exception):
    """Base class for estimation kernel errors."""


class InvalidWeeksPerPeriod(EstimationError):
    """weeks_per_period must be positive to derive headcount."""

    def __init__(self, weeks_per_period: float):
        self.weeks_per_period = weeks_per_period
        super().__init__(
            f"weeks_per_period must be greater than 0 (got {weeks_per_period!r})"
        )


class PreconditionViolation(EstimationError):
    """Capacity items were not ordered by (initiative, priority)."""


__all__ = ["EstimationError", "InvalidWeeksPerPeriod", "PreconditionViolation"]
