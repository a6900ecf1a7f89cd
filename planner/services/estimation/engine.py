# design_capacity_planner/planner/services/estimation/engine.py

from __future__ import annotations

import logging
from typing import Optional

from planner.services.estimation.aggregator import weighted_score
from planner.services.estimation.bands import map_score_to_band
from planner.services.estimation.factors import resolve_factor_definitions
from planner.services.estimation.interfaces import (
    EffortModelConfig,
    EffortResult,
    FactorScores,
    Role,
)
from planner.services.estimation.time_model import map_band_to_time

logger = logging.getLogger("planner.services.estimation")

DEFAULT_EFFORT_MODEL = EffortModelConfig()


def calculate_effort(
    role: Role,
    scores: FactorScores,
    config: Optional[EffortModelConfig] = None,
) -> EffortResult:
    """Score -> size band -> focus/work weeks for one role."""
    role = Role(role)
    cfg = config or DEFAULT_EFFORT_MODEL

    defs = resolve_factor_definitions(role, cfg.weights_for(role))
    score = weighted_score(scores, defs)
    band = map_score_to_band(score, cfg.size_bands)
    time = map_band_to_time(band, role)

    logger.debug(
        "estimation.computed",
        extra={
            "role": role.value,
            "size_band": band.value,
            "weighted_score": score,
            "count": len(scores),
        },
    )

    return EffortResult(
        size_band=band,
        focus_weeks=time.focus_weeks,
        work_weeks=time.work_weeks,
        weighted_score=score,
    )


__all__ = ["DEFAULT_EFFORT_MODEL", "calculate_effort"]
