# design_capacity_planner/planner/services/estimation/aggregator.py

from __future__ import annotations

from typing import Iterable

from planner.services.estimation.interfaces import FactorDefinition, FactorScores
from planner.services.estimation.utils import as_valid_score


def weighted_score(scores: FactorScores, defs: Iterable[FactorDefinition]) -> float:
    """Weighted average of the factor scores that match a definition.

    Unknown factors and scores outside the integers 1-5 are skipped. Returns
    0.0 when no factor contributes. Sums run in definition order so the
    result does not depend on how `scores` is ordered.
    """
    numerator = 0.0
    denominator = 0.0
    for factor in defs:
        if factor.name not in scores:
            continue
        score = as_valid_score(scores[factor.name])
        if score is None:
            continue
        numerator += score * factor.weight
        denominator += factor.weight

    if denominator <= 0:
        return 0.0
    return numerator / denominator


__all__ = ["weighted_score"]
