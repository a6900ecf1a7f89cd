# design_capacity_planner/planner/services/estimation/factors.py
"""
Complexity factor tables for UX and Content design effort.

Each factor is scored 1-5 per roadmap item. Weights scale how strongly a
factor pulls the weighted average; 1.0 is the reference weight.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

from planner.services.estimation.interfaces import FactorDefinition, Role
from planner.services.estimation.utils import as_valid_score


UX_FACTORS: Tuple[FactorDefinition, ...] = (
    # Risky designs need more review cycles and documentation
    FactorDefinition(
        name="productRisk",
        weight=1.2,
        label="Product Risk",
        description="Level of business or product risk if design fails (1=low, 5=critical)",
    ),
    FactorDefinition(
        name="problemAmbiguity",
        weight=1.0,
        label="Problem Ambiguity",
        description="How well-defined the problem is (1=clear, 5=highly ambiguous)",
    ),
    # Discovery does not always scale linearly with execution effort
    FactorDefinition(
        name="discoveryDepth",
        weight=0.9,
        label="Discovery Depth",
        description="Amount of user research and discovery needed (1=minimal, 5=extensive)",
    ),
)

CONTENT_FACTORS: Tuple[FactorDefinition, ...] = (
    # Volume of content is usually the primary driver
    FactorDefinition(
        name="contentSurfaceArea",
        weight=1.3,
        label="Content Surface Area",
        description="Volume and breadth of content needed (1=small, 5=very large)",
    ),
    FactorDefinition(
        name="localizationScope",
        weight=1.0,
        label="Localization Scope",
        description="Number of languages and regions (1=single language, 5=many languages/regions)",
    ),
    FactorDefinition(
        name="regulatoryBrandRisk",
        weight=1.2,
        label="Regulatory & Brand Risk",
        description="Risk level for regulatory compliance and brand safety (1=low, 5=high)",
    ),
    FactorDefinition(
        name="legalComplianceDependency",
        weight=1.1,
        label="Legal Compliance Dependency",
        description="Level of legal review and compliance requirements (1=minimal, 5=extensive)",
    ),
)

_FACTORS_BY_ROLE: Dict[Role, Tuple[FactorDefinition, ...]] = {
    Role.UX: UX_FACTORS,
    Role.CONTENT: CONTENT_FACTORS,
}


def get_factors_for_role(role: Role) -> List[FactorDefinition]:
    return list(_FACTORS_BY_ROLE[Role(role)])


def default_weights(role: Role) -> Dict[str, float]:
    return {f.name: f.weight for f in get_factors_for_role(role)}


def resolve_factor_definitions(
    role: Role,
    weight_overrides: Optional[Mapping[str, float]] = None,
) -> List[FactorDefinition]:
    """Factor definitions for a role with deployment weight overrides applied.

    Overrides for names the role does not define are ignored, as are
    non-positive, non-finite or non-numeric weights.
    """
    overrides = weight_overrides or {}
    resolved: List[FactorDefinition] = []
    for factor in get_factors_for_role(role):
        weight = overrides.get(factor.name)
        if isinstance(weight, (int, float)) and not isinstance(weight, bool) and math.isfinite(weight) and weight > 0:
            factor = replace(factor, weight=float(weight))
        resolved.append(factor)
    return resolved


def extract_factor_scores(raw: Optional[Mapping[str, Any]], role: Role) -> Dict[str, int]:
    """Pick the role's factor scores out of a loosely typed JSON object.

    Stored ux_factors/content_factors blobs also hold checkbox answers; only
    known factor names carrying a valid 1-5 score survive.
    """
    if not raw:
        return {}
    scores: Dict[str, int] = {}
    for factor in get_factors_for_role(role):
        score = as_valid_score(raw.get(factor.name))
        if score is not None:
            scores[factor.name] = score
    return scores


__all__ = [
    "UX_FACTORS",
    "CONTENT_FACTORS",
    "get_factors_for_role",
    "default_weights",
    "resolve_factor_definitions",
    "extract_factor_scores",
]
