# design_capacity_planner/planner/services/estimation/intake_sizing.py
"""
Rule-based T-shirt sizing from PM intake and design checklists.

This predates factor scoring: each triggered rule adds an increment to a
baseline band, and the band maps to a sprint count.
"""

from __future__ import annotations

import json
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from planner.services.estimation.interfaces import SizeBand

SIZE_TO_SPRINTS: Dict[SizeBand, int] = {
    SizeBand.XS: 1,
    SizeBand.S: 2,
    SizeBand.M: 3,
    SizeBand.L: 4,
    SizeBand.XL: 6,
}


class PMIntake(BaseModel):
    objective: str = ""
    kpis: str = ""
    goals: str = ""
    market: str = ""
    audience: str = ""
    timeline: str = ""
    requirements_business: str = ""
    requirements_technical: str = ""
    requirements_design: str = ""
    # JSON text, e.g. {"mobile": ["ios", "android"], "web": true, "other": []}
    surfaces_in_scope: str = ""
    new_or_existing: Literal["new", "existing"] = "existing"


class ProductDesignInputs(BaseModel):
    net_new_patterns: bool = False
    changes_to_information_architecture: bool = False
    multiple_user_states_or_paths: bool = False
    significant_edge_cases_or_error_handling: bool = False
    responsive_or_adaptive_layouts: bool = False
    other: str = ""


class ContentDesignInputs(BaseModel):
    is_content_required: Literal["yes", "no", "unsure"] = "yes"
    financial_or_regulated_language: bool = False
    user_commitments_or_confirmations: bool = False
    claims_guarantees_or_promises: bool = False
    trust_sensitive_moments: bool = False
    ai_driven_or_personalized_decisions: bool = False
    ranking_recommendations_or_explanations: bool = False
    legal_policy_or_compliance_review: Literal["yes", "no", "unsure"] = "no"
    introducing_new_terminology: bool = False
    guidance_needed: Literal["high", "some", "minimal"] = "minimal"


class RuleSizing(BaseModel):
    # None only for content that is not required
    tshirt_size: Optional[SizeBand] = None
    sprints: int = 0
    increments: float = 0
    reasons: List[str] = Field(default_factory=list)


def _surface_platforms(surfaces_json: str) -> List[str]:
    """Flatten the surfaces JSON into platform names. Raises ValueError on bad JSON."""
    surfaces = json.loads(surfaces_json or "{}")
    if not isinstance(surfaces, dict):
        raise ValueError("surfaces_in_scope must be a JSON object")
    platforms: List[str] = []
    mobile = surfaces.get("mobile")
    if isinstance(mobile, list):
        platforms.extend(f"mobile-{p}" for p in mobile)
    if surfaces.get("web") is True or surfaces.get("web") == "true":
        platforms.append("web")
    other = surfaces.get("other")
    if isinstance(other, list):
        platforms.extend(str(p) for p in other)
    return platforms


def size_ux(inputs: ProductDesignInputs, intake: PMIntake) -> RuleSizing:
    increments = 0.0
    reasons: List[str] = []

    if intake.new_or_existing == "new" or inputs.changes_to_information_architecture:
        increments += 1
        reasons.append("new product/surface or IA change")

    if (
        inputs.net_new_patterns
        and inputs.multiple_user_states_or_paths
        and inputs.significant_edge_cases_or_error_handling
    ):
        increments += 1
        reasons.append("net-new patterns with multiple states and edge cases")

    if inputs.responsive_or_adaptive_layouts:
        try:
            spans_three = len(_surface_platforms(intake.surfaces_in_scope)) >= 3
        except ValueError:
            spans_three = False
        if spans_three:
            increments += 1
            reasons.append("spans 3+ platforms")
        else:
            increments += 0.5
            reasons.append("heavily responsive layouts")

    if increments >= 3:
        size = SizeBand.XL
    elif increments >= 2:
        size = SizeBand.L
    elif increments >= 1:
        size = SizeBand.M
    else:
        size = SizeBand.S
        # Small, low-risk iteration on a single existing surface
        if (
            intake.new_or_existing == "existing"
            and not inputs.changes_to_information_architecture
            and not inputs.net_new_patterns
            and not inputs.responsive_or_adaptive_layouts
        ):
            try:
                if len(_surface_platforms(intake.surfaces_in_scope)) == 1:
                    size = SizeBand.XS
                    reasons.append("single-surface iteration")
            except ValueError:
                pass  # unparseable surfaces keep the S baseline

    return RuleSizing(
        tshirt_size=size,
        sprints=SIZE_TO_SPRINTS[size],
        increments=increments,
        reasons=reasons,
    )


def size_content(inputs: ContentDesignInputs) -> RuleSizing:
    if inputs.is_content_required == "no":
        return RuleSizing(tshirt_size=None, sprints=0, reasons=["content not required"])

    increments = 0
    reasons: List[str] = []

    if inputs.financial_or_regulated_language or inputs.legal_policy_or_compliance_review != "no":
        increments += 1
        reasons.append("regulated language or legal review")

    if (
        inputs.trust_sensitive_moments
        or inputs.user_commitments_or_confirmations
        or inputs.claims_guarantees_or_promises
        or inputs.ai_driven_or_personalized_decisions
        or inputs.ranking_recommendations_or_explanations
    ):
        increments += 1
        reasons.append("trust-sensitive or explanatory content")

    if inputs.introducing_new_terminology and inputs.guidance_needed == "high":
        increments += 1
        reasons.append("new terminology with high guidance needs")

    if increments >= 4:
        size = SizeBand.XL
    elif increments >= 3:
        size = SizeBand.L
    elif increments >= 2:
        size = SizeBand.M
    elif increments >= 1:
        size = SizeBand.S
    else:
        size = SizeBand.XS

    return RuleSizing(
        tshirt_size=size,
        sprints=SIZE_TO_SPRINTS[size],
        increments=increments,
        reasons=reasons,
    )


def designer_weeks(sizing: RuleSizing, sprint_length_weeks: float) -> float:
    return sizing.sprints * sprint_length_weeks


__all__ = [
    "SIZE_TO_SPRINTS",
    "PMIntake",
    "ProductDesignInputs",
    "ContentDesignInputs",
    "RuleSizing",
    "size_ux",
    "size_content",
    "designer_weeks",
]
