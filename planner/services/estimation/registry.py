# design_capacity_planner/planner/services/estimation/registry.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from planner.services.estimation.factors import CONTENT_FACTORS, UX_FACTORS
from planner.services.estimation.interfaces import FactorDefinition, Role, SizeBand, TimeEstimate
from planner.services.estimation.time_model import CONTENT_TIME_TABLE, UX_TIME_TABLE


@dataclass(frozen=True)
class RoleModelInfo:
    role: Role
    label: str
    description: str
    factors: Tuple[FactorDefinition, ...]
    time_table: Dict[SizeBand, TimeEstimate]


ROLE_MODELS: Dict[Role, RoleModelInfo] = {
    Role.UX: RoleModelInfo(
        role=Role.UX,
        label="UX Design",
        description="Product risk, problem ambiguity and discovery depth",
        factors=UX_FACTORS,
        time_table=UX_TIME_TABLE,
    ),
    Role.CONTENT: RoleModelInfo(
        role=Role.CONTENT,
        label="Content Design",
        description="Surface area, localization, regulatory/brand risk and legal dependency",
        factors=CONTENT_FACTORS,
        time_table=CONTENT_TIME_TABLE,
    ),
}


def get_role_model(role: Role) -> RoleModelInfo:
    try:
        return ROLE_MODELS[Role(role)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown role: {role}") from e


__all__ = ["RoleModelInfo", "ROLE_MODELS", "get_role_model"]
