from .interfaces import (
    Role,
    SizeBand,
    FactorScores,
    FactorDefinition,
    TimeEstimate,
    EffortResult,
    BandThresholds,
    EffortModelConfig,
    CapacityItem,
    ItemCapacityFlags,
    CapacityTotals,
    CapacitySummary,
)
from .errors import EstimationError, InvalidWeeksPerPeriod, PreconditionViolation
from .factors import (
    get_factors_for_role,
    resolve_factor_definitions,
    extract_factor_scores,
)
from .aggregator import weighted_score
from .bands import map_score_to_band
from .time_model import (
    map_band_to_time,
    derive_work_weeks,
    clamp_focus_time_ratio,
    estimate_sprints,
)
from .engine import calculate_effort
from .capacity import sort_capacity_items, validate_sorted, capacity_weeks, summarize
from .registry import RoleModelInfo, ROLE_MODELS, get_role_model

__all__ = [
    "Role",
    "SizeBand",
    "FactorScores",
    "FactorDefinition",
    "TimeEstimate",
    "EffortResult",
    "BandThresholds",
    "EffortModelConfig",
    "CapacityItem",
    "ItemCapacityFlags",
    "CapacityTotals",
    "CapacitySummary",
    "EstimationError",
    "InvalidWeeksPerPeriod",
    "PreconditionViolation",
    "get_factors_for_role",
    "resolve_factor_definitions",
    "extract_factor_scores",
    "weighted_score",
    "map_score_to_band",
    "map_band_to_time",
    "derive_work_weeks",
    "clamp_focus_time_ratio",
    "estimate_sprints",
    "calculate_effort",
    "sort_capacity_items",
    "validate_sorted",
    "capacity_weeks",
    "summarize",
    "RoleModelInfo",
    "ROLE_MODELS",
    "get_role_model",
]
