# design_capacity_planner/planner/services/settings_service.py
"""
Deployment-wide estimation settings (single row in the settings table).

Stored JSON shapes:
- effort_model: {"ux": {factor: weight}, "content": {factor: weight}, "pmIntakeMultiplier": 1.0}
- time_model:   {"focusTimeRatio": 0.75}
- size_bands:   {"xs": 1.5, "s": 2.5, "m": 3.5, "l": 4.5, "xl": 5.0}
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from planner.config import settings
from planner.db.models.planner_settings import SETTINGS_ROW_ID, PlannerSettings
from planner.services.estimation.factors import default_weights
from planner.services.estimation.interfaces import (
    DEFAULT_FOCUS_TIME_RATIO,
    MAX_FOCUS_TIME_RATIO,
    MIN_FOCUS_TIME_RATIO,
    BandThresholds,
    EffortModelConfig,
    Role,
)
from planner.services.estimation.time_model import clamp_focus_time_ratio

logger = logging.getLogger("planner.services.settings")

SIZE_BAND_KEYS = ("xs", "s", "m", "l", "xl")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def default_settings_payload() -> Dict[str, Dict[str, Any]]:
    """Factory defaults, overlaid with EFFORT_MODEL_CONFIG_FILE values when configured."""
    payload: Dict[str, Dict[str, Any]] = {
        "effort_model": {
            "ux": default_weights(Role.UX),
            "content": default_weights(Role.CONTENT),
            "pmIntakeMultiplier": 1.0,
        },
        "time_model": {"focusTimeRatio": DEFAULT_FOCUS_TIME_RATIO},
        "size_bands": BandThresholds().model_dump(),
    }
    seed = settings.EFFORT_MODEL_DEFAULTS
    if seed is not None:
        payload = merge_settings(
            payload,
            effort_model=seed.effort_model or None,
            time_model=seed.time_model or None,
            size_bands=seed.size_bands or None,
        )
        validate_settings(payload["effort_model"], payload["time_model"], payload["size_bands"])
    return payload


def validate_settings(
    effort_model: Optional[Mapping[str, Any]] = None,
    time_model: Optional[Mapping[str, Any]] = None,
    size_bands: Optional[Mapping[str, Any]] = None,
) -> None:
    """Raise ValueError with a user-facing message on the first invalid value."""
    if time_model is not None and "focusTimeRatio" in time_model:
        ratio = time_model["focusTimeRatio"]
        if not _is_number(ratio) or ratio < MIN_FOCUS_TIME_RATIO or ratio > MAX_FOCUS_TIME_RATIO:
            raise ValueError(
                f"Focus-time ratio must be between {MIN_FOCUS_TIME_RATIO} and {MAX_FOCUS_TIME_RATIO}"
            )

    if effort_model is not None:
        for role in (Role.UX, Role.CONTENT):
            weights = effort_model.get(role.value)
            if weights is None:
                continue
            if not isinstance(weights, Mapping):
                raise ValueError(f"Invalid effort_model.{role.value}: must be an object")
            for name, weight in weights.items():
                if not _is_number(weight) or weight <= 0:
                    raise ValueError(
                        f"Invalid effort_model.{role.value}.{name}: must be a positive number"
                    )
        if "pmIntakeMultiplier" in effort_model:
            multiplier = effort_model["pmIntakeMultiplier"]
            if not _is_number(multiplier) or multiplier < 0 or multiplier > 10:
                raise ValueError(
                    "Invalid effort_model.pmIntakeMultiplier: must be a number between 0 and 10"
                )

    if size_bands is not None:
        for key, value in size_bands.items():
            if key not in SIZE_BAND_KEYS:
                raise ValueError(
                    f"Invalid size_bands key: {key}. Must be one of {', '.join(SIZE_BAND_KEYS)}"
                )
            if not _is_number(value) or value < 0:
                raise ValueError(f"Invalid size_bands.{key}: must be a non-negative number")


def merge_settings(
    current: Mapping[str, Mapping[str, Any]],
    effort_model: Optional[Mapping[str, Any]] = None,
    time_model: Optional[Mapping[str, Any]] = None,
    size_bands: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Dict[str, Any]]:
    """Shallow merge per section; per-role weight tables are merged key by key."""
    merged = {k: copy.deepcopy(dict(v or {})) for k, v in current.items()}

    if effort_model:
        em = merged.setdefault("effort_model", {})
        for key, value in effort_model.items():
            if key in (Role.UX.value, Role.CONTENT.value) and isinstance(value, Mapping):
                em[key] = {**(em.get(key) or {}), **value}
            else:
                em[key] = value
    if time_model:
        merged.setdefault("time_model", {}).update(time_model)
    if size_bands:
        merged.setdefault("size_bands", {}).update(size_bands)
    return merged


def to_effort_config(
    effort_model: Optional[Mapping[str, Any]],
    time_model: Optional[Mapping[str, Any]],
    size_bands: Optional[Mapping[str, Any]],
) -> EffortModelConfig:
    """Build the kernel config from stored JSON. Out-of-range ratios are clamped."""
    effort_model = effort_model or {}
    time_model = time_model or {}

    def weights(role: Role) -> Dict[str, float]:
        raw = effort_model.get(role.value) or {}
        return {k: float(v) for k, v in raw.items() if _is_number(v)}

    multiplier = effort_model.get("pmIntakeMultiplier", 1.0)
    bands = {**BandThresholds().model_dump(), **{k: v for k, v in (size_bands or {}).items() if k in SIZE_BAND_KEYS}}
    try:
        thresholds = BandThresholds(**bands)
    except ValidationError as e:
        raise ValueError(f"Invalid size_bands: {e.errors()[0]['msg']}") from e

    return EffortModelConfig(
        ux_weights=weights(Role.UX),
        content_weights=weights(Role.CONTENT),
        pm_intake_multiplier=float(multiplier) if _is_number(multiplier) else 1.0,
        focus_time_ratio=clamp_focus_time_ratio(time_model.get("focusTimeRatio")),
        size_bands=thresholds,
    )


class SettingsService:
    """Read and update the single settings row."""

    def __init__(self, db: Session):
        self.db = db

    def get_or_create(self) -> PlannerSettings:
        row = self.db.get(PlannerSettings, SETTINGS_ROW_ID)
        if row is not None:
            return row

        defaults = default_settings_payload()
        row = PlannerSettings(id=SETTINGS_ROW_ID, **defaults)
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent request seeded the row first
            self.db.rollback()
            existing = self.db.get(PlannerSettings, SETTINGS_ROW_ID)
            if existing is None:
                raise
            logger.info("settings.create_raced")
            return existing
        self.db.refresh(row)
        logger.info("settings.created")
        return row

    def update(
        self,
        effort_model: Optional[Mapping[str, Any]] = None,
        time_model: Optional[Mapping[str, Any]] = None,
        size_bands: Optional[Mapping[str, Any]] = None,
    ) -> PlannerSettings:
        validate_settings(effort_model, time_model, size_bands)

        row = self.get_or_create()
        merged = merge_settings(
            {
                "effort_model": row.effort_model,
                "time_model": row.time_model,
                "size_bands": row.size_bands,
            },
            effort_model=effort_model,
            time_model=time_model,
            size_bands=size_bands,
        )
        # Thresholds must stay ascending once merged with the stored values
        to_effort_config(merged["effort_model"], merged["time_model"], merged["size_bands"])

        # Reassign (not mutate) so SQLAlchemy sees the JSON columns as changed
        row.effort_model = merged["effort_model"]  # type: ignore[assignment]
        row.time_model = merged["time_model"]  # type: ignore[assignment]
        row.size_bands = merged["size_bands"]  # type: ignore[assignment]
        self.db.commit()
        self.db.refresh(row)

        updated = [k for k, v in (("effort_model", effort_model), ("time_model", time_model), ("size_bands", size_bands)) if v]
        logger.info("settings.updated", extra={"updated": updated})
        return row

    def effort_config(self) -> EffortModelConfig:
        row = self.get_or_create()
        return to_effort_config(row.effort_model, row.time_model, row.size_bands)  # type: ignore[arg-type]


__all__ = [
    "SIZE_BAND_KEYS",
    "default_settings_payload",
    "validate_settings",
    "merge_settings",
    "to_effort_config",
    "SettingsService",
]
