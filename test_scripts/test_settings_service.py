# design_capacity_planner/test_scripts/test_settings_service.py

from __future__ import annotations

import pytest

from planner.db.models import SETTINGS_ROW_ID
from planner.services.estimation import SizeBand
from planner.services.settings_service import (
    SettingsService,
    merge_settings,
    to_effort_config,
    validate_settings,
)


def test_get_or_create_seeds_defaults(db):
    row = SettingsService(db).get_or_create()
    assert row.id == SETTINGS_ROW_ID
    assert row.effort_model["ux"]["productRisk"] == 1.2
    assert row.effort_model["pmIntakeMultiplier"] == 1.0
    assert row.time_model == {"focusTimeRatio": 0.75}
    assert row.size_bands == {"xs": 1.5, "s": 2.5, "m": 3.5, "l": 4.5, "xl": 5.0}

    # second call returns the same row
    assert SettingsService(db).get_or_create().id == row.id


def test_get_or_create_reuses_row_seeded_by_another_session(db, monkeypatch):
    from planner.db.session import SessionLocal

    other = SessionLocal()
    try:
        SettingsService(other).update(time_model={"focusTimeRatio": 0.6})
    finally:
        other.close()

    # this session looked before the other one committed
    real_get = db.get
    calls = []

    def stale_get(*args, **kwargs):
        calls.append(args)
        if len(calls) == 1:
            return None
        return real_get(*args, **kwargs)

    monkeypatch.setattr(db, "get", stale_get)

    row = SettingsService(db).get_or_create()
    assert row.id == SETTINGS_ROW_ID
    assert row.time_model == {"focusTimeRatio": 0.6}
    assert len(calls) == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"time_model": {"focusTimeRatio": 0.3}},
        {"time_model": {"focusTimeRatio": 0.95}},
        {"time_model": {"focusTimeRatio": "0.7"}},
        {"effort_model": {"pmIntakeMultiplier": 11}},
        {"effort_model": {"ux": "heavy"}},
        {"effort_model": {"ux": {"productRisk": 0}}},
        {"size_bands": {"xxl": 6}},
        {"size_bands": {"xs": -1}},
    ],
)
def test_validate_settings_rejects(kwargs):
    with pytest.raises(ValueError):
        validate_settings(**kwargs)


def test_merge_is_per_key():
    current = {
        "effort_model": {"ux": {"productRisk": 1.2, "discoveryDepth": 0.9}, "pmIntakeMultiplier": 1.0},
        "time_model": {"focusTimeRatio": 0.75},
        "size_bands": {"xs": 1.5},
    }
    merged = merge_settings(current, effort_model={"ux": {"productRisk": 2.0}}, size_bands={"s": 2.4})
    assert merged["effort_model"]["ux"] == {"productRisk": 2.0, "discoveryDepth": 0.9}
    assert merged["size_bands"] == {"xs": 1.5, "s": 2.4}
    # input untouched
    assert current["effort_model"]["ux"]["productRisk"] == 1.2


def test_update_persists_and_affects_effort_config(db):
    service = SettingsService(db)
    service.update(time_model={"focusTimeRatio": 0.5}, size_bands={"xs": 1.0})
    config = service.effort_config()
    assert config.focus_time_ratio == 0.5
    assert config.size_bands.xs == 1.0
    assert config.size_bands.s == 2.5


def test_update_rejects_non_ascending_bands(db):
    with pytest.raises(ValueError):
        SettingsService(db).update(size_bands={"s": 1.0})


def test_to_effort_config_clamps_stored_ratio():
    config = to_effort_config({"ux": {"productRisk": 3}}, {"focusTimeRatio": 0.1}, {})
    assert config.focus_time_ratio == 0.4
    assert config.ux_weights == {"productRisk": 3.0}
    assert config.size_bands.l == 4.5
    assert config.pm_intake_multiplier == 1.0
    assert SizeBand.XS.value == "XS"
