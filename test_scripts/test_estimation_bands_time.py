# design_capacity_planner/test_scripts/test_estimation_bands_time.py

from __future__ import annotations

import pytest
from pydantic import ValidationError

from planner.services.estimation import (
    BandThresholds,
    Role,
    SizeBand,
    TimeEstimate,
    clamp_focus_time_ratio,
    derive_work_weeks,
    estimate_sprints,
    map_band_to_time,
    map_score_to_band,
)


@pytest.mark.parametrize(
    "score,band",
    [
        (0.0, SizeBand.XS),
        (1.0, SizeBand.XS),
        (1.5, SizeBand.XS),
        (1.51, SizeBand.S),
        (2.5, SizeBand.S),
        (2.51, SizeBand.M),
        (3.5, SizeBand.M),
        (3.51, SizeBand.L),
        (4.5, SizeBand.L),
        (4.51, SizeBand.XL),
        (5.0, SizeBand.XL),
        (42.0, SizeBand.XL),
    ],
)
def test_default_band_boundaries(score, band):
    assert map_score_to_band(score) == band


def test_configured_thresholds_keep_half_open_semantics():
    t = BandThresholds(xs=1.6, s=2.6, m=3.6, l=4.6, xl=5.0)
    assert map_score_to_band(1.6, t) == SizeBand.XS
    assert map_score_to_band(1.61, t) == SizeBand.S
    assert map_score_to_band(4.6, t) == SizeBand.L
    assert map_score_to_band(4.61, t) == SizeBand.XL


def test_thresholds_must_ascend():
    with pytest.raises(ValidationError):
        BandThresholds(xs=2.0, s=1.0)


TIME_TABLE = [
    (SizeBand.XS, Role.UX, 0.5, 1.0),
    (SizeBand.S, Role.UX, 1.0, 2.0),
    (SizeBand.M, Role.UX, 2.0, 4.0),
    (SizeBand.L, Role.UX, 4.0, 8.0),
    (SizeBand.XL, Role.UX, 6.0, 12.0),
    (SizeBand.XS, Role.CONTENT, 0.5, 1.0),
    (SizeBand.S, Role.CONTENT, 1.0, 2.0),
    (SizeBand.M, Role.CONTENT, 1.5, 3.0),
    (SizeBand.L, Role.CONTENT, 3.0, 6.0),
    (SizeBand.XL, Role.CONTENT, 5.0, 10.0),
]


@pytest.mark.parametrize("band,role,focus,work", TIME_TABLE)
def test_time_table_literals(band, role, focus, work):
    assert map_band_to_time(band, role) == TimeEstimate(focus_weeks=focus, work_weeks=work)


def test_time_lookup_accepts_plain_strings():
    assert map_band_to_time("M", "content") == TimeEstimate(focus_weeks=1.5, work_weeks=3.0)


@pytest.mark.parametrize(
    "focus,ratio,expected",
    [
        (1.5, None, 2.0),
        (1.0, 0.75, 1.3),
        (0.5, 0.75, 0.7),
        (3.0, 0.5, 6.0),
        (0.1, 0.4, 0.3),  # 0.25 rounds half up
        (0.0, 0.75, 0.0),
    ],
)
def test_derive_work_weeks(focus, ratio, expected):
    assert derive_work_weeks(focus, ratio) == expected


def test_derive_work_weeks_rejects_non_positive_ratio():
    with pytest.raises(ValueError):
        derive_work_weeks(1.0, 0)


def test_clamp_focus_time_ratio():
    assert clamp_focus_time_ratio(None) == 0.75
    assert clamp_focus_time_ratio(0.1) == 0.4
    assert clamp_focus_time_ratio(0.95) == 0.9
    assert clamp_focus_time_ratio(0.6) == 0.6


def test_estimate_sprints_uses_two_week_sprints():
    assert estimate_sprints(4.0) == 2.0
    assert estimate_sprints(1.5) == 0.75
