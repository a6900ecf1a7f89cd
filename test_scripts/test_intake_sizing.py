# design_capacity_planner/test_scripts/test_intake_sizing.py

from __future__ import annotations

import json

from planner.services.estimation import SizeBand
from planner.services.estimation.intake_sizing import (
    ContentDesignInputs,
    PMIntake,
    ProductDesignInputs,
    designer_weeks,
    size_content,
    size_ux,
)


def _surfaces(mobile=(), web=False, other=()):
    return json.dumps({"mobile": list(mobile), "web": web, "other": list(other)})


def test_single_surface_iteration_is_extra_small():
    sizing = size_ux(ProductDesignInputs(), PMIntake(surfaces_in_scope=_surfaces(web=True)))
    assert sizing.tshirt_size == SizeBand.XS
    assert sizing.sprints == 1


def test_baseline_is_small_for_multiple_surfaces():
    intake = PMIntake(surfaces_in_scope=_surfaces(mobile=["ios"], web=True))
    sizing = size_ux(ProductDesignInputs(), intake)
    assert sizing.tshirt_size == SizeBand.S
    assert sizing.sprints == 2


def test_new_product_adds_one_increment():
    sizing = size_ux(ProductDesignInputs(), PMIntake(new_or_existing="new"))
    assert sizing.increments == 1
    assert sizing.tshirt_size == SizeBand.M
    assert sizing.sprints == 3


def test_responsive_layout_on_three_platforms_counts_full_increment():
    intake = PMIntake(surfaces_in_scope=_surfaces(mobile=["ios", "android"], web=True))
    inputs = ProductDesignInputs(responsive_or_adaptive_layouts=True, changes_to_information_architecture=True)
    sizing = size_ux(inputs, intake)
    assert sizing.increments == 2
    assert sizing.tshirt_size == SizeBand.L


def test_responsive_layout_on_fewer_platforms_counts_half():
    intake = PMIntake(surfaces_in_scope=_surfaces(web=True))
    sizing = size_ux(ProductDesignInputs(responsive_or_adaptive_layouts=True), intake)
    assert sizing.increments == 0.5
    assert sizing.tshirt_size == SizeBand.S


def test_unparseable_surfaces_count_as_half_increment():
    intake = PMIntake(surfaces_in_scope="not json")
    sizing = size_ux(ProductDesignInputs(responsive_or_adaptive_layouts=True), intake)
    assert sizing.increments == 0.5


def test_everything_triggered_is_extra_large():
    intake = PMIntake(new_or_existing="new", surfaces_in_scope=_surfaces(mobile=["ios", "android"], web=True))
    inputs = ProductDesignInputs(
        net_new_patterns=True,
        changes_to_information_architecture=True,
        multiple_user_states_or_paths=True,
        significant_edge_cases_or_error_handling=True,
        responsive_or_adaptive_layouts=True,
    )
    sizing = size_ux(inputs, intake)
    assert sizing.increments == 3
    assert sizing.tshirt_size == SizeBand.XL
    assert sizing.sprints == 6
    assert designer_weeks(sizing, 2) == 12


def test_content_not_required_has_no_size():
    sizing = size_content(ContentDesignInputs(is_content_required="no", financial_or_regulated_language=True))
    assert sizing.tshirt_size is None
    assert sizing.sprints == 0


def test_content_baseline_is_extra_small():
    assert size_content(ContentDesignInputs()).tshirt_size == SizeBand.XS


def test_content_increments():
    inputs = ContentDesignInputs(
        legal_policy_or_compliance_review="unsure",
        ai_driven_or_personalized_decisions=True,
        introducing_new_terminology=True,
        guidance_needed="high",
    )
    sizing = size_content(inputs)
    assert sizing.increments == 3
    assert sizing.tshirt_size == SizeBand.L
    assert sizing.sprints == 4


def test_new_terminology_needs_high_guidance():
    inputs = ContentDesignInputs(introducing_new_terminology=True, guidance_needed="some")
    assert size_content(inputs).tshirt_size == SizeBand.XS


def test_load_inputs_from_stored_blobs():
    from planner.services.capacity_service import load_inputs

    # factor scores and row ids sit beside checklist answers and are ignored
    pd = load_inputs(ProductDesignInputs, {"productRisk": 4, "net_new_patterns": True})
    assert pd.net_new_patterns is True

    intake = load_inputs(PMIntake, {"surfaces_in_scope": {"mobile": ["ios"], "web": True}})
    assert json.loads(intake.surfaces_in_scope) == {"mobile": ["ios"], "web": True}

    # an out-of-range answer falls back to defaults instead of failing the summary
    assert load_inputs(PMIntake, {"new_or_existing": "brand-new"}) == PMIntake()
    assert load_inputs(ContentDesignInputs, None) == ContentDesignInputs()
