# design_capacity_planner/test_scripts/test_api_scenarios.py

from __future__ import annotations

import uuid

import pytest


def test_health(client):
    assert client.get("/health").json() == {"ok": True}
    resp = client.get("/db-health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_create_and_get_scenario(client, scenario):
    assert scenario["title"] == "Q1 Plan"
    assert scenario["year"] == 2026
    assert scenario["committed"] is False
    assert scenario["sprint_length_weeks"] == 2

    resp = client.get(f"/scenarios/{scenario['id']}")
    assert resp.status_code == 200
    assert resp.json()["id"] == scenario["id"]

    listed = client.get("/scenarios").json()
    assert [s["id"] for s in listed] == [scenario["id"]]


@pytest.mark.parametrize(
    "patch",
    [
        {"quarter": "2026-Q5"},
        {"weeks_per_period": 0},
        {"weeks_per_period": 53},
        {"sprint_length_weeks": 5},
        {"ux_designers": -1},
        {"content_designers": 101},
        {"title": ""},
    ],
)
def test_create_validation(client, patch):
    body = {"title": "Plan", "quarter": "2026-Q1", **patch}
    assert client.post("/scenarios", json=body).status_code == 422


def test_invalid_and_unknown_ids(client):
    resp = client.get("/scenarios/not-a-uuid")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid id format"
    assert client.get(f"/scenarios/{uuid.uuid4()}").status_code == 404
    assert client.put(f"/scenarios/{uuid.uuid4()}", json={"title": "x"}).status_code == 404


def test_update_logs_rename_and_commit(client, scenario):
    resp = client.put(f"/scenarios/{scenario['id']}", json={"title": "Q1 Final", "committed": True})
    assert resp.status_code == 200
    assert resp.json()["title"] == "Q1 Final"
    assert resp.json()["committed"] is True

    types = {e["type"] for e in client.get("/activity", params={"scenario_id": scenario["id"]}).json()}
    assert types == {"scenario_created", "scenario_renamed", "scenario_committed"}


def test_update_requires_fields(client, scenario):
    assert client.put(f"/scenarios/{scenario['id']}", json={}).status_code == 400


def test_delete_blocked_while_items_exist(client, scenario):
    item = client.post(
        "/roadmap-items",
        json={"scenario_id": scenario["id"], "key": "A1", "name": "Item"},
    ).json()
    assert client.delete(f"/scenarios/{scenario['id']}").status_code == 400

    assert client.delete(f"/roadmap-items/{item['id']}").status_code == 204
    assert client.delete(f"/scenarios/{scenario['id']}").status_code == 204
    assert client.get(f"/scenarios/{scenario['id']}").status_code == 404

    types = [e["type"] for e in client.get("/activity").json()]
    assert "scenario_deleted" in types


def _add(client, scenario_id, key, initiative, priority, ux, content):
    resp = client.post(
        "/roadmap-items",
        json={
            "scenario_id": scenario_id,
            "key": key,
            "name": key,
            "initiative": initiative,
            "priority": priority,
            "ux_focus_weeks": ux,
            "content_focus_weeks": content,
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_summary_orders_items_and_flags_cut_line(client, scenario):
    # capacity: ux 2 * 13 = 26, content 1 * 13 = 13
    _add(client, scenario["id"], "C", "Beta", 1, 10, 2)
    _add(client, scenario["id"], "B", "Alpha", 2, 10, 8)
    _add(client, scenario["id"], "A", "Alpha", 1, 10, 4)

    resp = client.get(f"/scenarios/{scenario['id']}/summary")
    assert resp.status_code == 200
    body = resp.json()
    items = body["summary"]["items"]

    assert [(i["initiative"], i["priority"]) for i in items] == [("Alpha", 1), ("Alpha", 2), ("Beta", 1)]
    assert [i["above_cut_line_ux"] for i in items] == [False, False, True]
    assert [i["above_cut_line_content"] for i in items] == [False, False, True]

    totals = body["summary"]["totals"]
    assert totals["total_ux_weeks"] == 30
    assert totals["ux_capacity_weeks"] == 26
    assert totals["ux_surplus_deficit"] == 4
    assert totals["ux_headcount_needed"] == 3
    assert totals["content_headcount_needed"] == 2


def test_summary_of_empty_scenario(client, scenario):
    body = client.get(f"/scenarios/{scenario['id']}/summary").json()
    assert body["summary"]["items"] == []
    assert body["summary"]["totals"]["ux_surplus_deficit"] == -26


def test_paste_import_dry_run_and_import(client, scenario):
    raw = "Title\tStart\tEnd\tEffort\nCheckout\t2026-01-05\t2026-02-20\t4\nBroken\t\t\tabc\n"

    dry = client.post(f"/scenarios/{scenario['id']}/import", json={"raw": raw, "dry_run": True})
    assert dry.status_code == 200
    assert dry.json()["summary"] == {"valid_count": 1, "invalid_count": 1}
    assert dry.json()["created"] == []
    assert client.get("/roadmap-items", params={"scenario_id": scenario["id"]}).json() == []

    resp = client.post(f"/scenarios/{scenario['id']}/import", json={"raw": raw})
    assert resp.status_code == 200
    created = resp.json()["created"]
    assert len(created) == 1
    item = created[0]
    assert item["key"] == "CHECK"
    assert item["priority"] == 1
    assert item["start_date"] == "2026-01-05"
    assert item["ux_focus_weeks"] == 2
    assert item["content_focus_weeks"] == 2
    assert item["ux_work_weeks"] == 2.7


def test_import_into_unknown_scenario(client):
    resp = client.post(f"/scenarios/{uuid.uuid4()}/import", json={"raw": "A\t\t\t1"})
    assert resp.status_code == 404


def test_summary_on_intake_basis_uses_sprint_length(client, scenario):
    assert client.put(f"/scenarios/{scenario['id']}", json={"sprint_length_weeks": 4}).status_code == 200

    # new surface: UX M (3 sprints); content defaults to required, XS (1 sprint)
    first = client.post(
        "/roadmap-items",
        json={
            "scenario_id": scenario["id"],
            "key": "NEW",
            "name": "New surface",
            "priority": 1,
            "pm_intake": {"new_or_existing": "new"},
        },
    ).json()
    # IA change plus complex patterns: UX L (4 sprints); no content needed
    second = client.post(
        "/roadmap-items",
        json={
            "scenario_id": scenario["id"],
            "key": "IA",
            "name": "IA rework",
            "priority": 2,
            "pm_intake": {"new_or_existing": "existing"},
            "ux_factors": {
                "changes_to_information_architecture": True,
                "net_new_patterns": True,
                "multiple_user_states_or_paths": True,
                "significant_edge_cases_or_error_handling": True,
            },
            "content_factors": {"is_content_required": "no"},
        },
    ).json()

    body = client.get(f"/scenarios/{scenario['id']}/summary", params={"basis": "intake"}).json()
    items = body["summary"]["items"]
    assert [i["item_id"] for i in items] == [first["id"], second["id"]]
    assert [i["above_cut_line_ux"] for i in items] == [False, True]
    assert [i["above_cut_line_content"] for i in items] == [False, False]

    totals = body["summary"]["totals"]
    assert totals["total_ux_weeks"] == 28
    assert totals["total_content_weeks"] == 4
    assert totals["ux_headcount_needed"] == 3

    # stored focus weeks are untouched, so the default basis sees no demand
    focus = client.get(f"/scenarios/{scenario['id']}/summary").json()
    assert focus["summary"]["totals"]["total_ux_weeks"] == 0


def test_summary_rejects_unknown_basis(client, scenario):
    resp = client.get(f"/scenarios/{scenario['id']}/summary", params={"basis": "sprints"})
    assert resp.status_code == 422
