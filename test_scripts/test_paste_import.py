# design_capacity_planner/test_scripts/test_paste_import.py

from __future__ import annotations

from planner.services.paste_import import (
    detect_header,
    import_summary,
    parse_pasted_roadmap_items,
    short_key,
    to_item_payload,
)


def test_empty_input():
    assert parse_pasted_roadmap_items("") == []
    assert parse_pasted_roadmap_items("   \n\n") == []


def test_four_column_with_header():
    raw = "Title\tStart\tEnd\tEffort\nCheckout redesign\t2026-01-05\t2026-02-20\t4\n\nSearch\t\t\t2.5\n"
    rows = parse_pasted_roadmap_items(raw)
    assert len(rows) == 2
    first = rows[0]
    assert first.is_valid
    assert first.item.title == "Checkout redesign"
    assert first.item.start_date == "2026-01-05"
    assert first.item.effort_weeks == 4
    assert first.item.five_column is False
    assert rows[1].item.start_date is None
    assert rows[1].item.effort_weeks == 2.5


def test_five_column_header_detection():
    assert detect_header(["Title", "Start", "End", "UX effort", "Content effort"]) == (True, True)
    assert detect_header(["Title", "Start", "End", "Effort"]) == (True, False)
    assert detect_header(["Title", "2026", "End", "Effort"]) == (False, False)
    assert detect_header(["Name", "Start", "End", "Effort"]) == (False, False)


def test_five_column_without_header():
    rows = parse_pasted_roadmap_items("Onboarding\tJan\tMar\t3\t1.5")
    assert len(rows) == 1
    item = rows[0].item
    assert item.five_column
    assert (item.ux_effort_weeks, item.content_effort_weeks) == (3, 1.5)


def test_validation_errors():
    raw = "Title\tStart\tEnd\tUX effort\tContent effort\n\tJan\tFeb\t1\t1\nPayments\tJan\tFeb\tlots\tsome\nOk\t\t\t\t\n"
    rows = parse_pasted_roadmap_items(raw)
    assert [r.is_valid for r in rows] == [False, False, True]
    assert rows[0].error_message == "Missing title"
    assert rows[1].error_message == "UX effort is not a number, Content effort is not a number"
    assert import_summary(rows).model_dump() == {"valid_count": 1, "invalid_count": 2}


def test_non_finite_effort_is_rejected():
    rows = parse_pasted_roadmap_items("A\t\t\tinf\nB\t\t\tnan")
    assert [r.error_message for r in rows] == ["Effort is not a number", "Effort is not a number"]


def test_short_key():
    assert short_key("Checkout redesign") == "CHECK"
    assert short_key("a b c d e f") == "ABC"
    assert short_key("My-App") == "MYAP"
    assert short_key("***") == "ITEM"


def test_four_column_effort_is_split_evenly():
    row = parse_pasted_roadmap_items("Search\t\t\t3")[0]
    payload = to_item_payload("sid", row.item, 0.75)
    assert payload["key"] == "SEARC"
    assert payload["priority"] == 1
    assert payload["ux_focus_weeks"] == 1.5
    assert payload["content_focus_weeks"] == 1.5
    assert payload["ux_work_weeks"] == 2.0


def test_five_column_payload_skips_missing_effort():
    row = parse_pasted_roadmap_items("Title\tS\tE\tUX effort\tContent effort\nHelp\t\t\t2\t")[0]
    payload = to_item_payload("sid", row.item, 0.5)
    assert payload["ux_focus_weeks"] == 2
    assert payload["ux_work_weeks"] == 4.0
    assert "content_focus_weeks" not in payload
