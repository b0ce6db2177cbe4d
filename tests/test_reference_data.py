from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from school_status.domain import SchoolId, SchoolRuleSet
from school_status.reference import load_reference_dataset
from school_status.status import StatusResolver


def test_bundled_dataset_loads() -> None:
    dataset = load_reference_dataset()

    assert {school.id for school in dataset.schools} == {
        "the-gap-ss",
        "the-gap-shs",
        "payne-road-ss",
        "hilder-road-ss",
    }
    assert len(dataset.term_rules) == 1
    assert [term.number for term in dataset.term_rules[0].terms] == [1, 2, 3, 4]
    assert all(holiday.region == "QLD" for holiday in dataset.holidays)


def test_bundled_schools_reference_known_term_rules() -> None:
    dataset = load_reference_dataset()
    rule_ids = {rule_set.id for rule_set in dataset.term_rules}
    assert all(school.term_rule_id in rule_ids for school in dataset.schools)


def test_bundled_holidays_are_unique_per_region_and_date() -> None:
    dataset = load_reference_dataset()
    keys = [(holiday.region, holiday.date) for holiday in dataset.holidays]
    assert len(keys) == len(set(keys))


def test_bundled_dataset_resolves_student_free_day() -> None:
    dataset = load_reference_dataset()
    school = dataset.school(SchoolId("payne-road-ss"))
    assert school is not None
    rule_set = SchoolRuleSet(
        school=school,
        term_rules=dataset.term_rules[0],
        holidays=dataset.holidays,
        events=dataset.events,
    )

    verdict = StatusResolver().resolve(rule_set, date(2026, 9, 4))

    assert verdict.reason == "Staff PD Day"


def test_unknown_school_lookup_returns_none() -> None:
    assert load_reference_dataset().school(SchoolId("nope")) is None


def test_dataset_from_path(tmp_path: Path) -> None:
    payload = {
        "term_rules": [
            {
                "id": "vic-2026",
                "region": "VIC",
                "year": 2026,
                "terms": [{"number": 1, "start_date": "2026-01-28", "end_date": "2026-04-02"}],
            }
        ],
        "schools": [
            {"id": "x", "name": "X Primary", "region": "vic", "term_rule_id": "vic-2026"}
        ],
    }
    path = tmp_path / "vic.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    dataset = load_reference_dataset(path)

    assert dataset.schools[0].region == "VIC"
    assert dataset.holidays == ()


def test_dataset_rejects_unknown_fields(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"schools": [], "principals": []}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_reference_dataset(path)
