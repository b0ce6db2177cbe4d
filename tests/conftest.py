from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from school_status.domain import (  # noqa: E402
    PublicHoliday,
    School,
    SchoolId,
    SchoolRuleSet,
    Term,
    TermRuleId,
    TermRuleSet,
)

TERM_RULE_ID = TermRuleId("qld-2026")
SCHOOL_ID = SchoolId("test-ss")


@pytest.fixture
def term_rules() -> TermRuleSet:
    return TermRuleSet(
        id=TERM_RULE_ID,
        name="QLD State Schools 2026",
        region="QLD",
        year=2026,
        terms=(
            Term(number=1, start_date=date(2026, 1, 27), end_date=date(2026, 4, 2)),
            Term(number=2, start_date=date(2026, 4, 20), end_date=date(2026, 6, 26)),
            Term(number=3, start_date=date(2026, 7, 13), end_date=date(2026, 9, 18)),
            Term(number=4, start_date=date(2026, 10, 6), end_date=date(2026, 12, 11)),
        ),
    )


@pytest.fixture
def holidays() -> tuple[PublicHoliday, ...]:
    return (
        PublicHoliday(region="QLD", date=date(2026, 1, 1), name="New Year's Day"),
        PublicHoliday(region="QLD", date=date(2026, 1, 26), name="Australia Day"),
        PublicHoliday(region="QLD", date=date(2026, 4, 3), name="Good Friday"),
        PublicHoliday(region="QLD", date=date(2026, 4, 6), name="Easter Monday"),
        PublicHoliday(region="QLD", date=date(2026, 4, 25), name="ANZAC Day"),
        PublicHoliday(region="QLD", date=date(2026, 5, 4), name="Labour Day"),
        PublicHoliday(region="NSW", date=date(2026, 6, 8), name="King's Birthday"),
    )


@pytest.fixture
def school() -> School:
    return School(
        id=SCHOOL_ID,
        name="Test State School",
        region="QLD",
        term_rule_id=TERM_RULE_ID,
    )


@pytest.fixture
def rule_set(
    school: School,
    term_rules: TermRuleSet,
    holidays: tuple[PublicHoliday, ...],
) -> SchoolRuleSet:
    return SchoolRuleSet(school=school, term_rules=term_rules, holidays=holidays)
