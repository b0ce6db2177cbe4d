from __future__ import annotations

import asyncio
from datetime import date

import pytest

from school_status.domain import School, SchoolId, TermRuleId, TransitionLabel
from school_status.persistence import InMemoryUnitOfWork, NotFoundError
from school_status.reference import load_reference_dataset
from school_status.services import SchoolStatusService, seed_reference_data
from school_status.status import ChangeScout, ConfigurationError, OutOfRangeError, StatusResolver


def _service(uow: InMemoryUnitOfWork) -> SchoolStatusService:
    resolver = StatusResolver()
    return SchoolStatusService(lambda: uow, resolver, ChangeScout(resolver))


@pytest.fixture
def seeded_uow() -> InMemoryUnitOfWork:
    uow = InMemoryUnitOfWork()
    asyncio.run(seed_reference_data(lambda: uow, load_reference_dataset()))
    return uow


async def _add_school(uow: InMemoryUnitOfWork, school: School) -> None:
    async with uow as session:
        await session.school_repository.upsert(school)
        await session.commit()


def test_list_schools_is_sorted_by_name(seeded_uow: InMemoryUnitOfWork) -> None:
    schools = asyncio.run(_service(seeded_uow).list_schools())

    assert [school.name for school in schools] == [
        "Hilder Road State School",
        "Payne Road State School",
        "The Gap State High School",
        "The Gap State School",
    ]


def test_inactive_schools_are_not_listed(seeded_uow: InMemoryUnitOfWork) -> None:
    closed = School(id=SchoolId("old-ss"), name="Old State School", region="QLD", is_active=False)
    asyncio.run(_add_school(seeded_uow, closed))

    schools = asyncio.run(_service(seeded_uow).list_schools())

    assert SchoolId("old-ss") not in {school.id for school in schools}


def test_load_rule_set_collects_school_data(seeded_uow: InMemoryUnitOfWork) -> None:
    rule_set = asyncio.run(_service(seeded_uow).load_rule_set(SchoolId("the-gap-ss")))

    assert rule_set.school.name == "The Gap State School"
    assert rule_set.term_rules is not None
    assert rule_set.term_rules.id == "qld-state-2026"
    assert len(rule_set.events) == 2
    assert rule_set.holiday_on(date(2026, 1, 26)) is not None


def test_status_combines_verdict_and_projection(seeded_uow: InMemoryUnitOfWork) -> None:
    status = asyncio.run(_service(seeded_uow).status(SchoolId("the-gap-ss"), date(2026, 1, 27)))

    assert status.school.id == "the-gap-ss"
    assert status.date == date(2026, 1, 27)
    assert not status.verdict.is_open
    assert status.verdict.reason == "Staff Preparation Day"
    assert status.next_change.date == date(2026, 1, 28)
    assert status.next_change.label is TransitionLabel.SCHOOL_STARTS
    assert status.next_change.reason == "Term 1"


def test_events_only_apply_to_their_school(seeded_uow: InMemoryUnitOfWork) -> None:
    verdict = asyncio.run(_service(seeded_uow).check(SchoolId("the-gap-shs"), date(2026, 1, 27)))

    assert verdict.is_open
    assert verdict.reason == "Term 1"


def test_shared_student_free_day(seeded_uow: InMemoryUnitOfWork) -> None:
    service = _service(seeded_uow)
    for school_id in ("the-gap-ss", "the-gap-shs", "payne-road-ss", "hilder-road-ss"):
        verdict = asyncio.run(service.check(SchoolId(school_id), date(2026, 9, 4)))
        assert verdict.reason == "Staff PD Day"


def test_next_change_resolves_current_status_when_omitted(
    seeded_uow: InMemoryUnitOfWork,
) -> None:
    projection = asyncio.run(
        _service(seeded_uow).next_change(SchoolId("hilder-road-ss"), date(2026, 6, 26))
    )

    assert projection.date == date(2026, 6, 27)
    assert projection.label is TransitionLabel.HOLIDAYS_START


def test_next_change_honours_explicit_status_and_horizon(
    seeded_uow: InMemoryUnitOfWork,
) -> None:
    service = _service(seeded_uow)

    projection = asyncio.run(
        service.next_change(
            SchoolId("hilder-road-ss"),
            date(2026, 6, 26),
            current_is_open=False,
            horizon_days=30,
        )
    )
    assert projection.date == date(2026, 7, 13)
    assert projection.reason == "Term 3"

    short = asyncio.run(
        service.next_change(
            SchoolId("hilder-road-ss"),
            date(2026, 6, 26),
            current_is_open=False,
            horizon_days=5,
        )
    )
    assert not short.found


def test_unknown_school_raises_not_found(seeded_uow: InMemoryUnitOfWork) -> None:
    with pytest.raises(NotFoundError):
        asyncio.run(_service(seeded_uow).check(SchoolId("missing"), date(2026, 2, 3)))


def test_school_without_term_rules_is_a_configuration_error(
    seeded_uow: InMemoryUnitOfWork,
) -> None:
    school = School(id=SchoolId("new-ss"), name="New State School", region="QLD")
    asyncio.run(_add_school(seeded_uow, school))

    with pytest.raises(ConfigurationError):
        asyncio.run(_service(seeded_uow).check(school.id, date(2026, 2, 3)))


def test_dangling_term_rule_reference_is_a_configuration_error(
    seeded_uow: InMemoryUnitOfWork,
) -> None:
    school = School(
        id=SchoolId("lost-ss"),
        name="Lost State School",
        region="QLD",
        term_rule_id=TermRuleId("qld-2031"),
    )
    asyncio.run(_add_school(seeded_uow, school))

    with pytest.raises(ConfigurationError):
        asyncio.run(_service(seeded_uow).status(school.id, date(2026, 2, 3)))


def test_out_of_range_date_propagates(seeded_uow: InMemoryUnitOfWork) -> None:
    with pytest.raises(OutOfRangeError):
        asyncio.run(_service(seeded_uow).status(SchoolId("the-gap-ss"), date(2027, 3, 1)))


def test_seeding_is_idempotent(seeded_uow: InMemoryUnitOfWork) -> None:
    asyncio.run(seed_reference_data(lambda: seeded_uow, load_reference_dataset()))

    service = _service(seeded_uow)
    assert len(asyncio.run(service.list_schools())) == 4
    rule_set = asyncio.run(service.load_rule_set(SchoolId("the-gap-ss")))
    assert len(rule_set.events) == 2
