"""In-memory repository implementations for unit testing."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import date
from types import TracebackType
from typing import TypeVar

from school_status.domain import (
    EventId,
    PublicHoliday,
    RegionCode,
    School,
    SchoolEvent,
    SchoolId,
    TermRuleId,
    TermRuleSet,
)
from school_status.persistence.interfaces import (
    PublicHolidayRepository,
    SchoolEventRepository,
    SchoolRepository,
    TermRuleRepository,
    UnitOfWork,
)

T = TypeVar("T")


def _copy(value: T) -> T:
    return deepcopy(value)


@dataclass
class InMemorySchoolRepository(SchoolRepository):
    _schools: dict[SchoolId, School] = field(default_factory=dict)

    async def get(self, school_id: SchoolId) -> School | None:
        return _copy(self._schools.get(school_id))

    async def list_active(self) -> Sequence[School]:
        active = [school for school in self._schools.values() if school.is_active]
        return [_copy(school) for school in sorted(active, key=lambda s: s.name)]

    async def upsert(self, school: School) -> None:
        self._schools[school.id] = school


@dataclass
class InMemoryTermRuleRepository(TermRuleRepository):
    _rule_sets: dict[TermRuleId, TermRuleSet] = field(default_factory=dict)

    async def get(self, term_rule_id: TermRuleId) -> TermRuleSet | None:
        return _copy(self._rule_sets.get(term_rule_id))

    async def upsert(self, rule_set: TermRuleSet) -> None:
        self._rule_sets[rule_set.id] = rule_set


@dataclass
class InMemoryPublicHolidayRepository(PublicHolidayRepository):
    _holidays: dict[tuple[RegionCode, date], PublicHoliday] = field(default_factory=dict)

    async def list_for_region(self, region: RegionCode) -> Sequence[PublicHoliday]:
        matches = [h for (r, _), h in self._holidays.items() if r == region.upper()]
        return [_copy(holiday) for holiday in sorted(matches, key=lambda h: h.date)]

    async def upsert(self, holiday: PublicHoliday) -> None:
        self._holidays[(holiday.region, holiday.date)] = holiday


@dataclass
class InMemorySchoolEventRepository(SchoolEventRepository):
    _events: dict[EventId, SchoolEvent] = field(default_factory=dict)

    async def list_for_school(self, school_id: SchoolId) -> Sequence[SchoolEvent]:
        matches = [event for event in self._events.values() if event.school_id == school_id]
        return [_copy(event) for event in sorted(matches, key=lambda e: (e.date, e.name))]

    async def upsert(self, event: SchoolEvent) -> None:
        self._events[event.id] = event


@dataclass
class InMemoryUnitOfWork(UnitOfWork):
    school_repository: InMemorySchoolRepository = field(
        default_factory=InMemorySchoolRepository
    )
    term_rule_repository: InMemoryTermRuleRepository = field(
        default_factory=InMemoryTermRuleRepository
    )
    holiday_repository: InMemoryPublicHolidayRepository = field(
        default_factory=InMemoryPublicHolidayRepository
    )
    event_repository: InMemorySchoolEventRepository = field(
        default_factory=InMemorySchoolEventRepository
    )
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def __aenter__(self) -> InMemoryUnitOfWork:
        await self._lock.acquire()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._lock.release()

    async def commit(self) -> None:
        return None

    async def rollback(self) -> None:
        return None


__all__ = [
    "InMemoryPublicHolidayRepository",
    "InMemorySchoolEventRepository",
    "InMemorySchoolRepository",
    "InMemoryTermRuleRepository",
    "InMemoryUnitOfWork",
]
