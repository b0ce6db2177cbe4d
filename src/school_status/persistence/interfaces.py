"""Persistence layer abstractions for repositories and unit of work."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType
from typing import Protocol

from school_status.domain import (
    PublicHoliday,
    RegionCode,
    School,
    SchoolEvent,
    SchoolId,
    TermRuleId,
    TermRuleSet,
)


class SchoolRepository(Protocol):
    """Read/write access to schools."""

    async def get(self, school_id: SchoolId) -> School | None: ...

    async def list_active(self) -> Sequence[School]: ...

    async def upsert(self, school: School) -> None: ...


class TermRuleRepository(Protocol):
    """Term date rule sets keyed by id."""

    async def get(self, term_rule_id: TermRuleId) -> TermRuleSet | None: ...

    async def upsert(self, rule_set: TermRuleSet) -> None: ...


class PublicHolidayRepository(Protocol):
    """Region-wide public holidays, unique per region and date."""

    async def list_for_region(self, region: RegionCode) -> Sequence[PublicHoliday]: ...

    async def upsert(self, holiday: PublicHoliday) -> None: ...


class SchoolEventRepository(Protocol):
    """Per-school calendar events."""

    async def list_for_school(self, school_id: SchoolId) -> Sequence[SchoolEvent]: ...

    async def upsert(self, event: SchoolEvent) -> None: ...


class UnitOfWork(Protocol):
    """Transactional boundary over the reference data repositories."""

    school_repository: SchoolRepository
    term_rule_repository: TermRuleRepository
    holiday_repository: PublicHolidayRepository
    event_repository: SchoolEventRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
