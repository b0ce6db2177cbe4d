"""SQLite repository implementations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from school_status.domain import (
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
)

from .models import PublicHolidayRecord, SchoolEventRecord, SchoolRecord, TermRuleRecord


class SQLiteSchoolRepository(SchoolRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, school_id: SchoolId) -> School | None:
        record = await self._session.get(SchoolRecord, str(school_id))
        if record is None:
            return None
        return School.model_validate(record.payload)

    async def list_active(self) -> Sequence[School]:
        stmt: Select[tuple[SchoolRecord]] = (
            select(SchoolRecord)
            .where(SchoolRecord.is_active.is_(True))
            .order_by(SchoolRecord.name)
        )
        result = await self._session.execute(stmt)
        return [School.model_validate(r.payload) for r in result.scalars().all()]

    async def upsert(self, school: School) -> None:
        record = await self._session.get(SchoolRecord, str(school.id))
        payload = school.model_dump(mode="json")
        if record is None:
            record = SchoolRecord(
                id=str(school.id),
                name=school.name,
                region=school.region,
                term_rule_id=school.term_rule_id,
                is_active=school.is_active,
                payload=payload,
            )
            self._session.add(record)
        else:
            record.name = school.name
            record.region = school.region
            record.term_rule_id = school.term_rule_id
            record.is_active = school.is_active
            record.payload = payload


class SQLiteTermRuleRepository(TermRuleRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, term_rule_id: TermRuleId) -> TermRuleSet | None:
        record = await self._session.get(TermRuleRecord, str(term_rule_id))
        if record is None:
            return None
        return TermRuleSet.model_validate(record.payload)

    async def upsert(self, rule_set: TermRuleSet) -> None:
        record = await self._session.get(TermRuleRecord, str(rule_set.id))
        payload = rule_set.model_dump(mode="json")
        if record is None:
            record = TermRuleRecord(
                id=str(rule_set.id),
                region=rule_set.region,
                year=rule_set.year,
                payload=payload,
            )
            self._session.add(record)
        else:
            record.region = rule_set.region
            record.year = rule_set.year
            record.payload = payload


class SQLitePublicHolidayRepository(PublicHolidayRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_region(self, region: RegionCode) -> Sequence[PublicHoliday]:
        stmt: Select[tuple[PublicHolidayRecord]] = (
            select(PublicHolidayRecord)
            .where(PublicHolidayRecord.region == region.upper())
            .order_by(PublicHolidayRecord.holiday_date)
        )
        result = await self._session.execute(stmt)
        return [
            PublicHoliday(region=r.region, date=r.holiday_date, name=r.name)
            for r in result.scalars().all()
        ]

    async def upsert(self, holiday: PublicHoliday) -> None:
        key = (holiday.region, holiday.date.isoformat())
        record = await self._session.get(PublicHolidayRecord, key)
        if record is None:
            self._session.add(
                PublicHolidayRecord(
                    region=holiday.region,
                    holiday_date=holiday.date.isoformat(),
                    name=holiday.name,
                )
            )
        else:
            record.name = holiday.name


class SQLiteSchoolEventRepository(SchoolEventRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_school(self, school_id: SchoolId) -> Sequence[SchoolEvent]:
        stmt: Select[tuple[SchoolEventRecord]] = (
            select(SchoolEventRecord)
            .where(SchoolEventRecord.school_id == str(school_id))
            .order_by(SchoolEventRecord.event_date)
        )
        result = await self._session.execute(stmt)
        return [SchoolEvent.model_validate(r.payload) for r in result.scalars().all()]

    async def upsert(self, event: SchoolEvent) -> None:
        record = await self._session.get(SchoolEventRecord, str(event.id))
        payload = event.model_dump(mode="json")
        if record is None:
            record = SchoolEventRecord(
                id=str(event.id),
                school_id=str(event.school_id),
                event_date=event.date.isoformat(),
                is_closure=event.is_closure,
                payload=payload,
            )
            self._session.add(record)
        else:
            record.school_id = str(event.school_id)
            record.event_date = event.date.isoformat()
            record.is_closure = event.is_closure
            record.payload = payload


__all__ = [
    "SQLitePublicHolidayRepository",
    "SQLiteSchoolEventRepository",
    "SQLiteSchoolRepository",
    "SQLiteTermRuleRepository",
]
