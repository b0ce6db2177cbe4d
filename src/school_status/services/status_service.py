"""Service facade that loads reference data and resolves school status."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date

from school_status.domain import (
    ChangeProjection,
    School,
    SchoolId,
    SchoolRuleSet,
    SchoolStatus,
    Verdict,
)
from school_status.persistence import NotFoundError, UnitOfWork
from school_status.status import ChangeScout, ConfigurationError, StatusResolver

UnitOfWorkFactory = Callable[[], UnitOfWork]


class SchoolStatusService:
    """Answers status questions for stored schools.

    Each call loads the school's rule set through a fresh unit of work and
    hands it to the resolver and scout, which do no I/O of their own.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        resolver: StatusResolver,
        scout: ChangeScout,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._resolver = resolver
        self._scout = scout
        self._logger = logger or logging.getLogger(__name__)

    async def list_schools(self) -> Sequence[School]:
        async with self._uow_factory() as uow:
            return await uow.school_repository.list_active()

    async def load_rule_set(self, school_id: SchoolId) -> SchoolRuleSet:
        async with self._uow_factory() as uow:
            school = await uow.school_repository.get(school_id)
            if school is None:
                msg = f"School {school_id} not found"
                raise NotFoundError(msg)
            term_rules = None
            if school.term_rule_id is not None:
                term_rules = await uow.term_rule_repository.get(school.term_rule_id)
            holidays = await uow.holiday_repository.list_for_region(school.region)
            events = await uow.event_repository.list_for_school(school.id)

        self._logger.debug(
            "Loaded rule set for %s: %d holidays, %d events, term rules %s",
            school.id,
            len(holidays),
            len(events),
            term_rules.id if term_rules else None,
        )
        return SchoolRuleSet(
            school=school,
            term_rules=term_rules,
            holidays=tuple(holidays),
            events=tuple(events),
        )

    async def check(self, school_id: SchoolId, on: date) -> Verdict:
        rule_set = await self.load_rule_set(school_id)
        return self._resolve(rule_set, on)

    async def next_change(
        self,
        school_id: SchoolId,
        start: date,
        *,
        current_is_open: bool | None = None,
        horizon_days: int | None = None,
    ) -> ChangeProjection:
        """Project the next status change after ``start``.

        When ``current_is_open`` is omitted the status of ``start`` itself is
        resolved first.
        """

        rule_set = await self.load_rule_set(school_id)
        if current_is_open is None:
            current_is_open = self._resolve(rule_set, start).is_open
        return self._project(rule_set, start, current_is_open, horizon_days)

    async def status(
        self,
        school_id: SchoolId,
        on: date,
        *,
        horizon_days: int | None = None,
    ) -> SchoolStatus:
        rule_set = await self.load_rule_set(school_id)
        verdict = self._resolve(rule_set, on)
        projection = self._project(rule_set, on, verdict.is_open, horizon_days)
        return SchoolStatus(
            school=rule_set.school,
            date=on,
            verdict=verdict,
            next_change=projection,
        )

    def _resolve(self, rule_set: SchoolRuleSet, on: date) -> Verdict:
        try:
            return self._resolver.resolve(rule_set, on)
        except ConfigurationError as exc:
            self._logger.warning("Cannot resolve %s: %s", rule_set.school.id, exc)
            raise

    def _project(
        self,
        rule_set: SchoolRuleSet,
        start: date,
        current_is_open: bool,
        horizon_days: int | None,
    ) -> ChangeProjection:
        projection = self._scout.find_next_change(
            rule_set,
            start,
            current_is_open,
            horizon_days=horizon_days,
        )
        if projection.found:
            self._logger.debug(
                "Next change for %s after %s: %s (%s)",
                rule_set.school.id,
                start,
                projection.date,
                projection.reason,
            )
        else:
            self._logger.debug("No status change for %s after %s", rule_set.school.id, start)
        return projection


__all__ = ["SchoolStatusService", "UnitOfWorkFactory"]
