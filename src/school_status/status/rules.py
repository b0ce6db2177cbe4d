"""Ordered rule checks that make up the status cascade.

Each rule inspects a school's rule set for one day and either returns a
verdict or ``None`` to let the next rule decide.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from school_status.domain import SchoolRuleSet, StatusSource, Verdict

from .calendar import weekend_day_name

SCHOOL_HOLIDAYS_REASON = "School Holidays"


class StatusRule(Protocol):
    def __call__(self, rule_set: SchoolRuleSet, day: date) -> Verdict | None: ...


def school_event_closure(rule_set: SchoolRuleSet, day: date) -> Verdict | None:
    event = rule_set.closure_on(day)
    if event is None:
        return None
    return Verdict(is_open=False, reason=event.name, source=StatusSource.SCHOOL_EVENT)


def public_holiday(rule_set: SchoolRuleSet, day: date) -> Verdict | None:
    holiday = rule_set.holiday_on(day)
    if holiday is None:
        return None
    return Verdict(is_open=False, reason=holiday.name, source=StatusSource.PUBLIC_HOLIDAY)


def weekend(rule_set: SchoolRuleSet, day: date) -> Verdict | None:
    name = weekend_day_name(day)
    if name is None:
        return None
    return Verdict(is_open=False, reason=name, source=StatusSource.WEEKEND)


def term_membership(rule_set: SchoolRuleSet, day: date) -> Verdict | None:
    term = rule_set.term_for(day)
    if term is None:
        return None
    return Verdict(
        is_open=True,
        reason=f"Term {term.number}",
        source=StatusSource.TERM,
        term_number=term.number,
    )


def school_holidays() -> Verdict:
    return Verdict(
        is_open=False,
        reason=SCHOOL_HOLIDAYS_REASON,
        source=StatusSource.SCHOOL_HOLIDAYS,
    )


DEFAULT_RULES: tuple[StatusRule, ...] = (
    school_event_closure,
    public_holiday,
    weekend,
    term_membership,
)


__all__ = [
    "DEFAULT_RULES",
    "SCHOOL_HOLIDAYS_REASON",
    "StatusRule",
    "public_holiday",
    "school_event_closure",
    "school_holidays",
    "term_membership",
    "weekend",
]
