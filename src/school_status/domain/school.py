"""School reference data models."""

from __future__ import annotations

import datetime as dt
from typing import Annotated
from uuid import uuid4

from pydantic import Field, PrivateAttr, field_validator, model_validator

from .base import DomainModel
from .enums import EventType
from .types import EventId, RegionCode, SchoolId, TermRuleId


def _new_event_id() -> EventId:
    return EventId(uuid4())


class School(DomainModel):
    """A school and the region whose holiday and term rules apply to it."""

    id: SchoolId
    name: Annotated[str, Field(min_length=1)]
    region: Annotated[RegionCode, Field(min_length=1)]
    term_rule_id: TermRuleId | None = None
    school_type: str | None = None
    suburb: str | None = None
    postcode: str | None = None
    is_active: bool = True

    @field_validator("region")
    @classmethod
    def normalize_region(cls, value: str) -> str:
        return value.strip().upper()


class SchoolEvent(DomainModel):
    """Per-school override for a single date."""

    id: EventId = Field(default_factory=_new_event_id)
    school_id: SchoolId
    date: dt.date
    name: Annotated[str, Field(min_length=1)]
    event_type: EventType = EventType.OTHER
    description: str | None = None
    is_closure: bool = True


class PublicHoliday(DomainModel):
    """Region-wide holiday on a single date."""

    region: RegionCode
    date: dt.date
    name: Annotated[str, Field(min_length=1)]

    @field_validator("region")
    @classmethod
    def normalize_region(cls, value: str) -> str:
        return value.strip().upper()


class Term(DomainModel):
    """Contiguous, inclusive date range during which schools are in session."""

    number: Annotated[int, Field(ge=1)]
    start_date: dt.date
    end_date: dt.date

    @model_validator(mode="after")
    def check_range(self) -> Term:
        if self.start_date > self.end_date:
            msg = f"Term {self.number} starts after it ends"
            raise ValueError(msg)
        return self

    def contains(self, day: dt.date) -> bool:
        return self.start_date <= day <= self.end_date


class TermRuleSet(DomainModel):
    """Term dates for one region and year."""

    id: TermRuleId
    name: str = ""
    region: RegionCode
    year: Annotated[int, Field(ge=2000)]
    terms: tuple[Term, ...]

    @field_validator("region")
    @classmethod
    def normalize_region(cls, value: str) -> str:
        return value.strip().upper()

    def term_for(self, day: dt.date) -> Term | None:
        for term in self.terms:
            if term.contains(day):
                return term
        return None


class SchoolRuleSet(DomainModel):
    """Everything needed to resolve a school's status, loaded up front.

    Holidays outside the school's region and events for other schools are
    ignored. Date lookups go through indexes built once at construction.
    """

    school: School
    term_rules: TermRuleSet | None = None
    holidays: tuple[PublicHoliday, ...] = ()
    events: tuple[SchoolEvent, ...] = ()

    _closures: dict[dt.date, SchoolEvent] = PrivateAttr(default_factory=dict)
    _holidays_by_date: dict[dt.date, PublicHoliday] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def check_term_rules(self) -> SchoolRuleSet:
        rules = self.term_rules
        if rules is not None and rules.id != self.school.term_rule_id:
            msg = (
                f"Term rules {rules.id} do not belong to school {self.school.id}"
            )
            raise ValueError(msg)
        return self

    def model_post_init(self, __context: object) -> None:
        closures: dict[dt.date, SchoolEvent] = {}
        for event in self.events:
            if event.school_id != self.school.id or not event.is_closure:
                continue
            current = closures.get(event.date)
            # Ties on the same date resolve to the smallest name.
            if current is None or event.name < current.name:
                closures[event.date] = event
        self._closures = closures

        holidays: dict[dt.date, PublicHoliday] = {}
        for holiday in self.holidays:
            if holiday.region == self.school.region:
                holidays.setdefault(holiday.date, holiday)
        self._holidays_by_date = holidays

    def closure_on(self, day: dt.date) -> SchoolEvent | None:
        return self._closures.get(day)

    def holiday_on(self, day: dt.date) -> PublicHoliday | None:
        return self._holidays_by_date.get(day)

    def term_for(self, day: dt.date) -> Term | None:
        if self.term_rules is None:
            return None
        return self.term_rules.term_for(day)


__all__ = [
    "PublicHoliday",
    "School",
    "SchoolEvent",
    "SchoolRuleSet",
    "Term",
    "TermRuleSet",
]
