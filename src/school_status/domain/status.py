"""Status verdicts and change projections."""

from __future__ import annotations

import datetime as dt
from typing import Annotated

from pydantic import Field

from .base import DomainModel
from .enums import StatusSource, TransitionLabel
from .school import School


class Verdict(DomainModel):
    """Open/closed decision for a single day and the rule that produced it."""

    is_open: bool
    reason: Annotated[str, Field(min_length=1)]
    source: StatusSource
    term_number: int | None = None


class ChangeProjection(DomainModel):
    """Next day on which a school's status flips, if one was found."""

    date: dt.date | None = None
    label: TransitionLabel | None = None
    reason: str | None = None
    term_number: int | None = None

    @classmethod
    def empty(cls) -> ChangeProjection:
        return cls()

    @property
    def found(self) -> bool:
        return self.date is not None

    def days_from(self, start: dt.date) -> int | None:
        """Countdown in whole days from ``start`` to the projected change."""

        if self.date is None:
            return None
        return (self.date - start).days


class SchoolStatus(DomainModel):
    """A verdict for one school and day together with its next change."""

    school: School
    date: dt.date
    verdict: Verdict
    next_change: ChangeProjection = Field(default_factory=ChangeProjection.empty)


__all__ = ["ChangeProjection", "SchoolStatus", "Verdict"]
