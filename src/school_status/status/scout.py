"""Forward scan for the next open/closed transition."""

from __future__ import annotations

from datetime import date

from school_status.domain import ChangeProjection, SchoolRuleSet, TransitionLabel

from .calendar import days_after
from .exceptions import OutOfRangeError, StatusError
from .resolver import StatusResolver

DEFAULT_HORIZON_DAYS = 60


class ChangeScout:
    """Finds the first day after a start date whose status differs."""

    def __init__(
        self,
        resolver: StatusResolver,
        *,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
    ) -> None:
        if horizon_days < 0:
            msg = "Search horizon must not be negative"
            raise StatusError(msg)
        self._resolver = resolver
        self._horizon_days = horizon_days

    @property
    def horizon_days(self) -> int:
        return self._horizon_days

    def find_next_change(
        self,
        rule_set: SchoolRuleSet,
        start: date,
        current_is_open: bool,
        *,
        horizon_days: int | None = None,
    ) -> ChangeProjection:
        """Scan up to ``horizon_days`` days after ``start`` for a status flip.

        Returns an empty projection when the status holds for the whole
        horizon or when the scan reaches a date past the supported year.
        """

        horizon = self._horizon_days if horizon_days is None else horizon_days
        if horizon < 0:
            msg = "Search horizon must not be negative"
            raise StatusError(msg)

        for day in days_after(start, horizon):
            try:
                verdict = self._resolver.resolve(rule_set, day)
            except OutOfRangeError:
                return ChangeProjection.empty()
            if verdict.is_open == current_is_open:
                continue
            label = (
                TransitionLabel.SCHOOL_STARTS
                if verdict.is_open
                else TransitionLabel.HOLIDAYS_START
            )
            return ChangeProjection(
                date=day,
                label=label,
                reason=verdict.reason,
                term_number=verdict.term_number,
            )
        return ChangeProjection.empty()


__all__ = ["DEFAULT_HORIZON_DAYS", "ChangeScout"]
