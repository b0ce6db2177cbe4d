"""Open/closed status resolution for a single school day."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from school_status.domain import SchoolRuleSet, Verdict

from .exceptions import ConfigurationError, OutOfRangeError
from .rules import DEFAULT_RULES, StatusRule, school_holidays

DEFAULT_MAX_SUPPORTED_YEAR = 2026


class StatusResolver:
    """Applies the status rules in priority order; the first match wins.

    Days that no rule claims fall back to school holidays. Resolution is a
    pure function of the rule set and the day.
    """

    def __init__(
        self,
        *,
        max_supported_year: int = DEFAULT_MAX_SUPPORTED_YEAR,
        rules: Sequence[StatusRule] = DEFAULT_RULES,
    ) -> None:
        self._max_supported_year = max_supported_year
        self._rules = tuple(rules)

    @property
    def max_supported_year(self) -> int:
        return self._max_supported_year

    def resolve(self, rule_set: SchoolRuleSet, day: date) -> Verdict:
        school = rule_set.school
        if school.term_rule_id is None:
            msg = f"No term rules configured for {school.name}"
            raise ConfigurationError(msg)
        if rule_set.term_rules is None:
            msg = f"Term dates {school.term_rule_id} not configured for {school.name}"
            raise ConfigurationError(msg)
        if day.year > self._max_supported_year:
            raise OutOfRangeError(day, self._max_supported_year)

        for rule in self._rules:
            verdict = rule(rule_set, day)
            if verdict is not None:
                return verdict
        return school_holidays()

    def is_open(self, rule_set: SchoolRuleSet, day: date) -> bool:
        return self.resolve(rule_set, day).is_open


__all__ = ["DEFAULT_MAX_SUPPORTED_YEAR", "StatusResolver"]
