"""Status resolution exports."""

from .calendar import days_after, parse_iso_date, weekend_day_name
from .exceptions import ConfigurationError, InvalidDateError, OutOfRangeError, StatusError
from .resolver import DEFAULT_MAX_SUPPORTED_YEAR, StatusResolver
from .rules import DEFAULT_RULES, SCHOOL_HOLIDAYS_REASON, StatusRule
from .scout import DEFAULT_HORIZON_DAYS, ChangeScout

__all__ = [
    "DEFAULT_HORIZON_DAYS",
    "DEFAULT_MAX_SUPPORTED_YEAR",
    "DEFAULT_RULES",
    "SCHOOL_HOLIDAYS_REASON",
    "ChangeScout",
    "ConfigurationError",
    "InvalidDateError",
    "OutOfRangeError",
    "StatusError",
    "StatusResolver",
    "StatusRule",
    "days_after",
    "parse_iso_date",
    "weekend_day_name",
]
