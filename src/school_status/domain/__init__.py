"""Domain models for school status resolution."""

from .base import DomainModel
from .enums import EventType, StatusSource, TransitionLabel
from .school import PublicHoliday, School, SchoolEvent, SchoolRuleSet, Term, TermRuleSet
from .status import ChangeProjection, SchoolStatus, Verdict
from .types import EventId, RegionCode, SchoolId, TermRuleId

__all__ = [
    "ChangeProjection",
    "DomainModel",
    "EventId",
    "EventType",
    "PublicHoliday",
    "RegionCode",
    "School",
    "SchoolEvent",
    "SchoolId",
    "SchoolRuleSet",
    "SchoolStatus",
    "StatusSource",
    "Term",
    "TermRuleId",
    "TermRuleSet",
    "TransitionLabel",
    "Verdict",
]
