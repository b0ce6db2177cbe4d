"""Enumerations used across the school status domain layer."""

from __future__ import annotations

from enum import StrEnum


class EventType(StrEnum):
    """Kinds of per-school calendar events."""

    STUDENT_FREE_DAY = "student_free_day"
    SHOW_HOLIDAY = "show_holiday"
    EMERGENCY_CLOSURE = "emergency_closure"
    OTHER = "other"


class StatusSource(StrEnum):
    """Which rule produced a verdict."""

    SCHOOL_EVENT = "school_event"
    PUBLIC_HOLIDAY = "public_holiday"
    WEEKEND = "weekend"
    TERM = "term"
    SCHOOL_HOLIDAYS = "school_holidays"


class TransitionLabel(StrEnum):
    """Countdown captions shown ahead of the next status change."""

    SCHOOL_STARTS = "School starts in..."
    HOLIDAYS_START = "Holidays start in..."
