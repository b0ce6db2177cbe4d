"""Time-related helpers."""

from __future__ import annotations

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """Return a timezone-aware UTC timestamp."""

    return datetime.now(UTC)


def local_today(timezone: str) -> date:
    """Return the current calendar date in the named IANA timezone."""

    return utc_now().astimezone(ZoneInfo(timezone)).date()
