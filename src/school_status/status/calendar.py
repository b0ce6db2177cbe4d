"""Calendar-date helpers shared by the resolver and the scout.

Dates are plain ``datetime.date`` values: no time of day and no timezone, so
arithmetic and comparisons never shift a day across a UTC boundary.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import date, timedelta

from .exceptions import InvalidDateError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_WEEKEND_NAMES = {5: "Saturday", 6: "Sunday"}


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a calendar date."""

    text = value.strip()
    if not _ISO_DATE.match(text):
        msg = f"Invalid date format {value!r}; use YYYY-MM-DD"
        raise InvalidDateError(msg)
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        msg = f"{value!r} is not a calendar date"
        raise InvalidDateError(msg) from exc


def weekend_day_name(day: date) -> str | None:
    """Return ``"Saturday"`` or ``"Sunday"`` for weekend days, else ``None``."""

    return _WEEKEND_NAMES.get(day.weekday())


def days_after(start: date, count: int) -> Iterator[date]:
    """Yield the ``count`` calendar days following ``start``."""

    for offset in range(1, count + 1):
        yield start + timedelta(days=offset)


__all__ = ["days_after", "parse_iso_date", "weekend_day_name"]
