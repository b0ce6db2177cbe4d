"""Status resolution errors."""

from __future__ import annotations

from datetime import date


class StatusError(RuntimeError):
    """Raised when a status cannot be resolved."""


class ConfigurationError(StatusError):
    """Raised when a school has no term rules to resolve against."""


class OutOfRangeError(StatusError):
    """Raised for dates beyond the supported calendar horizon."""

    def __init__(self, day: date, max_year: int) -> None:
        super().__init__(f"{day.isoformat()} is beyond the supported year {max_year}")
        self.day = day
        self.max_year = max_year


class InvalidDateError(StatusError, ValueError):
    """Raised when a date string is not a valid ISO ``YYYY-MM-DD`` date."""
