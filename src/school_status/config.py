"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from exc


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if not raw:
        return None
    return Path(raw)


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///school_status.db"
    timezone: str = "Australia/Brisbane"
    max_supported_year: int = 2026
    lookahead_days: int = 60
    reference_data_path: Path | None = None

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("SCHOOL_STATUS_ENV", cls.environment),
            database_url=os.getenv("SCHOOL_STATUS_DATABASE_URL", cls.database_url),
            timezone=os.getenv("SCHOOL_STATUS_TIMEZONE", cls.timezone),
            max_supported_year=_env_int("SCHOOL_STATUS_MAX_YEAR", cls.max_supported_year),
            lookahead_days=_env_int("SCHOOL_STATUS_LOOKAHEAD_DAYS", cls.lookahead_days),
            reference_data_path=_env_path("SCHOOL_STATUS_REFERENCE_DATA"),
        )


__all__ = ["AppSettings"]
