"""Service container wiring application components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from school_status.config import AppSettings
from school_status.persistence import UnitOfWork
from school_status.persistence.sqlite import create_sqlite_unit_of_work_factory
from school_status.services import SchoolStatusService
from school_status.status import ChangeScout, StatusResolver

UnitOfWorkFactory = Callable[[], UnitOfWork]


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates constructed services with shared configuration."""

    settings: AppSettings
    unit_of_work_factory: UnitOfWorkFactory
    resolver: StatusResolver
    scout: ChangeScout
    status_service: SchoolStatusService


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite"):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    db_path = Path(path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()

    _ensure_sqlite_directory(resolved_settings.database_url)
    unit_of_work_factory = create_sqlite_unit_of_work_factory(resolved_settings.database_url)
    resolver = StatusResolver(max_supported_year=resolved_settings.max_supported_year)
    scout = ChangeScout(resolver, horizon_days=resolved_settings.lookahead_days)
    status_service = SchoolStatusService(
        unit_of_work_factory,
        resolver,
        scout,
        logger=logger,
    )
    logger.debug(
        "Built container for %s (max year %d, lookahead %d days)",
        resolved_settings.environment,
        resolved_settings.max_supported_year,
        resolved_settings.lookahead_days,
    )

    return ServiceContainer(
        settings=resolved_settings,
        unit_of_work_factory=unit_of_work_factory,
        resolver=resolver,
        scout=scout,
        status_service=status_service,
    )


__all__ = ["ServiceContainer", "build_container"]
