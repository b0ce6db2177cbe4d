"""Load reference data into a unit of work."""

from __future__ import annotations

import logging
from collections.abc import Callable

from school_status.persistence import UnitOfWork
from school_status.reference import ReferenceDataset

logger = logging.getLogger(__name__)


async def seed_reference_data(
    uow_factory: Callable[[], UnitOfWork],
    dataset: ReferenceDataset,
) -> None:
    """Upsert every record of ``dataset``; running it twice changes nothing."""

    async with uow_factory() as uow:
        for rule_set in dataset.term_rules:
            await uow.term_rule_repository.upsert(rule_set)
        for holiday in dataset.holidays:
            await uow.holiday_repository.upsert(holiday)
        for school in dataset.schools:
            await uow.school_repository.upsert(school)
        for event in dataset.events:
            await uow.event_repository.upsert(event)
        await uow.commit()

    logger.info(
        "Seeded %d schools, %d term rule sets, %d holidays, %d events",
        len(dataset.schools),
        len(dataset.term_rules),
        len(dataset.holidays),
        len(dataset.events),
    )


__all__ = ["seed_reference_data"]
