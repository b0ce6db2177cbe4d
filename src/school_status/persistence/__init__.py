"""Persistence layer exports."""

from .errors import NotFoundError, RepositoryError
from .interfaces import (
    PublicHolidayRepository,
    SchoolEventRepository,
    SchoolRepository,
    TermRuleRepository,
    UnitOfWork,
)
from .memory import InMemoryUnitOfWork

__all__ = [
    "InMemoryUnitOfWork",
    "NotFoundError",
    "PublicHolidayRepository",
    "RepositoryError",
    "SchoolEventRepository",
    "SchoolRepository",
    "TermRuleRepository",
    "UnitOfWork",
]
