"""Service layer exports."""

from .seeding import seed_reference_data
from .status_service import SchoolStatusService, UnitOfWorkFactory

__all__ = ["SchoolStatusService", "UnitOfWorkFactory", "seed_reference_data"]
