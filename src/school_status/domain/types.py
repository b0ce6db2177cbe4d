"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import NewType
from uuid import UUID

SchoolId = NewType("SchoolId", str)
TermRuleId = NewType("TermRuleId", str)
EventId = NewType("EventId", UUID)
RegionCode = str

__all__ = ["EventId", "RegionCode", "SchoolId", "TermRuleId"]
