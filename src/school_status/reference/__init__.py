"""Bundled reference data and its schema."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path

from school_status.domain import (
    DomainModel,
    PublicHoliday,
    School,
    SchoolEvent,
    SchoolId,
    TermRuleSet,
)

DEFAULT_DATASET = "qld_2026.json"


class ReferenceDataset(DomainModel):
    """Schools, term rules, holidays and events loaded as one document."""

    term_rules: tuple[TermRuleSet, ...] = ()
    holidays: tuple[PublicHoliday, ...] = ()
    schools: tuple[School, ...] = ()
    events: tuple[SchoolEvent, ...] = ()

    def school(self, school_id: SchoolId) -> School | None:
        for school in self.schools:
            if school.id == school_id:
                return school
        return None


def load_reference_dataset(path: Path | None = None) -> ReferenceDataset:
    """Read a dataset from ``path``, or the bundled QLD 2026 data by default."""

    if path is None:
        raw = resources.files(__package__).joinpath(DEFAULT_DATASET).read_text(encoding="utf-8")
    else:
        raw = path.expanduser().read_text(encoding="utf-8")
    return ReferenceDataset.model_validate(json.loads(raw))


__all__ = ["DEFAULT_DATASET", "ReferenceDataset", "load_reference_dataset"]
