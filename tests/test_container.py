from __future__ import annotations

import asyncio
from pathlib import Path

from school_status.config import AppSettings
from school_status.container import build_container


def test_build_container_wires_settings(tmp_path: Path) -> None:
    db_url = f"sqlite+aiosqlite:///{tmp_path/'nested'/'container.db'}"
    settings = AppSettings(
        environment="test",
        database_url=db_url,
        max_supported_year=2027,
        lookahead_days=30,
    )

    container = build_container(settings)

    assert (tmp_path / "nested").exists()
    assert container.settings is settings
    assert container.resolver.max_supported_year == 2027
    assert container.scout.horizon_days == 30

    async def _round_trip() -> int:
        return len(await container.status_service.list_schools())

    assert asyncio.run(_round_trip()) == 0
