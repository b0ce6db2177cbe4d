"""Typer CLI wiring school status services."""

from __future__ import annotations

import asyncio
from datetime import date
from pathlib import Path

import typer

from school_status.domain import ChangeProjection, SchoolId, SchoolStatus
from school_status.persistence import NotFoundError
from school_status.reference import load_reference_dataset
from school_status.services import seed_reference_data
from school_status.status import (
    ConfigurationError,
    InvalidDateError,
    OutOfRangeError,
    parse_iso_date,
)
from school_status.utils import local_today

from .deps import get_container

app = typer.Typer(help="Is the school open today? Command-line interface")


def _parse_date(value: str) -> date:
    try:
        return parse_iso_date(value)
    except InvalidDateError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _describe_day(day: date) -> str:
    return f"{day.strftime('%A')} {day.day} {day.strftime('%B %Y')}"


def _echo_projection(projection: ChangeProjection, start: date) -> None:
    if not projection.found or projection.date is None:
        typer.echo("No status change in the lookahead window")
        return
    days = projection.days_from(start)
    unit = "day" if days == 1 else "days"
    typer.echo(f"{projection.label} {days} {unit}: {_describe_day(projection.date)}")
    typer.echo(f"Reason: {projection.reason}")


def _echo_time_traveler(exc: OutOfRangeError) -> None:
    typer.echo(
        f"Time traveler! {exc.day.isoformat()} is beyond {exc.max_year}; "
        "school calendars have not been published that far ahead."
    )


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    container = get_container()
    settings = container.settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo("Timezone:\t" + settings.timezone)
    typer.echo(f"Max Year:\t{settings.max_supported_year}")
    typer.echo(f"Lookahead:\t{settings.lookahead_days} days")


@app.command("seed")
def seed(
    dataset: Path | None = typer.Option(
        None,
        exists=True,
        dir_okay=False,
        help="Reference dataset JSON (defaults to the bundled QLD 2026 data)",
    ),
) -> None:
    """Load reference data into the configured database."""

    container = get_container()
    reference = load_reference_dataset(dataset or container.settings.reference_data_path)
    asyncio.run(seed_reference_data(container.unit_of_work_factory, reference))
    typer.echo(
        f"Seeded {len(reference.schools)} schools, "
        f"{len(reference.holidays)} public holidays and {len(reference.events)} events"
    )


@app.command("list-schools")
def list_schools() -> None:
    """List active schools."""

    container = get_container()
    schools = asyncio.run(container.status_service.list_schools())
    if not schools:
        typer.echo("No schools found")
        return
    for school in schools:
        typer.echo(f"{school.id}\t{school.name}\t{school.suburb or '-'}")


@app.command("check")
def check(
    school_id: str,
    on: str | None = typer.Argument(None, help="Date as YYYY-MM-DD (defaults to today)"),
    horizon: int | None = typer.Option(None, min=0, help="Days to scan for the next change"),
) -> None:
    """Show whether a school is open on a date and when that changes."""

    container = get_container()
    target = _parse_date(on) if on else local_today(container.settings.timezone)

    try:
        result: SchoolStatus = asyncio.run(
            container.status_service.status(SchoolId(school_id), target, horizon_days=horizon)
        )
    except OutOfRangeError as exc:
        _echo_time_traveler(exc)
        return
    except (NotFoundError, ConfigurationError) as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    state = "OPEN" if result.verdict.is_open else "CLOSED"
    typer.echo(f"{result.school.name} on {_describe_day(target)}: {state}")
    typer.echo(f"Reason: {result.verdict.reason}")
    _echo_projection(result.next_change, target)


@app.command("next-change")
def next_change(
    school_id: str,
    start: str,
    current_is_open: bool | None = typer.Option(
        None,
        "--open/--closed",
        help="Status to compare against (defaults to the status on START)",
    ),
    horizon: int | None = typer.Option(None, min=0, help="Days to scan for the next change"),
) -> None:
    """Find the next date after START on which the school's status flips."""

    container = get_container()
    start_date = _parse_date(start)

    try:
        projection = asyncio.run(
            container.status_service.next_change(
                SchoolId(school_id),
                start_date,
                current_is_open=current_is_open,
                horizon_days=horizon,
            )
        )
    except OutOfRangeError as exc:
        _echo_time_traveler(exc)
        return
    except (NotFoundError, ConfigurationError) as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    _echo_projection(projection, start_date)
