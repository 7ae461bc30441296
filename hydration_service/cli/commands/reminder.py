"""Reminder commands: interval, do-not-disturb window and previews."""

from __future__ import annotations

from datetime import datetime

import click

from hydration_service.cli.utils import fail, info, success
from hydration_service.core.dependencies import get_reminder_service
from hydration_service.core.exceptions import AppException, ValidationException
from hydration_service.features.reminders import DoNotDisturbWindow


def _format_time(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M")


@click.group(name="reminder")
def reminder() -> None:
    """Reminder scheduling commands."""


@reminder.command(name="options")
def list_options() -> None:
    """List the interval choices (minutes)."""
    service = get_reminder_service()
    current = service.get_state().interval_minutes
    for option in service.interval_options:
        marker = click.style(" (current)", fg="green") if option == current else ""
        click.echo(f"  {option:>3} minutes{marker}")


@reminder.command(name="interval")
@click.argument("minutes", type=int)
def set_interval(minutes: int) -> None:
    """Remind every MINUTES minutes and reschedule the next reminder.

    Run `hydration reminder options` for the usual choices.

    Examples:

    \b
      hydration reminder interval 45
    """
    try:
        state = get_reminder_service().set_interval(minutes)
    except AppException as e:
        fail(e)

    success(f"Reminding every {minutes} minutes")
    info(f"Next reminder at {_format_time(state.next_fire_time)}")


@reminder.command(name="dnd")
@click.argument("start")
@click.argument("end")
def set_do_not_disturb(start: str, end: str) -> None:
    """Suppress reminders from START to END (HH:MM, may span midnight).

    Examples:

    \b
      hydration reminder dnd 23:00 07:00
      hydration reminder dnd 12:30 13:15
    """
    try:
        window = DoNotDisturbWindow.from_strings(start, end)
        state = get_reminder_service().set_do_not_disturb(window)
    except AppException as e:
        fail(e)

    success(f"Do not disturb from {window.start} to {window.end}")
    info(f"Next reminder at {_format_time(state.next_fire_time)}")


@reminder.command(name="next")
@click.option(
    "--from",
    "from_time",
    default=None,
    help="Reference time in ISO 8601 (default: now)",
)
def preview_next(from_time: str | None) -> None:
    """Show when the next reminder would fire, without scheduling it."""
    try:
        reference = _parse_reference(from_time)
        fire_at = get_reminder_service().preview(reference)
    except AppException as e:
        fail(e)

    click.echo(_format_time(fire_at))


def _parse_reference(raw: str | None) -> datetime | None:
    if raw is None:
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError as e:
        raise ValidationException(
            detail=f"Invalid --from value {raw!r}, expected ISO 8601 (e.g. 2024-01-01T22:30)",
            extra={"field": "from", "value": raw},
        ) from e
