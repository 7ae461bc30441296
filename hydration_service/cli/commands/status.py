"""Status command: today's total and the reminder configuration."""

from __future__ import annotations

import click

from hydration_service.cli.utils import fail, header
from hydration_service.core.dependencies import get_intake_service, get_reminder_service
from hydration_service.core.exceptions import AppException
from hydration_service.core.settings import get_reminder_settings
from hydration_service.features.reminders import HydrationStatus


def build_status() -> HydrationStatus:
    """Collect the current status, applying day rollover first."""
    total = get_intake_service().current()
    reminders = get_reminder_service()
    state = reminders.get_state()
    window = reminders.get_window()
    return HydrationStatus(
        total=total.amount,
        unit=get_reminder_settings().intake_unit,
        day=total.last_update_date,
        interval_minutes=state.interval_minutes,
        do_not_disturb_start=window.start,
        do_not_disturb_end=window.end,
        next_reminder=state.next_fire_time,
    )


@click.command(name="status")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def status(output_format: str) -> None:
    """Show today's intake, the reminder interval and the next reminder."""
    try:
        current = build_status()
    except AppException as e:
        fail(e)

    if output_format == "json":
        click.echo(current.model_dump_json(indent=2))
        return

    header(f"Hydration status for {current.day.isoformat()}")
    click.echo(f"  {'Total today:':<18} {current.total} {current.unit}")
    click.echo(f"  {'Interval:':<18} every {current.interval_minutes} minutes")
    click.echo(
        f"  {'Do not disturb:':<18} {current.do_not_disturb_start} - {current.do_not_disturb_end}",
    )
    next_display = (
        current.next_reminder.strftime("%Y-%m-%d %H:%M")
        if current.next_reminder
        else click.style("not scheduled", fg="yellow")
    )
    click.echo(f"  {'Next reminder:':<18} {next_display}")
