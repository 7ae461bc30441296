"""Foreground reminder loop."""

from __future__ import annotations

import threading

import click

from hydration_service.cli.utils import fail, header, info
from hydration_service.core.dependencies import get_intake_service, get_reminder_service
from hydration_service.core.exceptions import AppException
from hydration_service.infra.logging import get_logger, set_log_context
from hydration_service.infra.notifications import (
    APSchedulerNotificationScheduler,
    ScheduledNotification,
)

logger = get_logger(__name__)


@click.command(name="run")
@click.option(
    "--poll-seconds",
    type=click.FloatRange(min=0.01),
    default=30.0,
    show_default=True,
    help="How often to check for day rollover and changed reminder settings",
)
@click.option(
    "--max-polls",
    type=click.IntRange(min=1),
    default=None,
    hidden=True,
    help="Stop after this many checks",
)
def run(poll_seconds: float, max_polls: int | None) -> None:
    """Deliver reminders on the console until interrupted (Ctrl+C).

    Resets the daily total at midnight and keeps one reminder pending
    outside the do-not-disturb window. Interval or window changes made
    with `hydration reminder` in another terminal are picked up on the
    next check.
    """
    intake_service = get_intake_service()
    # Delivery runs on the scheduler thread, rescheduling checks on this one
    reschedule_lock = threading.Lock()

    def deliver(notification: ScheduledNotification) -> None:
        set_log_context(notification_id=notification.id)
        click.echo()
        click.secho(f"💧 {notification.title}", fg="cyan", bold=True)
        click.echo(f"   {notification.body}")
        try:
            total = intake_service.current()
            click.echo(f"   Total today: {total.amount}")
            with reschedule_lock:
                state = reminder_service.handle_fired()
        except AppException:
            logger.exception("Could not schedule the following reminder")
            return
        info(f"Next reminder at {state.next_fire_time:%Y-%m-%d %H:%M}")

    scheduler = APSchedulerNotificationScheduler(deliver=deliver)
    reminder_service = get_reminder_service(notifier=scheduler)

    try:
        total = intake_service.current()
        scheduler.start()
        state = reminder_service.setup_reminders()
    except AppException as e:
        scheduler.shutdown()
        fail(e)

    header("Hydration reminders running (Ctrl+C to stop)")
    info(f"Total today: {total.amount}")
    info(f"Next reminder at {state.next_fire_time:%Y-%m-%d %H:%M}")

    stop = threading.Event()
    polls = 0
    day = total.last_update_date
    try:
        while not stop.wait(poll_seconds):
            total = intake_service.current()
            if total.last_update_date != day:
                day = total.last_update_date
                info(f"New day {day.isoformat()}, total reset to 0")
            with reschedule_lock:
                resynced = reminder_service.sync_with_stored_settings()
            if resynced is not None:
                info(f"Reminder settings changed; next reminder at {resynced.next_fire_time:%Y-%m-%d %H:%M}")
            polls += 1
            if max_polls is not None and polls >= max_polls:
                stop.set()
    except KeyboardInterrupt:
        click.echo()
        info("Stopping")
    except AppException as e:
        fail(e)
    finally:
        scheduler.shutdown()
