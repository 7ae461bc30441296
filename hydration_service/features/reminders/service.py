"""Service layer for reminder scheduling."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from hydration_service.core.exceptions import ConfigurationError
from hydration_service.core.services.base import BaseService
from hydration_service.features.reminders.scheduling import (
    ReminderState,
    next_fire_time,
    validate_interval,
    validate_window,
)

if TYPE_CHECKING:
    from hydration_service.core.settings import ReminderSettings
    from hydration_service.features.reminders.repository import ReminderRepository
    from hydration_service.features.reminders.window import DoNotDisturbWindow
    from hydration_service.infra.notifications import NotificationScheduler


class ReminderService(BaseService):
    """Keeps exactly one reminder pending, outside the do-not-disturb window.

    Every change to the interval or the window reschedules immediately, and
    the notification callback schedules the following reminder once the
    current one has fired.
    """

    def __init__(
        self,
        repository: ReminderRepository,
        notifier: NotificationScheduler,
        settings: ReminderSettings,
    ) -> None:
        super().__init__()
        self._repository = repository
        self._notifier = notifier
        self._settings = settings
        # (interval, window) of the reminder this instance last scheduled
        self._scheduled_with: tuple[int, DoNotDisturbWindow] | None = None

    @property
    def interval_options(self) -> list[int]:
        return list(self._settings.interval_options)

    def get_state(self) -> ReminderState:
        """Return the stored interval and next fire time."""
        return self._repository.load_state()

    def get_window(self) -> DoNotDisturbWindow:
        """Return the stored do-not-disturb window (or the configured default)."""
        return self._repository.load_window()

    def preview(self, from_time: datetime | None = None) -> datetime:
        """Compute the next reminder time without scheduling anything."""
        from_time = from_time or datetime.now()
        state = self._repository.load_state()
        return next_fire_time(from_time, state.interval_minutes, self._repository.load_window())

    def set_interval(self, minutes: int, now: datetime | None = None) -> ReminderState:
        """Store a new reminder interval and reschedule.

        Nothing is stored unless the next reminder can be scheduled with the
        new interval.

        Raises:
            ConfigurationError: If ``minutes`` is not positive, or not one of
                the configured options while strict options are enabled.
            SchedulingError: If no reminder time outside the window is reachable.
        """
        validate_interval(minutes)
        if self._settings.strict_interval_options and minutes not in self._settings.interval_options:
            raise ConfigurationError(
                detail=(
                    f"Reminder interval {minutes} is not one of "
                    f"{', '.join(str(o) for o in self._settings.interval_options)}"
                ),
                extra={"interval_minutes": minutes, "options": self.interval_options},
            )

        previous = self._repository.load_state().interval_minutes
        state = self._reschedule(now, minutes, self._repository.load_window())
        self.logger.info(
            "Reminder interval changed",
            extra={
                "previous_minutes": previous,
                "interval_minutes": minutes,
                "operation": "service.set_interval",
            },
        )
        return state

    def set_do_not_disturb(
        self,
        window: DoNotDisturbWindow,
        now: datetime | None = None,
    ) -> ReminderState:
        """Store a new do-not-disturb window and reschedule.

        Raises:
            ConfigurationError: If the window covers the whole day.
            SchedulingError: If no reminder time outside the window is reachable.
        """
        validate_window(window)
        interval = self._repository.load_state().interval_minutes
        state = self._reschedule(now, interval, window, save_window=True)
        self.logger.info(
            "Do-not-disturb window changed",
            extra={
                "start": window.start,
                "end": window.end,
                "operation": "service.set_do_not_disturb",
            },
        )
        return state

    def setup_reminders(self, now: datetime | None = None) -> ReminderState:
        """Replace any pending notification with one at the next allowed time."""
        interval = self._repository.load_state().interval_minutes
        return self._reschedule(now, interval, self._repository.load_window())

    def handle_fired(self, now: datetime | None = None) -> ReminderState:
        """Schedule the reminder following one that has just been delivered."""
        self._lazy.debug(lambda: f"service.handle_fired(now={now})")
        return self.setup_reminders(now)

    def sync_with_stored_settings(self, now: datetime | None = None) -> ReminderState | None:
        """Reschedule when the stored interval or window changed elsewhere.

        Another process (a one-shot ``hydration reminder`` command) may have
        changed the settings after this instance scheduled its reminder.
        Returns the new state, or None when nothing changed or nothing has
        been scheduled by this instance yet.
        """
        if self._scheduled_with is None:
            return None

        stored = (self._repository.load_state().interval_minutes, self._repository.load_window())
        if stored == self._scheduled_with:
            return None

        self.logger.info(
            "Stored reminder settings changed, rescheduling",
            extra={
                "interval_minutes": stored[0],
                "window": str(stored[1]),
                "operation": "service.sync_with_stored_settings",
            },
        )
        return self._reschedule(now, *stored)

    def _reschedule(
        self,
        now: datetime | None,
        interval_minutes: int,
        window: DoNotDisturbWindow,
        *,
        save_window: bool = False,
    ) -> ReminderState:
        # Compute first: an error leaves the pending reminder and the stored
        # settings untouched
        now = now or datetime.now()
        fire_at = next_fire_time(now, interval_minutes, window)

        self._notifier.clear_all()
        notification_id = self._notifier.schedule(
            fire_at,
            self._settings.notification_title,
            self._settings.notification_body,
        )

        if save_window:
            self._repository.save_window(window)
        new_state = ReminderState(interval_minutes=interval_minutes, next_fire_time=fire_at)
        self._repository.save_state(new_state)
        self._scheduled_with = (interval_minutes, window)

        self.logger.info(
            "Reminder scheduled",
            extra={
                "notification_id": notification_id,
                "fire_at": fire_at.isoformat(),
                "interval_minutes": interval_minutes,
                "operation": "service.setup_reminders",
            },
        )
        self._lazy.debug(lambda: f"service._reschedule(now={now.isoformat()}, window={window}) -> {fire_at}")
        return new_state
