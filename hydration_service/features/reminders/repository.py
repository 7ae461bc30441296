"""Repository for reminder settings kept in the key-value store.

Stored keys (shared with earlier versions of the app's state file):
    reminderInterval    minutes between reminders (int)
    nextReminderDate    ISO 8601 timestamp of the pending reminder
    doNotDisturbStart   "HH:MM"
    doNotDisturbEnd     "HH:MM"
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from hydration_service.core.exceptions import ConfigurationError, StorageException
from hydration_service.features.reminders.scheduling import ReminderState
from hydration_service.features.reminders.window import DoNotDisturbWindow

if TYPE_CHECKING:
    from hydration_service.infra.storage import SettingsStore

INTERVAL_KEY = "reminderInterval"
NEXT_REMINDER_KEY = "nextReminderDate"
DND_START_KEY = "doNotDisturbStart"
DND_END_KEY = "doNotDisturbEnd"


class ReminderRepository:
    """Reads and writes reminder state, falling back to defaults for missing keys."""

    def __init__(
        self,
        store: SettingsStore,
        *,
        default_interval: int,
        default_window: DoNotDisturbWindow,
    ) -> None:
        self._store = store
        self._default_interval = default_interval
        self._default_window = default_window

    def load_state(self) -> ReminderState:
        interval = self._store.get(INTERVAL_KEY)
        # Zero means "never set" in state files written by older versions
        if interval is None or interval == 0:
            interval = self._default_interval
        elif not isinstance(interval, int) or isinstance(interval, bool) or interval < 0:
            raise StorageException(
                detail=f"Stored {INTERVAL_KEY} is not a positive integer: {interval!r}",
                extra={"key": INTERVAL_KEY, "value": interval},
            )

        return ReminderState(
            interval_minutes=interval,
            next_fire_time=self._load_datetime(NEXT_REMINDER_KEY),
        )

    def save_state(self, state: ReminderState) -> None:
        self._store.set(INTERVAL_KEY, state.interval_minutes)
        if state.next_fire_time is None:
            self._store.delete(NEXT_REMINDER_KEY)
        else:
            self._store.set(NEXT_REMINDER_KEY, state.next_fire_time.isoformat())

    def load_window(self) -> DoNotDisturbWindow:
        start = self._store.get(DND_START_KEY)
        end = self._store.get(DND_END_KEY)
        if start is None or end is None:
            return self._default_window

        try:
            return DoNotDisturbWindow.from_strings(start, end)
        except ConfigurationError as e:
            raise StorageException(
                detail=f"Stored do-not-disturb window is invalid: {e.detail}",
                extra={"start": start, "end": end},
            ) from e

    def save_window(self, window: DoNotDisturbWindow) -> None:
        self._store.set(DND_START_KEY, window.start)
        self._store.set(DND_END_KEY, window.end)

    def _load_datetime(self, key: str) -> datetime | None:
        raw = self._store.get(key)
        if raw is None:
            return None
        try:
            return datetime.fromisoformat(raw)
        except (TypeError, ValueError) as e:
            raise StorageException(
                detail=f"Stored {key} is not an ISO 8601 timestamp: {raw!r}",
                extra={"key": key, "value": raw},
            ) from e
