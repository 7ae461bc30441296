"""Default wiring of stores, schedulers and services.

Services take their collaborators explicitly; this module only builds the
defaults the CLI uses. Tests construct services directly or point
APP_STATE_FILE at a temporary file and call ``clear_dependency_caches()``.

Usage:
    from hydration_service.core.dependencies import get_intake_service

    total = get_intake_service().current()
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from hydration_service.core.settings import get_app_settings, get_reminder_settings
from hydration_service.features.intake import IntakeRepository, IntakeService
from hydration_service.features.reminders import (
    DoNotDisturbWindow,
    ReminderRepository,
    ReminderService,
)
from hydration_service.infra.notifications import InMemoryNotificationScheduler
from hydration_service.infra.storage import JsonFileSettingsStore

if TYPE_CHECKING:
    from hydration_service.infra.notifications import NotificationScheduler
    from hydration_service.infra.storage import SettingsStore


@lru_cache(maxsize=1)
def get_settings_store() -> JsonFileSettingsStore:
    """Get the process-wide JSON settings store at ``AppSettings.state_file``."""
    return JsonFileSettingsStore(get_app_settings().state_file)


def get_intake_service(store: SettingsStore | None = None) -> IntakeService:
    """Build an IntakeService over ``store`` (default: the JSON store)."""
    return IntakeService(IntakeRepository(store or get_settings_store()))


def get_reminder_repository(store: SettingsStore | None = None) -> ReminderRepository:
    """Build a ReminderRepository whose defaults come from ReminderSettings."""
    settings = get_reminder_settings()
    return ReminderRepository(
        store or get_settings_store(),
        default_interval=settings.default_interval_minutes,
        default_window=DoNotDisturbWindow.from_strings(
            settings.default_dnd_start,
            settings.default_dnd_end,
        ),
    )


def get_reminder_service(
    store: SettingsStore | None = None,
    notifier: NotificationScheduler | None = None,
) -> ReminderService:
    """Build a ReminderService.

    Without ``notifier``, notifications are only recorded in memory; the
    long-running ``hydration run`` command passes an APScheduler backend.
    """
    return ReminderService(
        repository=get_reminder_repository(store),
        notifier=notifier or InMemoryNotificationScheduler(),
        settings=get_reminder_settings(),
    )


def clear_dependency_caches() -> None:
    """Drop cached singletons so the next call re-reads settings."""
    get_settings_store.cache_clear()
