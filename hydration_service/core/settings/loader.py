"""Cached settings loaders.

Each domain is read from YAML, the environment and .env once per process.
Tests call ``clear_all_caches()`` after changing the environment.
"""

from __future__ import annotations

from functools import lru_cache

from .app import AppSettings
from .logs import LoggingSettings
from .reminders import ReminderSettings


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    return AppSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    return LoggingSettings()


@lru_cache(maxsize=1)
def get_reminder_settings() -> ReminderSettings:
    return ReminderSettings()


def clear_all_caches() -> None:
    """Forget every loaded settings object so the next call re-reads its sources."""
    for loader in (get_app_settings, get_logging_settings, get_reminder_settings):
        loader.cache_clear()
