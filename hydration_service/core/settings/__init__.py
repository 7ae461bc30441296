"""Modular Pydantic Settings v2 configuration.

Settings are split by domain (app/logging/reminders), each an immutable
``BaseSettings`` model with its own environment prefix:

    from hydration_service.core.settings import get_reminder_settings

    settings = get_reminder_settings()
    print(settings.default_interval_minutes)

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. YAML/conf.d files (optional, local/dev)
    3. Environment variables
    4. .env file
    5. secrets_dir
"""

from __future__ import annotations

from .app import AppSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_logging_settings,
    get_reminder_settings,
)
from .logs import LoggingSettings
from .reminders import ReminderSettings

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "ReminderSettings",
    "clear_all_caches",
    "get_app_settings",
    "get_logging_settings",
    "get_reminder_settings",
]
