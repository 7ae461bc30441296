"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings isolated from the developer's machine
    - Storage Fixtures: in-memory and JSON settings stores
    - Service Fixtures: intake and reminder services over in-memory backends
    - CLI Fixtures: Click runner with the state file in tmp_path
"""

from __future__ import annotations

import os
from datetime import date, datetime
from pathlib import Path

import pytest

from hydration_service.core.dependencies import clear_dependency_caches
from hydration_service.core.settings import ReminderSettings, clear_all_caches
from hydration_service.features.intake import IntakeRepository, IntakeService
from hydration_service.features.reminders import (
    DoNotDisturbWindow,
    ReminderRepository,
    ReminderService,
)
from hydration_service.infra.notifications import InMemoryNotificationScheduler
from hydration_service.infra.storage import InMemorySettingsStore, JsonFileSettingsStore

# Keep YAML config dirs pointed at nothing so local conf/ files never leak in
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("APP_CONFIG_DIR", str(Path(__file__).parent / "_no_conf"))
os.environ.setdefault("LOG_CONFIG_DIR", str(Path(__file__).parent / "_no_conf"))
os.environ.setdefault("REMINDER_CONFIG_DIR", str(Path(__file__).parent / "_no_conf"))


# ============================================================================
# Environment
# ============================================================================


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the state file at tmp_path and reset cached settings per test."""
    monkeypatch.setenv("APP_STATE_FILE", str(tmp_path / "state.json"))
    clear_all_caches()
    clear_dependency_caches()
    yield
    clear_all_caches()
    clear_dependency_caches()


@pytest.fixture
def today() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def evening() -> datetime:
    """22:30 on the first test day, just before the default quiet hours."""
    return datetime(2024, 1, 1, 22, 30)


# ============================================================================
# Storage Fixtures
# ============================================================================


@pytest.fixture
def memory_store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def json_store(tmp_path: Path) -> JsonFileSettingsStore:
    return JsonFileSettingsStore(tmp_path / "store" / "state.json")


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def reminder_settings() -> ReminderSettings:
    return ReminderSettings()


@pytest.fixture
def night_window() -> DoNotDisturbWindow:
    return DoNotDisturbWindow.from_strings("23:00", "07:00")


@pytest.fixture
def notifier() -> InMemoryNotificationScheduler:
    return InMemoryNotificationScheduler(deliver=lambda notification: None)


@pytest.fixture
def intake_service(memory_store: InMemorySettingsStore) -> IntakeService:
    return IntakeService(IntakeRepository(memory_store))


@pytest.fixture
def reminder_repository(
    memory_store: InMemorySettingsStore,
    reminder_settings: ReminderSettings,
    night_window: DoNotDisturbWindow,
) -> ReminderRepository:
    return ReminderRepository(
        memory_store,
        default_interval=reminder_settings.default_interval_minutes,
        default_window=night_window,
    )


@pytest.fixture
def reminder_service(
    reminder_repository: ReminderRepository,
    notifier: InMemoryNotificationScheduler,
    reminder_settings: ReminderSettings,
) -> ReminderService:
    return ReminderService(reminder_repository, notifier, reminder_settings)
