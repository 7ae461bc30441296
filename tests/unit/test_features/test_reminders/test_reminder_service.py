"""Unit tests for ReminderService."""

from __future__ import annotations

import logging
from datetime import date, datetime

import pytest

from hydration_service.core.exceptions import ConfigurationError, SchedulingError
from hydration_service.core.settings import ReminderSettings
from hydration_service.features.intake import IntakeRepository, IntakeService
from hydration_service.features.reminders import (
    DoNotDisturbWindow,
    ReminderRepository,
    ReminderService,
    ReminderState,
)
from hydration_service.infra.notifications import InMemoryNotificationScheduler
from hydration_service.infra.storage import JsonFileSettingsStore


@pytest.mark.unit
class TestSetupReminders:
    """Tests for scheduling the pending reminder."""

    def test_schedules_one_notification_after_quiet_hours(self, reminder_service, notifier, evening):
        state = reminder_service.setup_reminders(evening)

        assert state == ReminderState(60, datetime(2024, 1, 2, 7, 30))
        pending = notifier.pending()
        assert len(pending) == 1
        assert pending[0].fire_at == datetime(2024, 1, 2, 7, 30)
        assert pending[0].title == "Water Reminder"
        assert pending[0].body == "Don't forget to drink water!"

    def test_replaces_pending_notifications(self, reminder_service, notifier):
        notifier.schedule(datetime(2024, 1, 1, 9, 0), "old", "old")

        reminder_service.setup_reminders(datetime(2024, 1, 1, 10, 0))

        assert [n.fire_at for n in notifier.pending()] == [datetime(2024, 1, 1, 11, 0)]

    def test_persists_next_fire_time(self, reminder_service, memory_store):
        reminder_service.setup_reminders(datetime(2024, 1, 1, 10, 0))

        assert memory_store.get("nextReminderDate") == "2024-01-01T11:00:00"
        assert reminder_service.get_state().next_fire_time == datetime(2024, 1, 1, 11, 0)

    def test_scheduling_error_keeps_pending_reminder(self, reminder_service, notifier, memory_store):
        notifier.schedule(datetime(2024, 1, 1, 9, 0), "existing", "existing")
        memory_store.set("reminderInterval", 24 * 60)

        with pytest.raises(SchedulingError):
            reminder_service.setup_reminders(datetime(2024, 1, 1, 23, 30))

        assert len(notifier.pending()) == 1

    def test_scheduling_error_keeps_stored_interval(self, reminder_service, notifier, memory_store):
        reminder_service.setup_reminders(datetime(2024, 1, 1, 10, 0))
        before = memory_store.as_dict()

        with pytest.raises(SchedulingError):
            reminder_service.set_interval(24 * 60, datetime(2024, 1, 1, 23, 30))

        assert memory_store.as_dict() == before
        assert [n.fire_at for n in notifier.pending()] == [datetime(2024, 1, 1, 11, 0)]

    def test_scheduling_error_keeps_stored_window(self, reminder_service, memory_store):
        memory_store.set("reminderInterval", 24 * 60)
        reminder_service.setup_reminders(datetime(2024, 1, 1, 10, 0))
        before = memory_store.as_dict()

        with pytest.raises(SchedulingError):
            reminder_service.set_do_not_disturb(
                DoNotDisturbWindow.from_strings("09:00", "11:00"),
                datetime(2024, 1, 1, 10, 0),
            )

        assert memory_store.as_dict() == before

    def test_logs_scheduled_reminder(self, reminder_service, caplog):
        with caplog.at_level(logging.INFO, logger="ReminderService"):
            reminder_service.setup_reminders(datetime(2024, 1, 1, 10, 0))

        assert "Reminder scheduled" in caplog.text

    def test_handle_fired_schedules_following_reminder(self, reminder_service, notifier):
        reminder_service.setup_reminders(datetime(2024, 1, 1, 10, 0))
        notifier.deliver_due(datetime(2024, 1, 1, 11, 0))

        state = reminder_service.handle_fired(datetime(2024, 1, 1, 11, 0))

        assert state.next_fire_time == datetime(2024, 1, 1, 12, 0)
        assert len(notifier.pending()) == 1


@pytest.mark.unit
class TestSetInterval:
    """Tests for changing the interval."""

    def test_set_interval_persists_and_reschedules(self, reminder_service, notifier, memory_store):
        state = reminder_service.set_interval(45, datetime(2024, 1, 1, 10, 0))

        assert state == ReminderState(45, datetime(2024, 1, 1, 10, 45))
        assert memory_store.get("reminderInterval") == 45
        assert notifier.pending()[0].fire_at == datetime(2024, 1, 1, 10, 45)

    @pytest.mark.parametrize("minutes", [0, -30])
    def test_non_positive_interval_rejected(self, reminder_service, memory_store, minutes):
        with pytest.raises(ConfigurationError):
            reminder_service.set_interval(minutes, datetime(2024, 1, 1, 10, 0))

        assert "reminderInterval" not in memory_store.as_dict()

    def test_off_menu_interval_allowed_by_default(self, reminder_service):
        state = reminder_service.set_interval(20, datetime(2024, 1, 1, 10, 0))

        assert state.interval_minutes == 20

    def test_strict_options_reject_off_menu_interval(self, reminder_repository, notifier):
        service = ReminderService(
            reminder_repository,
            notifier,
            ReminderSettings(strict_interval_options=True),
        )

        with pytest.raises(ConfigurationError) as exc_info:
            service.set_interval(20, datetime(2024, 1, 1, 10, 0))

        assert exc_info.value.extra["options"] == [15, 30, 45, 60, 75, 90]
        assert service.set_interval(30, datetime(2024, 1, 1, 10, 0)).interval_minutes == 30

    def test_interval_options(self, reminder_service):
        assert reminder_service.interval_options == [15, 30, 45, 60, 75, 90]


@pytest.mark.unit
class TestSetDoNotDisturb:
    """Tests for changing the do-not-disturb window."""

    def test_set_window_persists_and_reschedules(self, reminder_service, memory_store):
        window = DoNotDisturbWindow.from_strings("12:00", "13:00")

        state = reminder_service.set_do_not_disturb(window, datetime(2024, 1, 1, 11, 30))

        assert reminder_service.get_window() == window
        assert memory_store.get("doNotDisturbStart") == "12:00"
        assert state.next_fire_time == datetime(2024, 1, 1, 13, 30)

    def test_full_day_window_rejected(self, reminder_service, memory_store):
        with pytest.raises(ConfigurationError):
            reminder_service.set_do_not_disturb(DoNotDisturbWindow(6, 0, 6, 0))

        assert "doNotDisturbStart" not in memory_store.as_dict()


@pytest.mark.unit
def test_preview_does_not_schedule(reminder_service, notifier, evening):
    assert reminder_service.preview(evening) == datetime(2024, 1, 2, 7, 30)
    assert notifier.pending() == []


@pytest.mark.unit
class TestSyncWithStoredSettings:
    """A long-running service picks up changes made through another instance."""

    @pytest.fixture
    def one_shot(self, reminder_repository, reminder_settings):
        return ReminderService(
            reminder_repository,
            InMemoryNotificationScheduler(deliver=lambda notification: None),
            reminder_settings,
        )

    def test_nothing_to_do_before_first_schedule(self, reminder_service):
        assert reminder_service.sync_with_stored_settings(datetime(2024, 1, 1, 10, 0)) is None

    def test_unchanged_settings_keep_pending_reminder(self, reminder_service, notifier):
        reminder_service.setup_reminders(datetime(2024, 1, 1, 10, 0))

        assert reminder_service.sync_with_stored_settings(datetime(2024, 1, 1, 10, 5)) is None
        assert [n.fire_at for n in notifier.pending()] == [datetime(2024, 1, 1, 11, 0)]

    def test_interval_changed_elsewhere_reschedules(self, reminder_service, notifier, one_shot):
        reminder_service.setup_reminders(datetime(2024, 1, 1, 10, 0))
        one_shot.set_interval(15, datetime(2024, 1, 1, 10, 5))

        state = reminder_service.sync_with_stored_settings(datetime(2024, 1, 1, 10, 6))

        assert state == ReminderState(15, datetime(2024, 1, 1, 10, 21))
        assert [n.fire_at for n in notifier.pending()] == [datetime(2024, 1, 1, 10, 21)]
        assert reminder_service.sync_with_stored_settings(datetime(2024, 1, 1, 10, 7)) is None

    def test_window_changed_elsewhere_reschedules(self, reminder_service, notifier, one_shot):
        reminder_service.setup_reminders(datetime(2024, 1, 1, 10, 30))
        one_shot.set_do_not_disturb(
            DoNotDisturbWindow.from_strings("11:00", "12:00"), datetime(2024, 1, 1, 10, 30)
        )

        state = reminder_service.sync_with_stored_settings(datetime(2024, 1, 1, 10, 31))

        assert state.next_fire_time == datetime(2024, 1, 1, 12, 31)
        assert [n.fire_at for n in notifier.pending()] == [datetime(2024, 1, 1, 12, 31)]


def test_running_loop_keeps_intake_added_from_another_terminal(
    tmp_path, notifier, reminder_settings, night_window,
):
    path = tmp_path / "state.json"
    run_store = JsonFileSettingsStore(path)
    repository = ReminderRepository(
        run_store,
        default_interval=reminder_settings.default_interval_minutes,
        default_window=night_window,
    )
    run_service = ReminderService(repository, notifier, reminder_settings)
    IntakeService(IntakeRepository(run_store)).current(date(2024, 1, 1))
    run_service.setup_reminders(datetime(2024, 1, 1, 10, 0))

    IntakeService(IntakeRepository(JsonFileSettingsStore(path))).add(250, date(2024, 1, 1))
    run_service.handle_fired(datetime(2024, 1, 1, 11, 0))

    stored = JsonFileSettingsStore(path)
    assert stored.get("totalWaterIntake") == 250
    assert stored.get("nextReminderDate") == "2024-01-01T12:00:00"
