"""Unit tests for next-reminder computation."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from hydration_service.core.exceptions import ConfigurationError, SchedulingError
from hydration_service.features.reminders.scheduling import (
    ReminderState,
    max_steps,
    next_fire_time,
)
from hydration_service.features.reminders.window import DoNotDisturbWindow

NIGHT = DoNotDisturbWindow(23, 0, 7, 0)
LUNCH = DoNotDisturbWindow(12, 0, 13, 0)


@pytest.mark.unit
class TestNextFireTime:
    """Tests for next_fire_time."""

    def test_evening_reminder_deferred_past_quiet_hours(self):
        """From 22:30 every hour, 23:30 through 06:30 are skipped."""
        result = next_fire_time(datetime(2024, 1, 1, 22, 30), 60, NIGHT)

        assert result == datetime(2024, 1, 2, 7, 30)

    def test_outside_window_adds_one_interval(self):
        result = next_fire_time(datetime(2024, 1, 1, 10, 0), 45, NIGHT)

        assert result == datetime(2024, 1, 1, 10, 45)

    def test_always_at_least_one_interval(self):
        start = datetime(2024, 1, 1, 8, 0)

        assert next_fire_time(start, 15, NIGHT) == start + timedelta(minutes=15)

    def test_landing_on_window_end_is_allowed(self):
        result = next_fire_time(datetime(2024, 1, 2, 6, 0), 60, NIGHT)

        assert result == datetime(2024, 1, 2, 7, 0)

    def test_landing_on_window_start_is_deferred(self):
        result = next_fire_time(datetime(2024, 1, 1, 11, 30), 30, LUNCH)

        assert result == datetime(2024, 1, 1, 13, 0)

    def test_no_window(self):
        start = datetime(2024, 1, 1, 23, 30)

        assert next_fire_time(start, 90, None) == start + timedelta(minutes=90)

    def test_wall_clock_of_aware_datetime_is_used(self):
        tz = timezone(timedelta(hours=2))
        start = datetime(2024, 1, 1, 22, 30, tzinfo=tz)

        result = next_fire_time(start, 60, NIGHT)

        assert result == datetime(2024, 1, 2, 7, 30, tzinfo=tz)

    @pytest.mark.parametrize("interval", [0, -15, 1.5, "60", True, None])
    def test_invalid_interval_rejected(self, interval):
        with pytest.raises(ConfigurationError):
            next_fire_time(datetime(2024, 1, 1, 10, 0), interval, NIGHT)

    def test_invalid_interval_rejected_without_window(self):
        with pytest.raises(ConfigurationError):
            next_fire_time(datetime(2024, 1, 1, 10, 0), 0, None)

    def test_full_day_window_rejected(self):
        with pytest.raises(ConfigurationError):
            next_fire_time(datetime(2024, 1, 1, 10, 0), 60, DoNotDisturbWindow(8, 0, 8, 0))

    def test_daily_interval_starting_inside_window_raises(self):
        """Stepping a whole day never leaves the window, so no slot exists."""
        with pytest.raises(SchedulingError):
            next_fire_time(datetime(2024, 1, 1, 23, 30), 24 * 60, NIGHT)

    def test_daily_interval_starting_outside_window(self):
        result = next_fire_time(datetime(2024, 1, 1, 10, 0), 24 * 60, NIGHT)

        assert result == datetime(2024, 1, 2, 10, 0)

    def test_interval_longer_than_window_gap(self):
        """12h steps from 20:00 land at 08:00, outside the night window."""
        result = next_fire_time(datetime(2024, 1, 1, 20, 0), 12 * 60, NIGHT)

        assert result == datetime(2024, 1, 2, 8, 0)

    @pytest.mark.parametrize("interval", [1, 7, 15, 45, 60, 75, 90, 97, 180, 720])
    @pytest.mark.parametrize(
        "window",
        [NIGHT, LUNCH, DoNotDisturbWindow(0, 0, 23, 59), DoNotDisturbWindow(22, 15, 22, 10)],
    )
    @pytest.mark.parametrize("hour", [0, 6, 12, 22, 23])
    def test_result_is_outside_window(self, interval, window, hour):
        """Terminates with a time outside the window, or reports no slot."""
        start = datetime(2024, 3, 9, hour, 17)
        try:
            result = next_fire_time(start, interval, window)
        except SchedulingError:
            return

        assert result > start
        assert not window.contains(result)
        assert (result - start) % timedelta(minutes=interval) == timedelta(0)


class TestMaxSteps:
    """Tests for the stepping bound."""

    @pytest.mark.parametrize(
        ("interval", "expected"),
        [(1, 1440), (60, 24), (90, 16), (7, 1440), (1440, 1), (2880, 1)],
    )
    def test_distinct_minutes_reachable(self, interval, expected):
        assert max_steps(interval) == expected


def test_reminder_state_defaults_to_unscheduled():
    state = ReminderState(interval_minutes=60)

    assert state.next_fire_time is None
