"""Next-reminder computation.

Pure functions only: callers pass the current time, the interval and the
do-not-disturb window, and get a timestamp back. Nothing here reads the
clock or touches storage.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from hydration_service.core.exceptions import ConfigurationError, SchedulingError
from hydration_service.features.reminders.window import DoNotDisturbWindow

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class ReminderState:
    """Persisted reminder configuration plus the last computed fire time.

    Attributes:
        interval_minutes: Minutes between reminders.
        next_fire_time: When the pending reminder fires, None before the
            first schedule.
    """

    interval_minutes: int
    next_fire_time: datetime | None = None


def validate_interval(interval_minutes: object) -> int:
    """Return ``interval_minutes`` if it is a positive int.

    Raises:
        ConfigurationError: For non-integers, booleans, zero and negatives.
    """
    if (
        not isinstance(interval_minutes, int)
        or isinstance(interval_minutes, bool)
        or interval_minutes <= 0
    ):
        raise ConfigurationError(
            detail=f"Reminder interval must be a positive number of minutes, got {interval_minutes!r}",
            extra={"interval_minutes": interval_minutes},
        )
    return interval_minutes


def validate_window(window: DoNotDisturbWindow) -> DoNotDisturbWindow:
    """Reject windows that leave no minute of the day free for reminders."""
    if window.covers_full_day:
        raise ConfigurationError(
            detail=f"Do-not-disturb window {window} covers the whole day",
            extra={"start": window.start, "end": window.end},
        )
    return window


def max_steps(interval_minutes: int) -> int:
    """Number of distinct wall-clock minutes reachable by stepping ``interval_minutes``.

    After this many steps the sequence of times of day repeats, so a search
    that has not left the window by then never will.
    """
    return MINUTES_PER_DAY // math.gcd(interval_minutes, MINUTES_PER_DAY)


def next_fire_time(
    from_time: datetime,
    interval_minutes: int,
    window: DoNotDisturbWindow | None,
) -> datetime:
    """Compute the next reminder time after ``from_time``.

    Steps forward by ``interval_minutes`` at least once, and keeps stepping
    while the candidate's wall-clock time is inside ``window``.

    Args:
        from_time: Reference time, usually now.
        interval_minutes: Positive step in minutes.
        window: Do-not-disturb window, or None for no window.

    Returns:
        The first candidate outside the window.

    Raises:
        ConfigurationError: If the interval is not positive or the window
            covers the whole day.
        SchedulingError: If no reachable time of day lies outside the window.

    Example:
        >>> window = DoNotDisturbWindow.from_strings("23:00", "07:00")
        >>> next_fire_time(datetime(2024, 1, 1, 22, 30), 60, window)
        datetime.datetime(2024, 1, 2, 7, 30)
    """
    validate_interval(interval_minutes)
    step = timedelta(minutes=interval_minutes)

    if window is None:
        return from_time + step

    validate_window(window)

    candidate = from_time + step
    for _ in range(max_steps(interval_minutes)):
        if not window.contains(candidate):
            return candidate
        candidate += step

    raise SchedulingError(
        detail=(
            f"No reminder time outside do-not-disturb window {window} is reachable "
            f"every {interval_minutes} minutes from {from_time.isoformat()}"
        ),
        extra={
            "interval_minutes": interval_minutes,
            "start": window.start,
            "end": window.end,
        },
    )
