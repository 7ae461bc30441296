"""Do-not-disturb window on the local wall clock.

A window is a recurring daily interval given by a start and an end time of
day. When the start is later than the end the window wraps past midnight:

    - "09:00"-"17:00" suppresses reminders during office hours
    - "23:00"-"07:00" suppresses reminders overnight

The start is inclusive and the end exclusive in both cases.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, time

from hydration_service.core.exceptions import ConfigurationError

_HHMM_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def parse_hhmm(value: str) -> tuple[int, int]:
    """Parse an ``HH:MM`` string into an (hour, minute) pair.

    Raises:
        ConfigurationError: If the string is malformed or out of range.
    """
    match = _HHMM_RE.match(value) if isinstance(value, str) else None
    if match is None:
        raise ConfigurationError(
            detail=f"Invalid time {value!r}, expected HH:MM",
            extra={"value": value},
        )
    hour, minute = int(match.group(1)), int(match.group(2))
    _check_range(hour, minute, value)
    return hour, minute


def format_hhmm(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def _check_range(hour: int, minute: int, label: str) -> None:
    if not 0 <= hour <= 23 or not 0 <= minute <= 59:
        raise ConfigurationError(
            detail=f"Time {label} out of range (hour 0-23, minute 0-59)",
            extra={"hour": hour, "minute": minute},
        )


@dataclass(frozen=True)
class DoNotDisturbWindow:
    """Recurring daily window during which reminders are deferred.

    Attributes:
        start_hour: Hour the window opens (0-23).
        start_minute: Minute the window opens (0-59).
        end_hour: Hour the window closes (0-23).
        end_minute: Minute the window closes (0-59).
    """

    start_hour: int
    start_minute: int
    end_hour: int
    end_minute: int

    def __post_init__(self) -> None:
        for name in ("start_hour", "start_minute", "end_hour", "end_minute"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(
                    detail=f"{name} must be an integer",
                    extra={"field": name, "value": value},
                )
        _check_range(self.start_hour, self.start_minute, "start")
        _check_range(self.end_hour, self.end_minute, "end")

    @classmethod
    def from_strings(cls, start: str, end: str) -> DoNotDisturbWindow:
        """Build a window from two ``HH:MM`` strings.

        Example:
            >>> DoNotDisturbWindow.from_strings("23:00", "07:00").wraps_midnight
            True
        """
        start_hour, start_minute = parse_hhmm(start)
        end_hour, end_minute = parse_hhmm(end)
        return cls(start_hour, start_minute, end_hour, end_minute)

    @property
    def start(self) -> str:
        return format_hhmm(self.start_hour, self.start_minute)

    @property
    def end(self) -> str:
        return format_hhmm(self.end_hour, self.end_minute)

    @property
    def wraps_midnight(self) -> bool:
        return (self.start_hour, self.start_minute) > (self.end_hour, self.end_minute)

    @property
    def covers_full_day(self) -> bool:
        """True when start equals end, i.e. every minute of the day is inside."""
        return (self.start_hour, self.start_minute) == (self.end_hour, self.end_minute)

    def contains(self, moment: datetime | time) -> bool:
        """Return whether the wall-clock hour and minute of ``moment`` fall inside.

        Seconds are ignored; the comparison is lexicographic on (hour, minute).
        """
        t = (moment.hour, moment.minute)
        start = (self.start_hour, self.start_minute)
        end = (self.end_hour, self.end_minute)

        if start < end:
            return start <= t < end

        # Wraps past midnight (or covers the whole day when start == end)
        return t >= start or t < end

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
