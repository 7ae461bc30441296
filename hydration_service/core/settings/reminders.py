"""Reminder and intake defaults."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import SettingsConfigDict

from ._sanitizers import sanitize_inline_numeric
from .base import HydrationSettings

_HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ReminderSettings(HydrationSettings):
    """Defaults used until the user changes interval or do-not-disturb times.

    Environment variables use REMINDER_ prefix.
    Example: REMINDER_DEFAULT_INTERVAL_MINUTES=45, REMINDER_DEFAULT_DND_START=22:30
    """

    yaml_name = "reminders"

    default_interval_minutes: int = Field(
        default=60,
        ge=1,
        description="Reminder interval used when none has been stored yet",
    )
    interval_options: list[int] = Field(
        default_factory=lambda: [15, 30, 45, 60, 75, 90],
        min_length=1,
        description="Interval choices offered to the user (minutes)",
    )
    strict_interval_options: bool = Field(
        default=False,
        description="Reject intervals that are not one of interval_options",
    )

    default_dnd_start: str = Field(
        default="23:00",
        pattern=_HHMM_PATTERN,
        description="Do-not-disturb start (HH:MM, local wall clock)",
    )
    default_dnd_end: str = Field(
        default="07:00",
        pattern=_HHMM_PATTERN,
        description="Do-not-disturb end (HH:MM, local wall clock)",
    )

    notification_title: str = Field(
        default="Water Reminder",
        min_length=1,
        max_length=100,
        description="Title of the reminder notification",
    )
    notification_body: str = Field(
        default="Don't forget to drink water!",
        min_length=1,
        max_length=500,
        description="Body of the reminder notification",
    )
    intake_unit: str = Field(
        default="ml",
        min_length=1,
        max_length=10,
        description="Unit displayed next to intake amounts",
    )

    model_config = SettingsConfigDict(env_prefix="REMINDER_")

    @field_validator("default_interval_minutes", mode="before")
    @classmethod
    def _sanitize_interval(cls, v: Any) -> Any:
        return sanitize_inline_numeric(v)

    @field_validator("interval_options", mode="after")
    @classmethod
    def _check_options(cls, v: list[int]) -> list[int]:
        if any(option <= 0 for option in v):
            raise ValueError("interval_options must all be positive")
        return sorted(set(v))

    @model_validator(mode="after")
    def _default_in_options(self) -> ReminderSettings:
        if self.strict_interval_options and self.default_interval_minutes not in self.interval_options:
            raise ValueError(
                "default_interval_minutes must be one of interval_options "
                "when strict_interval_options is enabled",
            )
        return self
