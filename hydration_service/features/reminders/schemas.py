"""Pydantic schemas for status output."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class HydrationStatus(BaseModel):
    """Snapshot of today's intake and the reminder configuration."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=0, description="Amount drunk today")
    unit: str = Field(..., description="Unit of the amount, e.g. ml")
    day: date = Field(..., description="Calendar date the total belongs to")
    interval_minutes: int = Field(..., gt=0, description="Minutes between reminders")
    do_not_disturb_start: str = Field(..., description="Window start, HH:MM")
    do_not_disturb_end: str = Field(..., description="Window end, HH:MM")
    next_reminder: datetime | None = Field(
        default=None,
        description="When the pending reminder fires, if one is scheduled",
    )
