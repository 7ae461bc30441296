"""Reminders feature: do-not-disturb windows and next-reminder scheduling."""

from hydration_service.features.reminders.repository import ReminderRepository
from hydration_service.features.reminders.scheduling import ReminderState, next_fire_time
from hydration_service.features.reminders.schemas import HydrationStatus
from hydration_service.features.reminders.service import ReminderService
from hydration_service.features.reminders.window import DoNotDisturbWindow

__all__ = [
    "DoNotDisturbWindow",
    "HydrationStatus",
    "ReminderRepository",
    "ReminderService",
    "ReminderState",
    "next_fire_time",
]
