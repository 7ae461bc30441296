"""Notification scheduling backends."""

from hydration_service.infra.notifications.background import APSchedulerNotificationScheduler
from hydration_service.infra.notifications.base import (
    DeliverCallback,
    NotificationScheduler,
    ScheduledNotification,
    log_delivery,
)
from hydration_service.infra.notifications.memory import InMemoryNotificationScheduler

__all__ = [
    "APSchedulerNotificationScheduler",
    "DeliverCallback",
    "InMemoryNotificationScheduler",
    "NotificationScheduler",
    "ScheduledNotification",
    "log_delivery",
]
