"""Base protocol and types for notification schedulers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledNotification:
    """A local notification waiting to be delivered.

    Attributes:
        id: Identifier returned by the scheduler.
        fire_at: Local wall-clock time the notification is due.
        title: Notification title.
        body: Notification body text.
    """

    id: str
    fire_at: datetime
    title: str
    body: str


DeliverCallback = Callable[[ScheduledNotification], None]


def log_delivery(notification: ScheduledNotification) -> None:
    """Default delivery: write the notification to the log."""
    logger.info(
        "%s: %s",
        notification.title,
        notification.body,
        extra={"notification_id": notification.id, "fire_at": notification.fire_at.isoformat()},
    )


class NotificationScheduler(Protocol):
    """Protocol for backends that deliver notifications at a given time.

    Mirrors the host notification center the reminder app relied on: one
    call to schedule, one call to drop everything pending.
    """

    def schedule(self, fire_at: datetime, title: str, body: str) -> str:
        """Schedule a notification and return its identifier."""
        ...

    def clear_all(self) -> None:
        """Cancel every pending notification."""
        ...

    def pending(self) -> list[ScheduledNotification]:
        """Return pending notifications ordered by fire time."""
        ...
