"""In-process notification scheduler."""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime

from hydration_service.infra.notifications.base import (
    DeliverCallback,
    ScheduledNotification,
    log_delivery,
)

logger = logging.getLogger(__name__)


class InMemoryNotificationScheduler:
    """Keeps pending notifications in a dict and delivers them on demand.

    Nothing fires on its own: call ``deliver_due(now)`` to hand every
    notification whose time has come to the delivery callback. One-shot CLI
    commands use this backend to record what would be scheduled.
    """

    def __init__(self, deliver: DeliverCallback | None = None) -> None:
        self._deliver = deliver or log_delivery
        self._lock = threading.Lock()
        self._pending: dict[str, ScheduledNotification] = {}

    def schedule(self, fire_at: datetime, title: str, body: str) -> str:
        notification = ScheduledNotification(
            id=uuid.uuid4().hex,
            fire_at=fire_at,
            title=title,
            body=body,
        )
        with self._lock:
            self._pending[notification.id] = notification
        logger.debug("Notification %s scheduled for %s", notification.id, fire_at.isoformat())
        return notification.id

    def clear_all(self) -> None:
        with self._lock:
            count = len(self._pending)
            self._pending.clear()
        if count:
            logger.debug("Cleared %d pending notifications", count)

    def pending(self) -> list[ScheduledNotification]:
        with self._lock:
            return sorted(self._pending.values(), key=lambda n: n.fire_at)

    def deliver_due(self, now: datetime) -> list[ScheduledNotification]:
        """Deliver and forget every notification due at or before ``now``."""
        with self._lock:
            due = sorted(
                (n for n in self._pending.values() if n.fire_at <= now),
                key=lambda n: n.fire_at,
            )
            for notification in due:
                del self._pending[notification.id]

        for notification in due:
            self._deliver(notification)
        return due
