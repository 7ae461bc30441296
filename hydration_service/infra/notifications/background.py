"""APScheduler-backed notification scheduler.

Each notification becomes a one-off ``date`` trigger job on a
BackgroundScheduler; when the job runs, the notification is handed to the
delivery callback on the scheduler's worker thread.

Usage:
    scheduler = APSchedulerNotificationScheduler(deliver=print_notification)
    scheduler.start()
    scheduler.schedule(fire_at, "Water Reminder", "Don't forget to drink water!")
    ...
    scheduler.shutdown()
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime
from typing import Any

from apscheduler.schedulers.background import BackgroundScheduler

from hydration_service.core.exceptions import NotificationException
from hydration_service.infra.logging import get_logger
from hydration_service.infra.notifications.base import (
    DeliverCallback,
    ScheduledNotification,
    log_delivery,
)

logger = get_logger(__name__, backend="apscheduler")

_JOB_DEFAULTS: dict[str, Any] = {
    "coalesce": True,  # Combine multiple pending executions into one
    "max_instances": 1,
    "misfire_grace_time": 300,  # A reminder up to 5 minutes late is still useful
}


class APSchedulerNotificationScheduler:
    """Notification scheduler running date-trigger jobs on a background thread."""

    def __init__(
        self,
        deliver: DeliverCallback | None = None,
        scheduler: BackgroundScheduler | None = None,
    ) -> None:
        self._deliver = deliver or log_delivery
        self._scheduler = scheduler or BackgroundScheduler(job_defaults=_JOB_DEFAULTS)
        self._lock = threading.Lock()
        self._pending: dict[str, ScheduledNotification] = {}

    def start(self) -> None:
        """Start the background scheduler thread."""
        if not self._scheduler.running:
            self._scheduler.start()
            logger.info("Notification scheduler started")

    def shutdown(self, wait: bool = False) -> None:
        """Stop the background scheduler; pending jobs are discarded."""
        if self._scheduler.running:
            self._scheduler.shutdown(wait=wait)
            logger.info("Notification scheduler stopped")
        with self._lock:
            self._pending.clear()

    def schedule(self, fire_at: datetime, title: str, body: str) -> str:
        notification = ScheduledNotification(
            id=uuid.uuid4().hex,
            fire_at=fire_at,
            title=title,
            body=body,
        )
        with self._lock:
            self._pending[notification.id] = notification

        try:
            self._scheduler.add_job(
                self._fire,
                trigger="date",
                run_date=fire_at,
                args=[notification.id],
                id=notification.id,
                name=f"reminder:{title}",
                replace_existing=True,
            )
        except Exception as e:
            with self._lock:
                self._pending.pop(notification.id, None)
            logger.exception("Failed to schedule notification", extra={"fire_at": fire_at.isoformat()})
            raise NotificationException(
                detail=f"Could not schedule notification for {fire_at.isoformat()}: {e}",
                extra={"fire_at": fire_at.isoformat()},
            ) from e

        logger.bind(job_id=notification.id).debug(
            "Notification scheduled",
            extra={"fire_at": fire_at.isoformat()},
        )
        return notification.id

    def clear_all(self) -> None:
        self._scheduler.remove_all_jobs()
        with self._lock:
            count = len(self._pending)
            self._pending.clear()
        if count:
            logger.debug("Cleared pending notifications", extra={"count": count})

    def pending(self) -> list[ScheduledNotification]:
        with self._lock:
            return sorted(self._pending.values(), key=lambda n: n.fire_at)

    def _fire(self, notification_id: str) -> None:
        with self._lock:
            notification = self._pending.pop(notification_id, None)
        if notification is None:
            # Cleared between trigger and execution
            return

        job_logger = logger.bind(job_id=notification_id)
        job_logger.debug("Delivering notification")
        try:
            self._deliver(notification)
        except Exception:
            job_logger.exception("Notification delivery failed")
            raise
