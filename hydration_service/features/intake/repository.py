"""Repository for the daily intake total.

Stored keys:
    totalWaterIntake    amount drunk on lastUpdateDate (int)
    lastUpdateDate      ISO 8601 date (full timestamps are accepted on read)
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from hydration_service.core.exceptions import StorageException
from hydration_service.features.intake.counter import DailyTotal

if TYPE_CHECKING:
    from hydration_service.infra.storage import SettingsStore

TOTAL_KEY = "totalWaterIntake"
LAST_UPDATE_KEY = "lastUpdateDate"


class IntakeRepository:
    def __init__(self, store: SettingsStore) -> None:
        self._store = store

    def load(self, today: date) -> DailyTotal:
        """Load the stored total; a missing date is treated as ``today``."""
        amount = self._store.get(TOTAL_KEY, 0)
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            raise StorageException(
                detail=f"Stored {TOTAL_KEY} is not a non-negative integer: {amount!r}",
                extra={"key": TOTAL_KEY, "value": amount},
            )

        raw_date = self._store.get(LAST_UPDATE_KEY)
        last_update = today if raw_date is None else _parse_date(raw_date)
        return DailyTotal(amount=amount, last_update_date=last_update)

    def save(self, total: DailyTotal) -> None:
        self._store.set(TOTAL_KEY, total.amount)
        self._store.set(LAST_UPDATE_KEY, total.last_update_date.isoformat())


def _parse_date(raw: object) -> date:
    if isinstance(raw, str):
        try:
            if "T" in raw or " " in raw:
                return datetime.fromisoformat(raw).date()
            return date.fromisoformat(raw)
        except ValueError:
            pass
    raise StorageException(
        detail=f"Stored {LAST_UPDATE_KEY} is not an ISO 8601 date: {raw!r}",
        extra={"key": LAST_UPDATE_KEY, "value": raw},
    )
