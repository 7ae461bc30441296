"""Service layer for the daily intake total."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from hydration_service.core.services.base import BaseService
from hydration_service.features.intake import counter
from hydration_service.features.intake.counter import DailyTotal

if TYPE_CHECKING:
    from hydration_service.features.intake.repository import IntakeRepository


def parse_amount(raw: str | int) -> int | None:
    """Parse a manually entered amount; None when it is not a positive integer."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        # ASCII digits only; int() also takes "1_000", "+5" and non-Latin digits
        text = str(raw).strip()
        if not (text.isascii() and text.isdigit()):
            return None
        value = int(text)
    return value if value > 0 else None


class IntakeService(BaseService):
    """Threads the daily total through the repository.

    Every operation observes day rollover before doing anything else, so an
    entry made just after midnight lands on the new day's total.
    """

    def __init__(self, repository: IntakeRepository) -> None:
        super().__init__()
        self._repository = repository

    def current(self, today: date | None = None) -> DailyTotal:
        """Return today's total, resetting and persisting it on a new day."""
        today = today or date.today()
        stored = self._repository.load(today)
        observed = counter.observe(today, stored)

        if observed is not stored:
            self._repository.save(observed)
            self.logger.info(
                "Daily total reset for new day",
                extra={
                    "previous_date": stored.last_update_date.isoformat(),
                    "previous_amount": stored.amount,
                    "date": today.isoformat(),
                    "operation": "service.current",
                },
            )
        return observed

    def add(self, amount: int, today: date | None = None) -> DailyTotal:
        """Add ``amount`` to today's total.

        Raises:
            ValidationException: If ``amount`` is not a positive integer.
        """
        updated = counter.add(self.current(today), amount)
        self._repository.save(updated)
        self.logger.info(
            "Intake recorded",
            extra={"amount": amount, "total": updated.amount, "operation": "service.add"},
        )
        return updated

    def record_entry(self, raw: str | int, today: date | None = None) -> DailyTotal:
        """Add a manual entry, ignoring anything that is not a positive integer."""
        amount = parse_amount(raw)
        if amount is None:
            self.logger.info(
                "Ignoring invalid intake entry",
                extra={"raw": str(raw), "operation": "service.record_entry"},
            )
            return self.current(today)
        return self.add(amount, today)

    def reset(self, today: date | None = None) -> DailyTotal:
        """Reset today's total to zero."""
        today = today or date.today()
        stored = self._repository.load(today)
        cleared = counter.reset(stored, today)
        self._repository.save(cleared)
        self.logger.info(
            "Daily total reset manually",
            extra={"previous_amount": stored.amount, "operation": "service.reset"},
        )
        return cleared
