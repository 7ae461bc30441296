"""Daily intake counter with day-rollover reset.

All functions take the previous total and return a new one; nothing is
mutated and the clock is never read here.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime

from hydration_service.core.exceptions import ValidationException


@dataclass(frozen=True)
class DailyTotal:
    """Amount drunk on one calendar date.

    Attributes:
        amount: Non-negative total for ``last_update_date``.
        last_update_date: Calendar date the amount was last touched.
    """

    amount: int
    last_update_date: date

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValidationException(
                detail=f"Daily total cannot be negative, got {self.amount}",
                extra={"field": "amount", "value": self.amount},
            )


def _calendar_date(current: date | datetime) -> date:
    # datetime is a subclass of date, so check it first
    if isinstance(current, datetime):
        return current.date()
    return current


def observe(current: date | datetime, state: DailyTotal) -> DailyTotal:
    """Reset the total when ``current`` falls on a different calendar date.

    Returns ``state`` itself when the date is unchanged, so calling this
    repeatedly within a day is a no-op.
    """
    today = _calendar_date(current)
    if today != state.last_update_date:
        return DailyTotal(amount=0, last_update_date=today)
    return state


def add(state: DailyTotal, delta: int) -> DailyTotal:
    """Add ``delta`` to the total, keeping its date.

    Raises:
        ValidationException: If ``delta`` is not a positive integer.
    """
    if not isinstance(delta, int) or isinstance(delta, bool) or delta <= 0:
        raise ValidationException(
            detail=f"Intake amount must be a positive integer, got {delta!r}",
            extra={"field": "delta", "value": delta},
        )
    return replace(state, amount=state.amount + delta)


def reset(state: DailyTotal, current: date | datetime) -> DailyTotal:
    """Manual reset: zero for the current date, whatever the stored date was."""
    return DailyTotal(amount=0, last_update_date=_calendar_date(current))
