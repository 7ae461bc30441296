"""Intake commands: record water and reset the daily total."""

from __future__ import annotations

import click

from hydration_service.cli.utils import fail, success, warning
from hydration_service.core.dependencies import get_intake_service
from hydration_service.core.exceptions import AppException
from hydration_service.core.settings import get_reminder_settings
from hydration_service.features.intake import parse_amount


@click.group(name="intake")
def intake() -> None:
    """Daily water intake commands."""


@intake.command(name="add")
@click.argument("amount")
def add_intake(amount: str) -> None:
    """Add AMOUNT to today's total.

    Entries that are not positive whole numbers are ignored.

    Examples:

    \b
      hydration intake add 250
    """
    unit = get_reminder_settings().intake_unit
    try:
        total = get_intake_service().record_entry(amount)
    except AppException as e:
        fail(e)

    if parse_amount(amount) is None:
        warning(f"Ignored invalid amount {amount!r}; total today is {total.amount} {unit}")
        return

    success(f"Added {parse_amount(amount)} {unit}; total today is {total.amount} {unit}")


@intake.command(name="reset")
def reset_intake() -> None:
    """Reset today's total to zero."""
    try:
        get_intake_service().reset()
    except AppException as e:
        fail(e)

    success("Today's total reset to 0")
