"""Intake feature: the daily water total."""

from hydration_service.features.intake.counter import DailyTotal, add, observe, reset
from hydration_service.features.intake.repository import IntakeRepository
from hydration_service.features.intake.service import IntakeService, parse_amount

__all__ = [
    "DailyTotal",
    "IntakeRepository",
    "IntakeService",
    "add",
    "observe",
    "parse_amount",
    "reset",
]
