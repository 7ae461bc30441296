"""Shared base for IntakeService and ReminderService."""

from __future__ import annotations

import logging

from hydration_service.infra.logging import get_lazy_logger


class BaseService:
    """Gives each service a logger named after its class.

    ``self.logger`` is for the INFO business events (intake recorded,
    reminder scheduled); ``self._lazy`` takes lambdas for DEBUG detail.
    """

    def __init__(self) -> None:
        name = type(self).__name__
        self.logger = logging.getLogger(name)
        self._lazy = get_lazy_logger(name)
