"""Logging for the hydration CLI and the reminder loop.

Services log through ``logging.getLogger(<ClassName>)``; the CLI entry point
calls ``setup_logging()`` once and sets the command as log context:

    set_log_context(command="run")
    logging.getLogger("ReminderService").info("Reminder scheduled")
"""

from hydration_service.infra.logging.config import (
    complete,
    configure_logging,
    setup_logging,
    shutdown,
)
from hydration_service.infra.logging.context import (
    ContextBoundLogger,
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    get_logger,
    set_log_context,
)
from hydration_service.infra.logging.formatters import JSONFormatter
from hydration_service.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "ContextBoundLogger",
    "ContextInjectingFilter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "clear_log_context",
    "complete",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "get_logger",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
