"""Per-command log context.

``hydration`` sets ``command`` once in the click group; every record logged
while that command runs carries it, including records from services that
know nothing about the CLI. The APScheduler backend binds ``job_id`` the
same way on its own logger.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**fields: Any) -> None:
    """Add ``fields`` to the context of the current thread."""
    _log_context.set({**_log_context.get(), **fields})


def get_log_context() -> dict[str, Any]:
    return dict(_log_context.get())


def clear_log_context() -> None:
    _log_context.set({})


class ContextInjectingFilter(logging.Filter):
    """Copy the log context onto each record without replacing existing attributes.

    configure_logging() installs it on the root QueueHandler.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class ContextBoundLogger(logging.LoggerAdapter):
    """Logger carrying fixed fields, merged under any per-call ``extra``.

    Example:
        ```python
        logger = get_logger(__name__, backend="apscheduler")
        logger.bind(job_id=notification.id).info("Reminder job added")
        ```
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        super().__init__(logger, context)

    def bind(self, **context: Any) -> ContextBoundLogger:
        return ContextBoundLogger(self.logger, **{**self.extra, **context})

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str, **context: Any) -> ContextBoundLogger:
    return ContextBoundLogger(logging.getLogger(name), **context)
