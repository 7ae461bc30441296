"""Logging setup for the CLI.

The root logger gets a single QueueHandler; a QueueListener thread feeds the
stderr and rotating-file handlers, so a slow disk never delays a reminder
being scheduled. Child loggers (``ReminderService``, ``IntakeService``, ...)
propagate to the root and need no handlers of their own.
"""

from __future__ import annotations

import atexit
import logging
import logging.config
import time
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import TYPE_CHECKING, Any

from hydration_service.infra.logging.context import ContextInjectingFilter
from hydration_service.infra.logging.formatters import JSONFormatter

if TYPE_CHECKING:
    from hydration_service.core.settings.logs import LoggingSettings

_log_queue: Queue[logging.LogRecord] | None = None
_listener: QueueListener | None = None
_LOGGING_INITIALIZED = False
logger = logging.getLogger(__name__)

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def complete(max_wait: float = 5.0) -> None:
    """Block until queued records are handled or ``max_wait`` seconds pass."""
    if _log_queue is None or _listener is None:
        return

    deadline = time.monotonic() + max_wait
    while not _log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)


def shutdown() -> None:
    """Drain the queue and stop the listener thread. Safe to call twice."""
    global _log_queue, _listener

    if _listener is not None:
        complete()
        _listener.stop()
    _listener = None
    _log_queue = None


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **overrides: Any,
) -> None:
    """Configure logging from ``LoggingSettings`` once per process.

    Args:
        log_settings: Settings to use; loaded with get_logging_settings() when omitted.
        force: Reconfigure even if logging was already set up.
        **overrides: Replace individual configure_logging() arguments, e.g.
            ``log_level="DEBUG"`` when the app runs in debug mode.
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    from hydration_service.core.settings import get_app_settings, get_logging_settings

    log_settings = log_settings or get_logging_settings()
    kwargs = {
        **log_settings.to_logging_kwargs(),
        "service_name": get_app_settings().service_name,
        **overrides,
    }
    configure_logging(**kwargs)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    console_level: str | None = "WARNING",
    json_logs: bool = False,
    file_path: str | Path | None = None,
    file_max_bytes: int = 1_048_576,
    file_backup_count: int = 3,
    include_context: bool = True,
    service_name: str = "hydration-service",
) -> None:
    """Install the queue-backed root handler.

    Args:
        log_level: Root logger level.
        console_level: stderr handler level; None disables console output.
        json_logs: Emit JSON lines instead of text.
        file_path: Rotating log file; None disables file output.
        file_max_bytes: Size at which the log file is rotated.
        file_backup_count: Rotated files to keep.
        include_context: Copy the contextvars log context onto every record.
        service_name: ``service`` field added to JSON records.
    """
    global _log_queue, _listener

    shutdown()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "root": {"level": log_level.upper(), "handlers": []},
        },
    )

    if json_logs:
        formatter: logging.Formatter = JSONFormatter(static={"service": service_name})
    else:
        formatter = logging.Formatter(_TEXT_FORMAT, datefmt=_DATE_FORMAT)

    handlers = _build_handlers(console_level, file_path, file_max_bytes, file_backup_count)
    if not handlers:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    for handler in handlers:
        handler.setFormatter(formatter)

    _log_queue = Queue()
    _listener = QueueListener(_log_queue, *handlers, respect_handler_level=True)
    _listener.start()
    atexit.register(shutdown)

    queue_handler = QueueHandler(_log_queue)
    # Handler filters also see records propagated from child loggers
    if include_context:
        queue_handler.addFilter(ContextInjectingFilter())
    logging.getLogger().addHandler(queue_handler)
    logger.debug("Logging configured (json=%s, file=%s)", json_logs, file_path)


def _build_handlers(
    console_level: str | None,
    file_path: str | Path | None,
    max_bytes: int,
    backup_count: int,
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if console_level is not None:
        console = logging.StreamHandler()
        console.setLevel(console_level.upper())
        handlers.append(console)

    if file_path is not None:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"),
        )

    return handlers
