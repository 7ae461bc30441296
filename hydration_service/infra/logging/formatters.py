"""JSON lines formatter."""
from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

# Standard LogRecord attributes; anything else on a record came from
# ``extra={...}`` or the log context and is copied into the payload
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)),
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, suitable for ``jq`` or a log shipper.

    Example:
        ```json
        {"timestamp": "2024-01-01T22:30:00.000Z", "level": "INFO", "logger": "ReminderService", "message": "Reminder scheduled", "fire_at": "2024-01-02T07:30:00"}
        ```
    """

    def __init__(self, static: dict[str, Any] | None = None) -> None:
        """Create the formatter.

        Args:
            static: Fields added to every record, e.g. ``{"service": "hydration-service"}``.
        """
        super().__init__()
        self.static = dict(static or {})

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        data: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **self.static,
        }

        # Tracebacks are escaped so each record stays on one line
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info).replace("\n", "\\n")
        if record.stack_info:
            data["stack_trace"] = record.stack_info.replace("\n", "\\n")

        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and key not in data:
                data[key] = value

        return json.dumps(data, ensure_ascii=False, default=str)
