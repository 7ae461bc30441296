"""Debug logging whose message is only built when DEBUG is on.

Services pass lambdas for messages that would otherwise format datetimes or
dump store contents on every reminder:

    self._lazy.debug(lambda: f"next reminder {fire_at:%H:%M}")
"""

from __future__ import annotations

import logging
from typing import Any


def _resolve(value: Any) -> Any:
    return value() if callable(value) else value


class LazyLoggerAdapter(logging.LoggerAdapter):
    """``LoggerAdapter`` that calls callable messages and args at emit time.

    ``debug()``, ``info()`` and the other level methods all go through
    ``log()``, so overriding it covers them.
    """

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(level):
            super().log(level, _resolve(msg), *map(_resolve, args), **kwargs)


def get_lazy_logger(name: str, **context: Any) -> LazyLoggerAdapter:
    """Lazy logger for ``name`` with optional context on every record."""
    return LazyLoggerAdapter(logging.getLogger(name), context)
