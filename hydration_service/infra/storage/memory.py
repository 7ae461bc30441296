"""In-process settings store."""

from __future__ import annotations

import threading
from typing import Any

from hydration_service.infra.storage.base import StoreValue


class InMemorySettingsStore:
    """Settings store that lives only as long as the process.

    Used by tests and by callers that do not want anything written to disk.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: str, value: StoreValue) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def as_dict(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._data)

    def __repr__(self) -> str:
        return f"InMemorySettingsStore(keys={sorted(self._data)})"
