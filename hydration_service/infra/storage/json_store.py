"""JSON file backed settings store."""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

from hydration_service.core.exceptions import StorageException
from hydration_service.infra.storage.base import StoreValue

logger = logging.getLogger(__name__)


class JsonFileSettingsStore:
    """Thread-safe settings store persisted to a single JSON object on disk.

    Nothing is cached: every read goes to the file, and every write re-reads
    it under the lock before merging, so values written by another process
    (a one-shot command next to ``hydration run``) are kept. Writes replace
    the file atomically via a temp file and ``os.replace``, so a crash
    mid-write never leaves a truncated state file behind. A missing file
    behaves like an empty store; a file that is not a JSON object raises
    StorageException.

    Example:
        store = JsonFileSettingsStore(Path("~/.hydration-service/state.json").expanduser())
        store.set("reminderInterval", 45)
        store.get("reminderInterval")  # 45
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._read().get(key, default)

    def set(self, key: str, value: StoreValue) -> None:
        with self._lock:
            updated = {**self._read(), key: value}
            self._write(updated)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key not in data:
                return
            updated = {k: v for k, v in data.items() if k != key}
            self._write(updated)

    def as_dict(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._read())

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            logger.debug("State file %s not found, starting empty", self._path)
            return {}

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageException(
                detail=f"Could not read state file {self._path}: {e}",
                extra={"path": str(self._path)},
            ) from e

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageException(
                detail=f"State file {self._path} is not valid JSON: {e}",
                extra={"path": str(self._path)},
            ) from e

        if not isinstance(data, dict):
            raise StorageException(
                detail=f"State file {self._path} must contain a JSON object",
                extra={"path": str(self._path), "found": type(data).__name__},
            )
        return data

    def _write(self, data: dict[str, Any]) -> None:
        tmp_file = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_file, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_file, self._path)
        except (OSError, TypeError, ValueError) as e:
            tmp_file.unlink(missing_ok=True)
            raise StorageException(
                detail=f"Could not write state file {self._path}: {e}",
                extra={"path": str(self._path)},
            ) from e

    def __repr__(self) -> str:
        return f"JsonFileSettingsStore(path={str(self._path)!r})"
