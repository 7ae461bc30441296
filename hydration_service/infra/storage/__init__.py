"""Flat key-value settings store.

Replaces the platform preferences store the reminder app persisted to:
a handful of JSON scalar values addressed by string keys.
"""

from hydration_service.infra.storage.base import SettingsStore
from hydration_service.infra.storage.json_store import JsonFileSettingsStore
from hydration_service.infra.storage.memory import InMemorySettingsStore

__all__ = [
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
    "SettingsStore",
]
