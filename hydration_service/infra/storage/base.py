"""Base protocol for settings stores."""

from __future__ import annotations

from typing import Any, Protocol

# Values are limited to what JSON can represent natively
StoreValue = str | int | float | bool | None


class SettingsStore(Protocol):
    """Protocol for key-value stores holding user settings and counters.

    Implementations keep values as JSON scalars. Callers (the feature
    repositories) convert dates and datetimes to ISO 8601 strings before
    storing them.
    """

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for ``key`` or ``default`` when absent."""
        ...

    def set(self, key: str, value: StoreValue) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""
        ...

    def as_dict(self) -> dict[str, Any]:
        """Return a snapshot copy of all stored values."""
        ...
