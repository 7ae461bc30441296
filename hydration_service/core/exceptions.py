"""Custom exception classes for the application."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class. The fields mirror
    RFC 7807 problem details so errors render the same way in logs, JSON
    output and the terminal; ``exit_code`` is what the CLI exits with.

    Attributes:
        detail: Human-readable error message.
        type: Error type identifier.
        title: Short, human-readable summary of the problem type.
        extra: Additional context-specific information about the error.
        exit_code: Process exit code used by the CLI.

    Example:
            raise AppException(
            detail="State file could not be written",
            type="storage-error",
            title="Storage Error",
            extra={"path": "/home/me/.hydration-service/state.json"},
        )
    """

    default_exit_code = 1
    default_title = "Error"

    def __init__(
        self,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        extra: dict[str, Any] | None = None,
        exit_code: int | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            extra: Additional context about the error.
            exit_code: Override for the CLI exit code.
        """
        self.detail = detail
        self.type = type
        self.title = title or self.default_title
        self.extra = extra or {}
        self.exit_code = self.default_exit_code if exit_code is None else exit_code
        super().__init__(detail)

    def to_dict(self) -> dict[str, Any]:
        """Return the problem details as a plain dict."""
        return {
            "type": self.type,
            "title": self.title,
            "detail": self.detail,
            **self.extra,
        }


class ValidationException(AppException):
    """Exception raised for validation errors.

    Example:
            raise ValidationException(
            detail="Intake amount must be positive",
            type="validation-error",
            extra={"field": "delta", "value": -5},
        )
    """

    default_exit_code = 2
    default_title = "Validation Error"

    def __init__(
        self,
        detail: str,
        type: str = "validation-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type=type, extra=extra)


class ConfigurationError(ValidationException):
    """Raised when reminder configuration cannot be used for scheduling.

    Covers non-positive intervals, do-not-disturb windows spanning the
    whole day and malformed wall-clock values.
    """

    default_title = "Configuration Error"

    def __init__(
        self,
        detail: str,
        type: str = "configuration-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type=type, extra=extra)


class SchedulingError(AppException):
    """Raised when no reminder slot outside the do-not-disturb window is reachable."""

    default_title = "Scheduling Error"

    def __init__(
        self,
        detail: str,
        type: str = "scheduling-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type=type, extra=extra)


class StorageException(AppException):
    """Raised when the settings store cannot be read or written.

    Example:
            raise StorageException(
            detail="State file is not valid JSON",
            extra={"path": str(path)},
        )
    """

    default_title = "Storage Error"

    def __init__(
        self,
        detail: str,
        type: str = "storage-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type=type, extra=extra)


class NotificationException(AppException):
    """Raised when the notification backend rejects a schedule request."""

    default_title = "Notification Error"

    def __init__(
        self,
        detail: str,
        type: str = "notification-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type=type, extra=extra)
