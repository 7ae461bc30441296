"""CLI utilities."""

from hydration_service.cli.utils.formatters import (
    error,
    fail,
    header,
    info,
    success,
    warning,
)

__all__ = [
    "error",
    "fail",
    "header",
    "info",
    "success",
    "warning",
]
