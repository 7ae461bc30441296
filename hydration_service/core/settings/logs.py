"""Logging settings for the hydration CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from .base import HydrationSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _default_log_file() -> Path:
    return Path.home() / ".hydration-service" / "hydration.log"


class LoggingSettings(HydrationSettings):
    """Where reminder and intake events are logged.

    Environment variables use LOG_ prefix.
    Example: LOG_FILE_ENABLED=true, LOG_JSON_LOGS=true

    Commands print their own results, so the console only shows warnings
    by default. ``hydration run`` is long-lived; enable the file log to keep
    a record of delivered reminders.
    """

    yaml_name = "logging"

    level: LogLevel = Field(default="INFO", description="Root logger level")
    console_level: LogLevel = Field(
        default="WARNING", description="Minimum level echoed to stderr",
    )
    console_enabled: bool = Field(default=True, description="Log to stderr at all")
    json_logs: bool = Field(default=False, description="One JSON object per line instead of text")

    file_enabled: bool = Field(default=False, description="Also log to file_path")
    file_path: Path = Field(
        default_factory=_default_log_file,
        description="Log file, next to the state file by default",
    )
    file_max_bytes: int = Field(
        default=1_048_576, ge=1024, description="Rotate the log file past this size",
    )
    file_backup_count: int = Field(default=3, ge=0, le=20, description="Rotated files kept")

    include_context: bool = Field(
        default=True, description="Add the running command and other log context to records",
    )

    model_config = SettingsConfigDict(env_prefix="LOG_")

    @field_validator("level", "console_level", mode="before")
    @classmethod
    def _upper(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("file_path", mode="after")
    @classmethod
    def _expand_file_path(cls, v: Path) -> Path:
        return v.expanduser()

    def to_logging_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``configure_logging``; the file is dropped unless enabled."""
        return {
            "log_level": self.level,
            "console_level": self.console_level if self.console_enabled else None,
            "json_logs": self.json_logs,
            "file_path": self.file_path if self.file_enabled else None,
            "file_max_bytes": self.file_max_bytes,
            "file_backup_count": self.file_backup_count,
            "include_context": self.include_context,
        }
