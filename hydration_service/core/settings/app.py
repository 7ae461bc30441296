"""Application settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from .base import HydrationSettings

Environment = Literal["development", "staging", "production", "test"]


def _default_state_file() -> Path:
    return Path.home() / ".hydration-service" / "state.json"


class AppSettings(HydrationSettings):
    """Application-wide settings.

    Environment variables use APP_ prefix.
    Example: APP_STATE_FILE=/tmp/hydration.json, APP_ENVIRONMENT=test
    """

    yaml_name = "app"

    service_name: str = Field(
        default="hydration-service",
        min_length=1,
        max_length=100,
        pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$",
        description="Service name for logging (lowercase, hyphens allowed)",
    )
    environment: Environment = Field(
        default="development", description="Environment: development|staging|production|test",
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    state_file: Path = Field(
        default_factory=_default_state_file,
        description="JSON file backing the key-value settings store",
    )

    model_config = SettingsConfigDict(env_prefix="APP_")

    @field_validator("state_file", mode="after")
    @classmethod
    def expand_state_file(cls, v: Path) -> Path:
        """Expand ``~`` so paths from YAML/env behave like shell paths."""
        return v.expanduser()
