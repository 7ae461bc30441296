"""Common base for the app, logging and reminder settings."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_yaml_source


class HydrationSettings(BaseSettings):
    """Frozen settings read from init kwargs, YAML, the environment, .env and secrets.

    Subclasses set ``env_prefix`` in ``model_config`` and name their YAML
    file with ``yaml_name``; ``<PREFIX>CONFIG_DIR`` moves the YAML directory.
    """

    yaml_name: ClassVar[str]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        config_dir_env = f"{cls.model_config['env_prefix']}CONFIG_DIR"
        return (
            init_settings,
            create_yaml_source(settings_cls, cls.yaml_name, config_dir_env),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
