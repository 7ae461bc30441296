"""YAML settings files with conf.d drop-ins.

Each settings domain reads ``<config dir>/<name>.yaml`` followed by
``<config dir>/<name>.d/*.yaml`` in file-name order, later files winning:

    conf/reminders.yaml             default_interval_minutes: 60
    conf/reminders.d/10-desk.yaml   default_interval_minutes: 45

The config dir is ``conf`` relative to the working directory unless the
domain's ``*_CONFIG_DIR`` variable points elsewhere. Missing files are
skipped, so running without any YAML is the normal case.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic_settings import YamlConfigSettingsSource

if TYPE_CHECKING:
    from pydantic_settings import BaseSettings

DEFAULT_CONFIG_DIR = "conf"


def yaml_files_for(name: str, config_dir: Path) -> list[Path]:
    """Existing YAML files for ``name`` in the order they are merged."""
    files = [config_dir / f"{name}.yaml"]
    dropins = config_dir / f"{name}.d"
    if dropins.is_dir():
        files += sorted(p for p in dropins.iterdir() if p.suffix in (".yaml", ".yml"))
    return [f for f in files if f.is_file()]


class ConfDYamlConfigSettingsSource(YamlConfigSettingsSource):
    """``YamlConfigSettingsSource`` over a base file plus its conf.d directory."""

    def __init__(self, settings_cls: type[BaseSettings], name: str, config_dir: Path) -> None:
        self.yaml_files = yaml_files_for(name, config_dir)
        super().__init__(
            settings_cls=settings_cls,
            yaml_file=self.yaml_files or None,
            yaml_file_encoding="utf-8",
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(str, self.yaml_files))})"


def create_yaml_source(
    settings_cls: type[BaseSettings],
    name: str,
    config_dir_env: str,
) -> ConfDYamlConfigSettingsSource:
    """Build the YAML source for one settings domain.

    Args:
        settings_cls: Settings class being loaded.
        name: Base file name without extension ("app", "logging", "reminders").
        config_dir_env: Variable overriding the config dir, e.g. ``REMINDER_CONFIG_DIR``.
    """
    config_dir = Path(os.getenv(config_dir_env, DEFAULT_CONFIG_DIR))
    return ConfDYamlConfigSettingsSource(settings_cls, name, config_dir)
