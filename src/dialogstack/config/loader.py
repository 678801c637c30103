"""Settings loader for YAML configuration files."""

from pathlib import Path
from typing import Any

import pydantic
import yaml

from dialogstack.config.models import DialogSettings
from dialogstack.core.errors import ConfigError


class SettingsLoader:
    """Load DialogSettings from YAML files."""

    @staticmethod
    def load(path: Path | str) -> DialogSettings:
        """Load settings from a YAML file or a config directory.

        A directory is read from ``dialogstack.yaml`` or ``config.yaml``; if
        neither exists every ``*.yaml`` file in it is merged in name order.
        Settings may sit at the top level or under a ``settings`` key.

        Raises:
            ConfigError: If no file is found or the content is invalid.
        """
        config_path = Path(path)
        data: dict[str, Any] = {}

        if config_path.is_dir():
            yaml_file = config_path / "dialogstack.yaml"
            if not yaml_file.exists():
                yaml_file = config_path / "config.yaml"

            if yaml_file.exists():
                data = SettingsLoader._read(yaml_file)
            else:
                files = sorted(config_path.glob("*.yaml"))
                if not files:
                    raise ConfigError(f"No config files found in {config_path}")
                for fpath in files:
                    data.update(SettingsLoader._read(fpath))
        else:
            if not config_path.exists():
                raise ConfigError(f"Config file not found: {config_path}")
            data = SettingsLoader._read(config_path)

        if isinstance(data.get("settings"), dict):
            data = data["settings"]

        try:
            return DialogSettings.model_validate(data)
        except pydantic.ValidationError as e:
            raise ConfigError(f"Invalid settings in {config_path}", errors=e.error_count()) from e

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                chunk = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}") from e
        if not isinstance(chunk, dict):
            raise ConfigError(f"Expected a mapping in {path}")
        return chunk
