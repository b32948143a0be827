"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from coraltrack.constants.defaults import CONFIG_PATH_DEFAULT, CONFIG_PATH_ENV
from coraltrack.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and save AppSettings.

    The file location is taken from ``$CORALTRACK_CONFIG`` when set,
    otherwise ``~/.config/coraltrack/settings.yaml``.
    """

    @staticmethod
    def config_path() -> Path:
        """Return the resolved settings file path."""
        raw_path = os.environ.get(CONFIG_PATH_ENV) or CONFIG_PATH_DEFAULT
        return Path(raw_path).expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings from disk.

        Args:
            path: Optional explicit settings file.

        Returns:
            Parsed settings, or defaults when the file does not exist.

        Raises:
            ConfigLoadError: If the file is unreadable, not valid YAML, or
                fails validation.
        """
        settings_path = path or cls.config_path()
        if not settings_path.exists():
            logger.debug("No settings file at %s, using defaults", settings_path)
            return AppSettings()

        try:
            with settings_path.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as err:
            raise ConfigLoadError(f"Cannot read settings from {settings_path}: {err}") from err

        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Settings file {settings_path} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as err:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {err}") from err

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> None:
        """Write settings to disk.

        The app only reads settings; this is for scripts that write a
        settings file.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        settings_path = path or cls.config_path()
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            with settings_path.open("w", encoding="utf-8") as handle:
                yaml.dump(
                    settings.model_dump(),
                    handle,
                    default_flow_style=False,
                    sort_keys=False,
                )
        except OSError as err:
            raise ConfigSaveError(f"Cannot write settings to {settings_path}: {err}") from err


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
