"""Settings and UI state models."""

from coraltrack.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    StateLoadError,
    StateSaveError,
)
from coraltrack.models.state.config_manager import ConfigManager
from coraltrack.models.state.ui_state import UIState, UIStateManager

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "StateLoadError",
    "StateSaveError",
    "UIState",
    "UIStateManager",
]
