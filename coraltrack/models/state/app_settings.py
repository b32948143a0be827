"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from coraltrack.constants.defaults import LOG_LEVEL_DEFAULT, STATE_PATH_DEFAULT
from coraltrack.constants.limits import (
    GRID_FOCUS_HISTORY_LIMIT,
    GRID_FOCUS_HISTORY_MIN,
    MOUSE_MOVEMENT_THRESHOLD,
    SEARCH_RESULT_LIMIT,
)
from coraltrack.constants.timeouts import FILTER_BLUR_SETTLE_DELAY


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Paths
    state_path: str = STATE_PATH_DEFAULT
    data_path: str = ""

    # Input
    mouse_movement_threshold: int = Field(default=MOUSE_MOVEMENT_THRESHOLD, ge=0)
    filter_blur_settle_delay: float = Field(default=FILTER_BLUR_SETTLE_DELAY, ge=0.0)

    # Persistence
    grid_focus_history_limit: int = Field(
        default=GRID_FOCUS_HISTORY_LIMIT, ge=GRID_FOCUS_HISTORY_MIN
    )

    # Search
    search_result_limit: int = Field(default=SEARCH_RESULT_LIMIT, ge=1)

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""


class StateLoadError(ConfigError):
    """Raised when persisted UI state fails to load."""


class StateSaveError(ConfigError):
    """Raised when UI state fails to save."""
