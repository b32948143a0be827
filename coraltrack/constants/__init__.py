"""Constants module for Coral Tracker.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (routes, categories, altar data)
- timeouts.py: Focus settle delays (seconds)
- limits.py: Limit values (thresholds, caps)
- defaults.py: Default values for settings

Note: Keyboard shortcuts are defined in coraltrack.keyboard.shortcuts.
"""

from coraltrack.constants.defaults import (
    CONFIG_PATH_DEFAULT,
    CONFIG_PATH_ENV,
    LOG_LEVEL_DEFAULT,
    STATE_PATH_DEFAULT,
)
from coraltrack.constants.enums import (
    GridActionType,
    InteractionMode,
    JumpPosition,
    MoveDirection,
    NavigationLevel,
    NavigationOwner,
    Season,
    SearchItemType,
    ShortcutCategory,
)
from coraltrack.constants.limits import (
    GRID_FOCUS_HISTORY_LIMIT,
    MOUSE_MOVEMENT_THRESHOLD,
    OFFERING_COLUMN_COUNT,
    SEARCH_RESULT_LIMIT,
)
from coraltrack.constants.timeouts import (
    FILTER_BLUR_SETTLE_DELAY,
    GRID_INITIAL_SCROLL_DELAY,
)
from coraltrack.constants.values import (
    APP_TITLE,
    CATEGORY_ORDER,
    GRID_PAGE_PREFIXES,
)

__all__ = [
    # Application
    "APP_TITLE",
    "CATEGORY_ORDER",
    # Defaults
    "CONFIG_PATH_DEFAULT",
    "CONFIG_PATH_ENV",
    # Timeouts
    "FILTER_BLUR_SETTLE_DELAY",
    "GRID_FOCUS_HISTORY_LIMIT",
    "GRID_INITIAL_SCROLL_DELAY",
    "GRID_PAGE_PREFIXES",
    "LOG_LEVEL_DEFAULT",
    # Limits
    "MOUSE_MOVEMENT_THRESHOLD",
    "OFFERING_COLUMN_COUNT",
    "SEARCH_RESULT_LIMIT",
    "STATE_PATH_DEFAULT",
    # Enums
    "GridActionType",
    "InteractionMode",
    "JumpPosition",
    "MoveDirection",
    "NavigationLevel",
    "NavigationOwner",
    "Season",
    "SearchItemType",
    "ShortcutCategory",
]
