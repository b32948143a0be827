"""Limit and threshold constants for the tracker.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Input thresholds
# ============================================================================

# Pointer movement (in cells) needed to leave keyboard mode.
MOUSE_MOVEMENT_THRESHOLD: Final = 5

# ============================================================================
# Navigation limits
# ============================================================================

OFFERING_COLUMN_COUNT: Final = 2
GRID_COLUMN_COUNT_MIN: Final = 1
SEASON_SHORTCUT_COUNT: Final = 4

# ============================================================================
# Layout
# ============================================================================

# Cells per item card, used to derive the grid column count from its width.
ITEM_CARD_WIDTH: Final = 26

# ============================================================================
# Persistence and search limits
# ============================================================================

GRID_FOCUS_HISTORY_LIMIT: Final = 64
GRID_FOCUS_HISTORY_MIN: Final = 1
SEARCH_RESULT_LIMIT: Final = 12

__all__ = [
    "GRID_COLUMN_COUNT_MIN",
    "GRID_FOCUS_HISTORY_LIMIT",
    "GRID_FOCUS_HISTORY_MIN",
    "ITEM_CARD_WIDTH",
    "MOUSE_MOVEMENT_THRESHOLD",
    "OFFERING_COLUMN_COUNT",
    "SEARCH_RESULT_LIMIT",
    "SEASON_SHORTCUT_COUNT",
]
