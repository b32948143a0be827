"""All enum definitions for the tracker.

This module consolidates all enumerations used by the keyboard core and
the Textual shell.
"""

from enum import Enum

# =============================================================================
# Input Enums
# =============================================================================

class InteractionMode(Enum):
    """Current input modality used to decide whether focus rings are painted."""

    MOUSE = "mouse"
    KEYBOARD = "keyboard"


class NavigationOwner(Enum):
    """Which navigator currently consumes keystrokes."""

    NONE = "none"
    GRID = "grid"
    OFFERING = "offering"
    FILTERS = "filters"


class NavigationLevel(Enum):
    """Altar navigation level."""

    OFFERINGS = 1  # Offering headers
    ITEMS = 2  # Items inside an expanded offering


# =============================================================================
# Grid Action Enums
# =============================================================================

class GridActionType(Enum):
    """Grid action kinds dispatched by the keyboard hub."""

    MOVE = "move"
    JUMP = "jump"
    SELECT = "select"
    DETAILS = "details"
    HEARTS = "hearts"
    TOGGLE_OFFERED = "toggle_offered"


class MoveDirection(Enum):
    """Directions for grid moves."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class JumpPosition(Enum):
    """Targets for grid jumps."""

    FIRST = "first"
    LAST = "last"


# =============================================================================
# Shortcut Enums
# =============================================================================

class ShortcutCategory(Enum):
    """Grouping used by the shortcuts help panel."""

    NAVIGATION = "navigation"
    GRID = "grid"
    FILTERS = "filters"
    GENERAL = "general"


class Season(Enum):
    """In-game seasons, in filter shortcut order."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class SearchItemType(Enum):
    """Kinds of entries in the global search index."""

    ITEM = "item"
    NPC = "npc"
    ALTAR = "altar"
    OFFERING = "offering"


__all__ = [
    # Input
    "InteractionMode",
    "NavigationLevel",
    "NavigationOwner",
    # Grid actions
    "GridActionType",
    "JumpPosition",
    "MoveDirection",
    # Shortcuts
    "Season",
    "SearchItemType",
    "ShortcutCategory",
]
