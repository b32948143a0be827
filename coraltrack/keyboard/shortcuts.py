"""Centralized keyboard shortcut definitions.

All shortcuts are defined here so the dispatch hub and the help panel
read from the same table.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from coraltrack.constants.enums import ShortcutCategory
from coraltrack.keyboard.keys import KeyPress


@dataclass(frozen=True)
class ShortcutDefinition:
    """A key chord with its help text."""

    key: str
    description: str
    category: ShortcutCategory
    modifiers: frozenset[str] = field(default_factory=frozenset)


def _shortcut(
    key: str,
    description: str,
    category: ShortcutCategory,
    *modifiers: str,
) -> ShortcutDefinition:
    return ShortcutDefinition(key, description, category, frozenset(modifiers))


SHORTCUTS: dict[str, ShortcutDefinition] = {
    # General
    "HELP": _shortcut("?", "Toggle keyboard shortcuts", ShortcutCategory.GENERAL, "shift"),
    "ESCAPE": _shortcut(
        "escape", "Close modal / Clear search / Unfocus", ShortcutCategory.GENERAL
    ),
    # Navigation
    "GO_HOME": _shortcut("H", "Go to Dashboard", ShortcutCategory.NAVIGATION, "shift"),
    "GO_SAVES": _shortcut("S", "Go to Save Slots", ShortcutCategory.NAVIGATION, "shift"),
    "GO_TEMPLE": _shortcut("T", "Go to Temple", ShortcutCategory.NAVIGATION, "shift"),
    "FOCUS_SEARCH": _shortcut("/", "Focus search", ShortcutCategory.NAVIGATION),
    "TOGGLE_SIDEBAR": _shortcut("[", "Toggle sidebar", ShortcutCategory.NAVIGATION),
    # Grid navigation
    "GRID_UP": _shortcut("up", "Move up", ShortcutCategory.GRID),
    "GRID_DOWN": _shortcut("down", "Move down", ShortcutCategory.GRID),
    "GRID_LEFT": _shortcut("left", "Move left", ShortcutCategory.GRID),
    "GRID_RIGHT": _shortcut("right", "Move right", ShortcutCategory.GRID),
    "GRID_TOGGLE": _shortcut("enter", "Toggle completion", ShortcutCategory.GRID),
    "GRID_DETAILS": _shortcut("i", "Open details", ShortcutCategory.GRID),
    "GRID_FIRST": _shortcut("home", "First item", ShortcutCategory.GRID),
    "GRID_LAST": _shortcut("end", "Last item", ShortcutCategory.GRID),
    "GRID_HEARTS_UP": _shortcut("+", "Increase hearts (NPCs)", ShortcutCategory.GRID),
    "GRID_HEARTS_DOWN": _shortcut("-", "Decrease hearts (NPCs)", ShortcutCategory.GRID),
    "GRID_TOGGLE_OFFERED": _shortcut("o", "Toggle offered (temple)", ShortcutCategory.GRID),
    # Filters
    "FOCUS_FILTERS": _shortcut("f", "Focus / cycle filters", ShortcutCategory.FILTERS),
    "CLEAR_FILTERS": _shortcut("c", "Clear all filters", ShortcutCategory.FILTERS),
    "SEASON_SPRING": _shortcut("1", "Toggle Spring", ShortcutCategory.FILTERS, "alt"),
    "SEASON_SUMMER": _shortcut("2", "Toggle Summer", ShortcutCategory.FILTERS, "alt"),
    "SEASON_FALL": _shortcut("3", "Toggle Fall", ShortcutCategory.FILTERS, "alt"),
    "SEASON_WINTER": _shortcut("4", "Toggle Winter", ShortcutCategory.FILTERS, "alt"),
}

_KEY_LABELS: dict[str, str] = {
    "up": "↑",
    "down": "↓",
    "left": "←",
    "right": "→",
    "escape": "Esc",
    "space": "Space",
    "enter": "Enter",
    "home": "Home",
    "end": "End",
    "tab": "Tab",
}

_MODIFIER_LABELS: tuple[tuple[str, str], ...] = (
    ("ctrl", "Ctrl"),
    ("alt", "Alt"),
    ("shift", "Shift"),
    ("meta", "Cmd"),
)


def matches_shortcut(press: KeyPress, shortcut: ShortcutDefinition) -> bool:
    """Check if a key press matches a shortcut definition.

    Modifiers must match exactly. Single-character keys compare
    case-insensitively.
    """
    if press.shift != ("shift" in shortcut.modifiers):
        return False
    if press.alt != ("alt" in shortcut.modifiers):
        return False
    if press.ctrl != ("ctrl" in shortcut.modifiers):
        return False
    if press.meta != ("meta" in shortcut.modifiers):
        return False

    press_key = press.key.upper() if len(press.key) == 1 else press.key
    shortcut_key = shortcut.key.upper() if len(shortcut.key) == 1 else shortcut.key
    return press_key == shortcut_key


def format_shortcut(shortcut: ShortcutDefinition) -> str:
    """Format a shortcut for display, e.g. ``Shift+H`` or ``Alt+1``."""
    parts = [label for name, label in _MODIFIER_LABELS if name in shortcut.modifiers]
    parts.append(_KEY_LABELS.get(shortcut.key, shortcut.key))
    return "+".join(parts)


def get_shortcuts_by_category() -> dict[ShortcutCategory, list[ShortcutDefinition]]:
    """Group shortcuts by category, preserving table order."""
    grouped: dict[ShortcutCategory, list[ShortcutDefinition]] = {
        ShortcutCategory.NAVIGATION: [],
        ShortcutCategory.GRID: [],
        ShortcutCategory.FILTERS: [],
        ShortcutCategory.GENERAL: [],
    }
    for shortcut in SHORTCUTS.values():
        grouped[shortcut.category].append(shortcut)
    return grouped


__all__ = [
    "SHORTCUTS",
    "ShortcutDefinition",
    "format_shortcut",
    "get_shortcuts_by_category",
    "matches_shortcut",
]
