"""Keyboard handling for the Coral Tracker TUI.

- keys: toolkit-neutral KeyPress model and vim key mapping
- shortcuts: shortcut table, matching and display formatting
- capabilities: focus, modal and scroll contracts the navigators use
- dispatch: KeyboardDispatchHub, the single entry point for keystrokes
  (import from coraltrack.keyboard.dispatch; it depends on the navigators)
- interaction_mode: keyboard/mouse interaction mode detection
- focus_trap: Tab confinement for modal dialogs
- app: Textual BINDINGS for app-level keys
"""

from coraltrack.keyboard.app import APP_BINDINGS
from coraltrack.keyboard.capabilities import (
    DirectFocusHandle,
    FocusableHandle,
    KeyboardHost,
    ModalPresenceObserver,
    NoModalObserver,
    Scroller,
)
from coraltrack.keyboard.focus_trap import FocusTrap
from coraltrack.keyboard.interaction_mode import InteractionModeDetector
from coraltrack.keyboard.keys import KeyPress, normalize_vim_key
from coraltrack.keyboard.shortcuts import (
    SHORTCUTS,
    ShortcutDefinition,
    format_shortcut,
    get_shortcuts_by_category,
    matches_shortcut,
)

__all__ = [
    "APP_BINDINGS",
    "SHORTCUTS",
    "DirectFocusHandle",
    "FocusTrap",
    "FocusableHandle",
    "InteractionModeDetector",
    "KeyPress",
    "KeyboardHost",
    "ModalPresenceObserver",
    "NoModalObserver",
    "Scroller",
    "ShortcutDefinition",
    "format_shortcut",
    "get_shortcuts_by_category",
    "matches_shortcut",
    "normalize_vim_key",
]
