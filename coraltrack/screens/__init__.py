"""Coral Tracker TUI Screens.

Page Structure:
    - overview_screen  - Dashboard, save slots and temple summary
    - category_screen  - Item grid with season filters for one category
    - altar_screen     - Offerings of one lake temple altar
    - help_screen      - Keyboard shortcuts modal
    - adapters         - Textual implementations of the keyboard capabilities

Keys are routed by coraltrack.keyboard.dispatch.KeyboardDispatchHub; the
screens only render state and register their navigators with it.
"""

from __future__ import annotations

from coraltrack.screens.adapters import ChildScroller, ScreenStackModalObserver, WidgetFocusHandle
from coraltrack.screens.altar_screen import AltarScreen
from coraltrack.screens.base_screen import BaseScreen
from coraltrack.screens.category_screen import CategoryScreen
from coraltrack.screens.help_screen import ShortcutsHelpScreen
from coraltrack.screens.overview_screen import OverviewScreen

__all__ = [
    "AltarScreen",
    "BaseScreen",
    "CategoryScreen",
    "ChildScroller",
    "OverviewScreen",
    "ScreenStackModalObserver",
    "ShortcutsHelpScreen",
    "WidgetFocusHandle",
]
