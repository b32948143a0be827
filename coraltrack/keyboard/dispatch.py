"""Global keyboard dispatch.

KeyboardDispatchHub is the single entry point for every keystroke. Per
key it applies, in priority order:

1. Escape: close the help panel, else blur a focused input, else leave
   filter mode, else collapse an expanded offering, else clear search.
2. ``?`` (or Shift+/): toggle the help panel. While it is open nothing
   below runs.
3. Global navigation chords (home, save slots, temple, search, sidebar).
4. Digits 1-9 and 0: jump to a category page.
5. Alt+1..4: toggle a season filter.
6. On grid pages: focus/cycle filters, clear filters.
7. The current navigation owner: filter toolbar keys, grid actions or
   offering keys.

Everything after step 2 is skipped while typing in a text input.

Page navigators register and unregister themselves; the hub keeps a
reference to the current one so the native listener never needs to be
re-subscribed. Exactly one owner (see NavigationOwner) interprets
navigation keys at a time.
"""

from __future__ import annotations

import logging
from typing import Protocol

from coraltrack.constants.enums import (
    JumpPosition,
    MoveDirection,
    NavigationLevel,
    NavigationOwner,
    Season,
)
from coraltrack.constants.limits import SEASON_SHORTCUT_COUNT
from coraltrack.constants.values import ROUTE_HOME, ROUTE_SAVES, ROUTE_TEMPLE
from coraltrack.keyboard.capabilities import KeyboardHost, ModalPresenceObserver, NoModalObserver
from coraltrack.keyboard.interaction_mode import InteractionModeDetector
from coraltrack.keyboard.keys import KeyPress, normalize_vim_key
from coraltrack.keyboard.navigation import category_for_digit, category_route, is_grid_page
from coraltrack.keyboard.shortcuts import SHORTCUTS, matches_shortcut
from coraltrack.models.state.ui_state import UIState
from coraltrack.navigation.filters import RovingFilterNavigator
from coraltrack.navigation.grid import GridAction, GridActionHandler

logger = logging.getLogger(__name__)

_SEASONS = tuple(Season)[:SEASON_SHORTCUT_COUNT]

_GRID_KEY_ACTIONS: dict[str, GridAction] = {
    "up": GridAction.move(MoveDirection.UP),
    "down": GridAction.move(MoveDirection.DOWN),
    "left": GridAction.move(MoveDirection.LEFT),
    "right": GridAction.move(MoveDirection.RIGHT),
    "home": GridAction.jump(JumpPosition.FIRST),
    "end": GridAction.jump(JumpPosition.LAST),
    "enter": GridAction.select(),
    "space": GridAction.select(),
    "i": GridAction.details(),
    "I": GridAction.details(),
    "+": GridAction.hearts(1),
    "=": GridAction.hearts(1),
    "-": GridAction.hearts(-1),
    "_": GridAction.hearts(-1),
    "o": GridAction.toggle_offered(),
    "O": GridAction.toggle_offered(),
}


class OfferingKeyHandler(Protocol):
    """What the hub needs from an offering navigator."""

    @property
    def level(self) -> NavigationLevel: ...

    def handle_key(self, press: KeyPress) -> bool: ...


class KeyboardDispatchHub:
    """Decide which component receives each keystroke."""

    def __init__(
        self,
        host: KeyboardHost,
        store: UIState,
        *,
        modal_observer: ModalPresenceObserver | None = None,
        interaction_mode: InteractionModeDetector | None = None,
        location: str = ROUTE_HOME,
    ) -> None:
        """Initialize the hub.

        Args:
            host: Performs navigation and widget side effects.
            store: UI state store for filters, sidebar and help panel.
            modal_observer: Suppresses page navigation while a modal is open.
            interaction_mode: Receives every key press for mode detection.
            location: Current route path.
        """
        self._host = host
        self._store = store
        self._modal_observer = modal_observer or NoModalObserver()
        self._interaction_mode = interaction_mode
        self._location = location
        self._grid_handler: GridActionHandler | None = None
        self._offering_handler: OfferingKeyHandler | None = None
        self._filter_handler: RovingFilterNavigator | None = None
        self._owner = NavigationOwner.NONE

    # =========================================================================
    # Location
    # =========================================================================

    @property
    def location(self) -> str:
        return self._location

    def set_location(self, path: str) -> None:
        self._location = path

    @property
    def is_grid_page(self) -> bool:
        return is_grid_page(self._location)

    # =========================================================================
    # Ownership
    # =========================================================================

    @property
    def owner(self) -> NavigationOwner:
        return self._owner

    @property
    def is_filter_mode_active(self) -> bool:
        return self._owner is NavigationOwner.FILTERS

    def _page_owner(self) -> NavigationOwner:
        if self._grid_handler is not None:
            return NavigationOwner.GRID
        if self._offering_handler is not None:
            return NavigationOwner.OFFERING
        return NavigationOwner.NONE

    def _set_owner(self, owner: NavigationOwner) -> None:
        if owner is not self._owner:
            logger.debug("Navigation owner %s -> %s", self._owner.value, owner.value)
            self._owner = owner

    def set_filter_mode_active(self, active: bool) -> None:
        """Hand keys to the filter toolbar, or back to the page navigator."""
        if active and self._filter_handler is not None:
            self._set_owner(NavigationOwner.FILTERS)
        elif not active and self._owner is NavigationOwner.FILTERS:
            self._set_owner(self._page_owner())

    # =========================================================================
    # Registration
    # =========================================================================

    def register_grid_handler(self, handler: GridActionHandler) -> None:
        if self._offering_handler is not None:
            logger.debug("Grid handler replaces registered offering handler")
            self._offering_handler = None
        self._grid_handler = handler
        if self._owner is not NavigationOwner.FILTERS:
            self._set_owner(NavigationOwner.GRID)

    def unregister_grid_handler(self, handler: GridActionHandler | None = None) -> None:
        """Drop the grid handler; a stale ``handler`` from a previous page is ignored."""
        if handler is not None and self._grid_handler != handler:
            return
        self._grid_handler = None
        if self._owner is not NavigationOwner.FILTERS:
            self._set_owner(self._page_owner())

    def register_offering_handler(self, handler: OfferingKeyHandler) -> None:
        if self._grid_handler is not None:
            logger.debug("Offering handler replaces registered grid handler")
            self._grid_handler = None
        self._offering_handler = handler
        if self._owner is not NavigationOwner.FILTERS:
            self._set_owner(NavigationOwner.OFFERING)

    def unregister_offering_handler(self, handler: OfferingKeyHandler | None = None) -> None:
        if handler is not None and self._offering_handler is not handler:
            return
        self._offering_handler = None
        if self._owner is not NavigationOwner.FILTERS:
            self._set_owner(self._page_owner())

    def register_filter_handler(self, handler: RovingFilterNavigator) -> None:
        """Make ``handler`` the filter toolbar; a replaced toolbar leaves filter mode."""
        previous = self._filter_handler
        if previous is not None:
            previous.remove_mode_listener(self.set_filter_mode_active)
            if previous is not handler:
                previous.exit()
        self._filter_handler = handler
        handler.add_mode_listener(self.set_filter_mode_active)
        if handler.is_active:
            self._set_owner(NavigationOwner.FILTERS)
        elif self._owner is NavigationOwner.FILTERS:
            self._set_owner(self._page_owner())

    def unregister_filter_handler(self, handler: RovingFilterNavigator | None = None) -> None:
        if handler is not None and self._filter_handler is not handler:
            return
        if self._filter_handler is not None:
            self._filter_handler.remove_mode_listener(self.set_filter_mode_active)
        self._filter_handler = None
        if self._owner is NavigationOwner.FILTERS:
            self._set_owner(self._page_owner())

    def dispatch_grid_action(self, action: GridAction) -> bool:
        """Forward an action to the grid; dropped when none is registered."""
        if self._grid_handler is None:
            logger.debug("No grid handler registered, dropping %s", action.type.value)
            return False
        return self._grid_handler(action)

    # =========================================================================
    # Key handling
    # =========================================================================

    def handle_key(self, press: KeyPress) -> bool:
        """Route one key press.

        Returns:
            True if the key was consumed and default handling should stop.
        """
        if self._interaction_mode is not None:
            self._interaction_mode.on_key(press)

        if press.key == "escape":
            return self._handle_escape(press)

        if press.key == "?" or (press.shift and press.key == "/"):
            self.set_help_open(not self._store.shortcuts_panel_open)
            return True

        if press.in_text_input or self._store.shortcuts_panel_open:
            return False

        return (
            self._handle_global_shortcut(press)
            or self._handle_category_jump(press)
            or self._handle_season_toggle(press)
            or self._handle_filter_shortcut(press)
            or self._handle_navigation(press)
        )

    def set_help_open(self, open_: bool) -> None:
        self._store.shortcuts_panel_open = open_
        self._host.set_help_visible(open_)

    def _handle_escape(self, press: KeyPress) -> bool:
        if self._store.shortcuts_panel_open:
            self.set_help_open(False)
            return True
        if press.in_text_input:
            self._host.blur_input()
            return True
        if self._owner is NavigationOwner.FILTERS and self._filter_handler is not None:
            self._filter_handler.exit()
            return True
        if (
            self._owner is NavigationOwner.OFFERING
            and self._offering_handler is not None
            and self._offering_handler.level is NavigationLevel.ITEMS
            and not self._modal_observer.is_any_modal_open()
            and self._offering_handler.handle_key(press)
        ):
            return True
        self._store.search_query = ""
        self._host.clear_search()
        return True

    def _handle_global_shortcut(self, press: KeyPress) -> bool:
        if matches_shortcut(press, SHORTCUTS["GO_HOME"]):
            self._host.navigate(ROUTE_HOME)
        elif matches_shortcut(press, SHORTCUTS["GO_SAVES"]):
            self._host.navigate(ROUTE_SAVES)
        elif matches_shortcut(press, SHORTCUTS["GO_TEMPLE"]):
            self._host.navigate(ROUTE_TEMPLE)
        elif matches_shortcut(press, SHORTCUTS["FOCUS_SEARCH"]):
            self._host.focus_search()
        elif matches_shortcut(press, SHORTCUTS["TOGGLE_SIDEBAR"]):
            self._store.toggle_sidebar()
        else:
            return False
        return True

    def _handle_category_jump(self, press: KeyPress) -> bool:
        digit = press.digit
        if digit is None or press.has_modifiers:
            return False
        slug = category_for_digit(digit)
        if slug is None:
            return False
        self._host.navigate(category_route(slug))
        return True

    def _handle_season_toggle(self, press: KeyPress) -> bool:
        digit = press.digit
        if digit is None or not press.alt or press.ctrl or press.meta or press.shift:
            return False
        if not 1 <= digit <= len(_SEASONS):
            return False
        self._store.toggle_season(_SEASONS[digit - 1])
        return True

    def _handle_filter_shortcut(self, press: KeyPress) -> bool:
        if not self.is_grid_page:
            return False
        if matches_shortcut(press, SHORTCUTS["FOCUS_FILTERS"]):
            handler = self._filter_handler
            if handler is not None:
                if handler.is_active:
                    handler.focus_next()
                else:
                    handler.activate()
            return True
        if matches_shortcut(press, SHORTCUTS["CLEAR_FILTERS"]):
            self._store.clear_all_filters()
            self._host.clear_search()
            return True
        return False

    def _handle_navigation(self, press: KeyPress) -> bool:
        if self._owner is NavigationOwner.FILTERS:
            handler = self._filter_handler
            return handler is not None and handler.handle_toolbar_key(press)
        if self._modal_observer.is_any_modal_open():
            return False
        if self._owner is NavigationOwner.GRID:
            action = _GRID_KEY_ACTIONS.get(normalize_vim_key(press.key))
            if action is None:
                return False
            return self.dispatch_grid_action(action)
        if self._owner is NavigationOwner.OFFERING and self._offering_handler is not None:
            return self._offering_handler.handle_key(press)
        return False


__all__ = [
    "KeyboardDispatchHub",
    "OfferingKeyHandler",
]
