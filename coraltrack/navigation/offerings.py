"""Two-level keyboard navigation for altar offerings.

Level 1 moves between offering headers. Enter/Space on an offering with
items expands it and enters Level 2, which moves between the offering's
items laid out in two columns. Leaving the top row (Up), the bottom
(Down) or pressing Escape collapses the offering and returns to Level 1;
leaving through the bottom also advances to the next offering.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, model_validator

from coraltrack.constants.enums import NavigationLevel
from coraltrack.constants.limits import OFFERING_COLUMN_COUNT
from coraltrack.keyboard.capabilities import ModalPresenceObserver, NoModalObserver
from coraltrack.keyboard.keys import KeyPress
from coraltrack.models.core.tracker_items import Offering

if TYPE_CHECKING:
    from coraltrack.keyboard.dispatch import KeyboardDispatchHub

logger = logging.getLogger(__name__)

_UP_KEYS = ("up", "k")
_DOWN_KEYS = ("down", "j")
_LEFT_KEYS = ("left", "h")
_RIGHT_KEYS = ("right", "l")
_ENTER_KEYS = ("enter", "space")
_TOGGLE_KEYS = ("o", "O")


class OfferingNavState(BaseModel):
    """Snapshot of the altar navigation state."""

    model_config = ConfigDict(frozen=True)

    level: NavigationLevel = NavigationLevel.OFFERINGS
    focused_offering_index: int = 0
    focused_item_index: int = -1
    expanded_offerings: frozenset[str] = frozenset()

    @model_validator(mode="after")
    def _check_level(self) -> OfferingNavState:
        if self.level is NavigationLevel.OFFERINGS and self.focused_item_index != -1:
            raise ValueError("focused_item_index must be -1 at the offering level")
        if self.level is NavigationLevel.ITEMS and self.focused_item_index < 0:
            raise ValueError("focused_item_index must be >= 0 at the item level")
        return self


class OfferingNavigator:
    """State machine for altar offering navigation."""

    def __init__(
        self,
        offerings: Sequence[Offering],
        category_slug: str,
        *,
        on_toggle_offered: Callable[[int, bool], None] | None = None,
        modal_observer: ModalPresenceObserver | None = None,
        enabled: bool = True,
    ) -> None:
        """Initialize the navigator.

        Args:
            offerings: Offerings in display order.
            category_slug: Identity of the altar; a change resets the state.
            on_toggle_offered: Called with (requirement id, new offered
                state) when an item is toggled.
            modal_observer: Suppresses all keys while a modal is open.
            enabled: Whether keys are handled at all.
        """
        self._offerings = list(offerings)
        self._category_slug = category_slug
        self.on_toggle_offered = on_toggle_offered
        self._modal_observer = modal_observer or NoModalObserver()
        self.enabled = enabled
        self._state = OfferingNavState()
        self._hub: KeyboardDispatchHub | None = None

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> OfferingNavState:
        return self._state

    @property
    def level(self) -> NavigationLevel:
        return self._state.level

    @property
    def focused_offering_index(self) -> int:
        return self._state.focused_offering_index

    @property
    def focused_item_index(self) -> int:
        return self._state.focused_item_index

    @property
    def expanded_offerings(self) -> frozenset[str]:
        return self._state.expanded_offerings

    @property
    def offerings(self) -> list[Offering]:
        return list(self._offerings)

    @property
    def category_slug(self) -> str:
        return self._category_slug

    @property
    def show_focus_indicator(self) -> bool:
        if not self.enabled:
            return False
        return self._hub is None or not self._hub.is_filter_mode_active

    def _update(self, **changes: object) -> None:
        values = self._state.model_dump()
        values.update(changes)
        self._state = OfferingNavState(**values)

    def reset(self) -> None:
        self._state = OfferingNavState()

    def set_offerings(self, offerings: Sequence[Offering], category_slug: str) -> None:
        """Replace the offerings; a new category identity resets all state."""
        self._offerings = list(offerings)
        if category_slug != self._category_slug:
            self._category_slug = category_slug
            self.reset()
            logger.debug("Offering navigation reset for %s", category_slug)
            return

        # Same altar re-rendered with fewer offerings or items.
        if not self._offerings:
            self.reset()
            return
        last_offering = len(self._offerings) - 1
        if self._state.focused_offering_index > last_offering:
            self._update(
                level=NavigationLevel.OFFERINGS,
                focused_offering_index=last_offering,
                focused_item_index=-1,
            )
        elif self._state.level is NavigationLevel.ITEMS:
            items = self._offerings[self._state.focused_offering_index].items
            if not items:
                self._return_to_offerings()
            elif self._state.focused_item_index >= len(items):
                self._update(focused_item_index=len(items) - 1)

    # =========================================================================
    # Expansion helpers
    # =========================================================================

    def expand_offering(self, slug: str) -> None:
        self._update(expanded_offerings=self._state.expanded_offerings | {slug})

    def collapse_offering(self, slug: str) -> None:
        self._update(expanded_offerings=self._state.expanded_offerings - {slug})
        current = self._current_offering()
        if (
            self._state.level is NavigationLevel.ITEMS
            and current is not None
            and current.slug == slug
        ):
            self._update(level=NavigationLevel.OFFERINGS, focused_item_index=-1)

    def toggle_offering(self, slug: str) -> None:
        if slug in self._state.expanded_offerings:
            self.collapse_offering(slug)
        else:
            self.expand_offering(slug)

    def _current_offering(self) -> Offering | None:
        index = self._state.focused_offering_index
        if 0 <= index < len(self._offerings):
            return self._offerings[index]
        return None

    def _return_to_offerings(self, *, advance: bool = False) -> None:
        offering = self._current_offering()
        expanded = self._state.expanded_offerings
        if offering is not None:
            expanded = expanded - {offering.slug}
        offering_index = self._state.focused_offering_index
        if advance:
            offering_index = min(len(self._offerings) - 1, offering_index + 1)
        self._update(
            level=NavigationLevel.OFFERINGS,
            focused_offering_index=offering_index,
            focused_item_index=-1,
            expanded_offerings=expanded,
        )

    # =========================================================================
    # Keys
    # =========================================================================

    def handle_key(self, press: KeyPress) -> bool:
        """Apply a key press.

        Returns:
            True if the key was consumed.
        """
        if not self.enabled or not self._offerings or press.in_text_input:
            return False
        if self._modal_observer.is_any_modal_open():
            return False
        if self._state.level is NavigationLevel.OFFERINGS:
            return self._handle_offering_level(press)
        return self._handle_item_level(press)

    def _handle_offering_level(self, press: KeyPress) -> bool:
        key = press.key
        if key in _UP_KEYS:
            self._update(focused_offering_index=max(0, self._state.focused_offering_index - 1))
            return True
        if key in _DOWN_KEYS:
            self._update(
                focused_offering_index=min(
                    len(self._offerings) - 1, self._state.focused_offering_index + 1
                )
            )
            return True
        if key in _ENTER_KEYS:
            offering = self._current_offering()
            if offering is not None and offering.items:
                self._update(
                    level=NavigationLevel.ITEMS,
                    focused_item_index=0,
                    expanded_offerings=self._state.expanded_offerings | {offering.slug},
                )
                logger.debug("Entered offering %s", offering.slug)
            return True
        return False

    def _handle_item_level(self, press: KeyPress) -> bool:
        offering = self._current_offering()
        if offering is None:
            return False

        key = press.key
        item_count = len(offering.items)
        columns = OFFERING_COLUMN_COUNT
        index = self._state.focused_item_index
        row, column = divmod(index, columns)

        if key in _UP_KEYS:
            if row == 0:
                self._return_to_offerings()
            else:
                self._update(focused_item_index=index - columns)
            return True
        if key in _DOWN_KEYS:
            target = index + columns
            if target >= item_count:
                self._return_to_offerings(advance=True)
            else:
                self._update(focused_item_index=target)
            return True
        if key in _LEFT_KEYS:
            if column > 0:
                self._update(focused_item_index=index - 1)
            return True
        if key in _RIGHT_KEYS:
            if column < columns - 1 and index + 1 < item_count:
                self._update(focused_item_index=index + 1)
            return True
        if key in _ENTER_KEYS or key in _TOGGLE_KEYS:
            if 0 <= index < item_count and self.on_toggle_offered is not None:
                item = offering.items[index]
                self.on_toggle_offered(item.id, not item.offered)
            return True
        if key == "escape":
            self._return_to_offerings()
            return True
        return False

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def mount(self, hub: KeyboardDispatchHub) -> None:
        self._hub = hub
        hub.register_offering_handler(self)

    def unmount(self) -> None:
        if self._hub is not None:
            self._hub.unregister_offering_handler(self)
        self._hub = None


__all__ = [
    "OfferingNavState",
    "OfferingNavigator",
]
