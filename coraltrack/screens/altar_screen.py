"""Lake temple altar page: offerings with two-level keyboard navigation."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from coraltrack.constants.enums import NavigationLevel
from coraltrack.constants.values import ALTAR_SLUG_MAP
from coraltrack.navigation.offerings import OfferingNavigator
from coraltrack.screens.adapters import ScreenStackModalObserver
from coraltrack.screens.base_screen import BaseScreen
from coraltrack.widgets.offering_list import OfferingList

logger = logging.getLogger(__name__)

_ALTAR_NAMES = {slug: name for name, slug in ALTAR_SLUG_MAP.items()}


class OfferingScroll(VerticalScroll, can_focus=False):
    """Scroll container for the offering list."""


class AltarScreen(BaseScreen):
    """Offerings of one altar."""

    DEFAULT_CSS = """
    AltarScreen #offering-scroll {
        height: 1fr;
    }

    AltarScreen #altar-status {
        color: $text-muted;
        height: 1;
    }
    """

    def __init__(self, altar_slug: str, route: str) -> None:
        super().__init__(route)
        self.altar_slug = altar_slug
        self.navigator: OfferingNavigator | None = None

    @property
    def screen_title(self) -> str:
        return _ALTAR_NAMES.get(self.altar_slug, self.altar_slug)

    def compose_body(self) -> ComposeResult:
        yield Static(id="altar-status")
        with OfferingScroll(id="offering-scroll"):
            yield OfferingList(id="offerings")

    def on_mount(self) -> None:
        self.navigator = OfferingNavigator(
            self.app.controller.offerings_for(self.altar_slug),
            self.altar_slug,
            on_toggle_offered=self._toggle_offered,
            modal_observer=ScreenStackModalObserver(self.app),
        )
        self.navigator.mount(self.app.hub)

    def on_unmount(self) -> None:
        if self.navigator is not None:
            self.navigator.unmount()

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_from_state(self) -> None:
        super().refresh_from_state()
        self.render_offerings()

    def render_offerings(self) -> None:
        navigator = self.navigator
        if navigator is None:
            return
        offerings = self.app.controller.offerings_for(self.altar_slug)
        navigator.set_offerings(offerings, self.altar_slug)
        show_focus = navigator.show_focus_indicator and self.app.interaction_mode.is_keyboard
        offering_list = self.query_one("#offerings", OfferingList)
        offering_list.set_offerings(
            offerings,
            navigator.state,
            show_focus=show_focus,
            query=self.app.ui_state.search_query,
        )
        if show_focus:
            self.call_after_refresh(offering_list.scroll_focused_into_view)

        items = [item for offering in offerings for item in offering.items]
        status = Text(f"{sum(1 for item in items if item.offered)}/{len(items)} offered")
        if navigator.level is NavigationLevel.ITEMS:
            status.append("  Esc to collapse", style="dim")
        self.query_one("#altar-status", Static).update(status)

    def on_search_changed(self, query: str) -> None:
        self.render_offerings()

    # =========================================================================
    # Widget events
    # =========================================================================

    def on_offering_list_header_clicked(self, event: OfferingList.HeaderClicked) -> None:
        navigator = self.navigator
        if navigator is None:
            return
        offerings = navigator.offerings
        if 0 <= event.offering_index < len(offerings):
            navigator.toggle_offering(offerings[event.offering_index].slug)
            self.render_offerings()

    def on_offering_list_item_clicked(self, event: OfferingList.ItemClicked) -> None:
        offerings = self.app.controller.offerings_for(self.altar_slug)
        if not 0 <= event.offering_index < len(offerings):
            return
        items = offerings[event.offering_index].items
        if 0 <= event.item_index < len(items):
            item = items[event.item_index]
            self._toggle_offered(item.id, not item.offered)

    def _toggle_offered(self, item_id: int, offered: bool) -> None:
        if not self.app.controller.set_offered(self.altar_slug, item_id, offered):
            logger.debug("No requirement %s on %s", item_id, self.altar_slug)
            return
        self.render_offerings()


__all__ = [
    "AltarScreen",
]
