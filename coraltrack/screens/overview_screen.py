"""Dashboard, save slot and temple overview pages.

These pages have no grid. The search input runs a global search across
every loaded category, the altars and their offerings; Enter opens the
best match.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.widgets import Input, Static

from coraltrack.constants.values import (
    ALTAR_SLUG_MAP,
    CATEGORY_DISPLAY_NAMES,
    CATEGORY_ORDER,
    LAKE_TEMPLE_ALTARS,
    ROUTE_HOME,
    ROUTE_SAVES,
    ROUTE_TEMPLE,
)
from coraltrack.screens.base_screen import BaseScreen
from coraltrack.utils.global_search import route_for
from coraltrack.utils.search import highlight_match

_TITLES = {
    ROUTE_SAVES: "Save Slots",
    ROUTE_TEMPLE: "Lake Temple",
}


class OverviewScreen(BaseScreen):
    """Summary page for ``/``, ``/saves`` and ``/temple``."""

    ROUTES = (ROUTE_HOME, ROUTE_SAVES, ROUTE_TEMPLE)

    @property
    def screen_title(self) -> str:
        return _TITLES.get(self.route, "Dashboard")

    def compose_body(self) -> ComposeResult:
        yield Static(id="search-results")
        yield Static(self._summary(), id="overview")

    def _summary(self) -> Text:
        controller = self.app.controller
        text = Text()
        if self.route == ROUTE_SAVES:
            save_id = self.app.ui_state.current_save_id or controller.data.save_id
            text.append("Current save: ", style="bold")
            text.append(str(save_id) if save_id is not None else "none")
            return text
        if self.route == ROUTE_TEMPLE:
            for altar in LAKE_TEMPLE_ALTARS:
                offerings = controller.offerings_for(ALTAR_SLUG_MAP[altar])
                items = [item for offering in offerings for item in offering.items]
                offered = sum(1 for item in items if item.offered)
                text.append(f"{altar}", style="bold")
                text.append(f"  {offered}/{len(items)} offered\n")
            return text
        for position, slug in enumerate(CATEGORY_ORDER, start=1):
            items = controller.items_for(slug)
            done = sum(1 for item in items if item.completed)
            text.append(f"{position % 10} ", style="bold")
            text.append(f"{CATEGORY_DISPLAY_NAMES[slug]}  {done}/{len(items)}\n")
        return text

    def on_search_changed(self, query: str) -> None:
        results = Text()
        for entry in self.app.search_index.search(query):
            results.append_text(highlight_match(entry.name, query))
            results.append(f"  {entry.category}\n", style="dim")
        self.query_one("#search-results", Static).update(results)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        matches = self.app.search_index.search(event.value)
        if matches:
            event.stop()
            self.app.clear_search()
            self.app.navigate(route_for(matches[0]))


__all__ = [
    "OverviewScreen",
]
