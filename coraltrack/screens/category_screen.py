"""Category tracker page: filter toolbar, item grid and grid navigation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Static

from coraltrack.constants.enums import Season
from coraltrack.constants.timeouts import GRID_INITIAL_SCROLL_DELAY
from coraltrack.constants.values import CATEGORY_DISPLAY_NAMES, NPC_CATEGORY_SLUG
from coraltrack.models.core.tracker_items import TrackedItem
from coraltrack.models.state.ui_state import UIState
from coraltrack.navigation.grid import GridNavigator
from coraltrack.screens.adapters import ChildScroller
from coraltrack.screens.base_screen import BaseScreen
from coraltrack.utils.search import search_and_sort
from coraltrack.widgets.filter_toolbar import COMPLETED_FILTER_VALUE, FilterToolbar
from coraltrack.widgets.item_grid import ItemGrid

logger = logging.getLogger(__name__)

# Completion filter cycles all -> completed -> incomplete -> all.
_NEXT_COMPLETED: dict[bool | None, bool | None] = {None: True, True: False, False: None}


def visible_items(items: list[TrackedItem], store: UIState) -> list[TrackedItem]:
    """Apply the store's season, completion and search filters to ``items``."""
    selected = set(store.selected_seasons)
    filtered = [
        item
        for item in items
        if (not selected or not item.seasons or selected.intersection(item.seasons))
        and (store.show_completed is None or item.completed == store.show_completed)
    ]
    return search_and_sort(filtered, store.search_query, lambda item: item.name)


class GridScroll(VerticalScroll, can_focus=False):
    """Scroll container for the grid; scrolling follows grid focus."""


class CategoryScreen(BaseScreen):
    """Grid of the items in one category."""

    DEFAULT_CSS = """
    CategoryScreen #grid-scroll {
        height: 1fr;
    }

    CategoryScreen #grid-status {
        color: $text-muted;
        height: 1;
    }
    """

    def __init__(self, category_slug: str, route: str) -> None:
        super().__init__(route)
        self.category_slug = category_slug
        self._visible: list[TrackedItem] = []
        self.navigator: GridNavigator | None = None
        self._toolbar: FilterToolbar | None = None
        self._rendered: tuple[object, ...] | None = None

    @property
    def screen_title(self) -> str:
        return CATEGORY_DISPLAY_NAMES.get(self.category_slug, self.category_slug)

    @property
    def visible(self) -> list[TrackedItem]:
        return list(self._visible)

    def compose_body(self) -> ComposeResult:
        self._toolbar = FilterToolbar(
            on_exit=self._on_filters_exit,
            schedule=self._schedule,
            settle_delay=self.app.settings.filter_blur_settle_delay,
            id="filters",
        )
        yield self._toolbar
        yield Static(id="grid-status")
        with GridScroll(id="grid-scroll"):
            yield ItemGrid(id="grid")

    def on_mount(self) -> None:
        grid = self.query_one("#grid", ItemGrid)
        self._visible = visible_items(
            self.app.controller.items_for(self.category_slug), self.app.ui_state
        )
        self.navigator = GridNavigator(
            self.app.ui_state,
            item_count=len(self._visible),
            column_count=grid.column_count,
            category_slug=self.category_slug,
            on_select=self._toggle_completed,
            on_details=self._show_details,
            on_hearts_change=(
                self._change_hearts if self.category_slug == NPC_CATEGORY_SLUG else None
            ),
            scroller=ChildScroller(grid),
        )
        hub = self.app.hub
        if self._toolbar is not None:
            hub.register_filter_handler(self._toolbar.navigator)
        self.navigator.mount(hub)
        self.set_timer(GRID_INITIAL_SCROLL_DELAY, self.navigator.scroll_focused_into_view)

    def on_unmount(self) -> None:
        if self._toolbar is not None:
            self.app.hub.unregister_filter_handler(self._toolbar.navigator)
        if self.navigator is not None:
            self.navigator.unmount()

    def _schedule(self, delay: float, callback: Callable[[], None]) -> None:
        if delay > 0:
            self.set_timer(delay, callback)
        else:
            self.call_after_refresh(callback)

    def _on_filters_exit(self) -> None:
        if self._toolbar is not None:
            self._toolbar.reset_tab_stops()
        self.app.set_focus(None)
        with suppress(NoMatches):
            self.refresh_focus()

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_from_state(self) -> None:
        super().refresh_from_state()
        if self._toolbar is not None:
            self._toolbar.sync(self.app.ui_state)
        self.render_items()

    def render_items(self) -> None:
        """Re-filter and redraw the grid, clamping the remembered focus."""
        self._visible = visible_items(
            self.app.controller.items_for(self.category_slug), self.app.ui_state
        )
        grid = self.query_one("#grid", ItemGrid)
        if self.navigator is not None:
            self.navigator.update(item_count=len(self._visible), column_count=grid.column_count)
        query = self.app.ui_state.search_query
        rendered = (query, *((id(item), item.completed, item.hearts) for item in self._visible))
        if rendered == self._rendered:
            grid.show_focus(self._indicator_index())
            return
        self._rendered = rendered
        logger.debug("Rendering %d %s items", len(self._visible), self.category_slug)
        grid.set_items(self._visible, query=query, focused_index=self._indicator_index())
        done = sum(1 for item in self._visible if item.completed)
        self.query_one("#grid-status", Static).update(f"{done}/{len(self._visible)} completed")

    def refresh_focus(self) -> None:
        self.query_one("#grid", ItemGrid).show_focus(self._indicator_index())

    def _indicator_index(self) -> int:
        navigator = self.navigator
        if navigator is None or not navigator.show_focus_indicator:
            return -1
        if not self.app.interaction_mode.is_keyboard:
            return -1
        return navigator.focused_index

    def on_search_changed(self, query: str) -> None:
        self.render_items()

    # =========================================================================
    # Widget events
    # =========================================================================

    def on_item_grid_columns_changed(self, event: ItemGrid.ColumnsChanged) -> None:
        if self.navigator is not None:
            self.navigator.update(column_count=event.column_count)

    def on_item_grid_item_clicked(self, event: ItemGrid.ItemClicked) -> None:
        if self.navigator is not None:
            self.navigator.set_focused_index(event.index)
        self._toggle_completed(event.index)

    def on_filter_toolbar_filter_toggled(self, event: FilterToolbar.FilterToggled) -> None:
        store = self.app.ui_state
        if event.value == COMPLETED_FILTER_VALUE:
            store.show_completed = _NEXT_COMPLETED[store.show_completed]
        else:
            store.toggle_season(Season(event.value))
        self.refresh_from_state()

    # =========================================================================
    # Grid callbacks
    # =========================================================================

    def _source_index(self, index: int) -> int:
        target = self._visible[index]
        items = self.app.controller.items_for(self.category_slug)
        return next(i for i, item in enumerate(items) if item is target)

    def _toggle_completed(self, index: int) -> None:
        if not 0 <= index < len(self._visible):
            return
        self.app.controller.toggle_completed(self.category_slug, self._source_index(index))
        self.render_items()

    def _change_hearts(self, index: int, delta: int) -> None:
        if not 0 <= index < len(self._visible):
            return
        self.app.controller.change_hearts(self._source_index(index), delta)
        self.render_items()

    def _show_details(self, index: int) -> None:
        if not 0 <= index < len(self._visible):
            return
        item = self._visible[index]
        seasons = ", ".join(item.seasons) or "any season"
        status = "completed" if item.completed else "not completed"
        self.app.notify(f"{item.name}\n{seasons}, {status}", title=self.screen_title)


__all__ = [
    "CategoryScreen",
    "visible_items",
]
