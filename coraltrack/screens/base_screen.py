"""Base screen class for Coral Tracker pages.

Every page has a header, a collapsible sidebar listing the categories
with their number keys, a search input, a body and a footer. Keys are not
bound on screens; the app routes them through the KeyboardDispatchHub
and then asks the current screen to ``refresh_from_state``.
"""

from __future__ import annotations

from contextlib import suppress
from typing import TYPE_CHECKING, cast

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static

from coraltrack.constants.values import (
    APP_TITLE,
    CATEGORY_DISPLAY_NAMES,
    CATEGORY_ORDER,
    ROUTE_SAVES,
    ROUTE_TEMPLE,
)

if TYPE_CHECKING:
    from coraltrack.app import CoralTrackerApp


def _sidebar_text() -> Text:
    text = Text()
    for position, slug in enumerate(CATEGORY_ORDER, start=1):
        digit = position % 10
        text.append(f"{digit} ", style="bold")
        text.append(f"{CATEGORY_DISPLAY_NAMES[slug]}\n")
    text.append("\nShift+T ", style="bold")
    text.append(f"Temple ({ROUTE_TEMPLE})\n")
    text.append("Shift+S ", style="bold")
    text.append(f"Saves ({ROUTE_SAVES})\n")
    return text


class BaseScreen(Screen):
    """Common layout and state sync for tracker pages.

    Subclasses must implement:
    - compose_body: widgets of the page body
    - screen_title: the title shown in the header
    """

    DEFAULT_CSS = """
    BaseScreen #sidebar {
        width: 28;
        padding: 1 1;
        border-right: solid $panel;
    }

    BaseScreen #page {
        padding: 0 1;
    }

    BaseScreen #search {
        margin: 0 0 1 0;
    }
    """

    AUTO_FOCUS = ""

    def __init__(self, route: str) -> None:
        super().__init__()
        self.route = route

    @property
    def screen_title(self) -> str:
        return APP_TITLE

    @property
    def app(self) -> CoralTrackerApp:
        """Get the application instance."""
        return cast("CoralTrackerApp", super().app)

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield Static(_sidebar_text(), id="sidebar")
            with Vertical(id="page"):
                yield Input(placeholder="Search  ( / )", id="search")
                yield from self.compose_body()
        yield Footer()

    def compose_body(self) -> ComposeResult:
        yield from ()

    def on_mount(self) -> None:
        self.app.sub_title = self.screen_title
        with suppress(NoMatches, WrongType):
            self.query_one("#search", Input).value = self.app.ui_state.search_query
        self.refresh_from_state()

    def refresh_from_state(self) -> None:
        """Re-render state that key handling may have changed."""
        with suppress(NoMatches):
            self.query_one("#sidebar").display = self.app.ui_state.sidebar_open

    # =========================================================================
    # Search
    # =========================================================================

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search":
            return
        self.app.ui_state.search_query = event.value
        self.on_search_changed(event.value)

    def on_search_changed(self, query: str) -> None:
        """Hook for pages that react to the search text."""

    def focus_search(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one("#search", Input).focus()

    def clear_search(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one("#search", Input).value = ""


__all__ = [
    "BaseScreen",
]
