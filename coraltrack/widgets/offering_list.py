"""Altar offering list widgets.

Each offering is a header row; an expanded offering also shows its
requirements in two columns below the header. Focus is drawn with the
``-focused`` class only, the widgets never take Textual focus.

CSS Classes: offering-header, offering-items, offering-item, -expanded,
-offered, -focused
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text
from textual.containers import Container, Vertical
from textual.events import Click
from textual.message import Message
from textual.widgets import Static

from coraltrack.constants.enums import NavigationLevel
from coraltrack.constants.limits import OFFERING_COLUMN_COUNT
from coraltrack.models.core.tracker_items import Offering, OfferingItem
from coraltrack.navigation.offerings import OfferingNavState
from coraltrack.utils.search import highlight_match


class OfferingHeader(Static):
    """Header row of one offering."""

    def __init__(self, offering: Offering, index: int, *, expanded: bool, query: str = ""):
        super().__init__(self.render_header(offering, expanded, query), classes="offering-header")
        self.offering = offering
        self.index = index
        self.set_class(expanded, "-expanded")

    @staticmethod
    def render_header(offering: Offering, expanded: bool, query: str = "") -> Text:
        line = Text("▾ " if expanded else "▸ ")
        line.append_text(highlight_match(offering.name or offering.slug, query))
        if offering.items:
            offered = sum(1 for item in offering.items if item.offered)
            line.append(f"  {offered}/{len(offering.items)}", style="dim")
        return line

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(OfferingList.HeaderClicked(self.index))


class OfferingItemCell(Static):
    """One requirement of an expanded offering."""

    def __init__(
        self,
        item: OfferingItem,
        offering_index: int,
        item_index: int,
        *,
        query: str = "",
    ):
        line = Text("✓ " if item.offered else "· ")
        line.append_text(highlight_match(item.name or str(item.id), query))
        super().__init__(line, classes="offering-item")
        self.item = item
        self.offering_index = offering_index
        self.item_index = item_index
        self.set_class(item.offered, "-offered")

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(OfferingList.ItemClicked(self.offering_index, self.item_index))


class OfferingList(Vertical, can_focus=False):
    """All offerings of one altar."""

    DEFAULT_CSS = f"""
    OfferingList {{
        height: auto;
    }}

    OfferingList .offering-header {{
        padding: 0 1;
    }}

    OfferingList .offering-header.-expanded {{
        text-style: bold;
    }}

    OfferingList .offering-items {{
        layout: grid;
        grid-size: {OFFERING_COLUMN_COUNT};
        grid-gutter: 0 1;
        height: auto;
        padding: 0 0 1 4;
    }}

    OfferingList .offering-item.-offered {{
        color: $success;
    }}

    OfferingList .-focused {{
        background: $accent 30%;
        text-style: bold;
    }}
    """

    class HeaderClicked(Message):
        """Posted when an offering header is clicked."""

        def __init__(self, offering_index: int) -> None:
            super().__init__()
            self.offering_index = offering_index

    class ItemClicked(Message):
        """Posted when a requirement is clicked."""

        def __init__(self, offering_index: int, item_index: int) -> None:
            super().__init__()
            self.offering_index = offering_index
            self.item_index = item_index

    def set_offerings(
        self,
        offerings: Sequence[Offering],
        state: OfferingNavState,
        *,
        show_focus: bool = True,
        query: str = "",
    ) -> None:
        """Rebuild the list for ``state``; ``show_focus`` draws the focus ring."""
        self.remove_children()
        rows: list[Static | Container] = []
        for index, offering in enumerate(offerings):
            expanded = offering.slug in state.expanded_offerings
            on_offering = show_focus and index == state.focused_offering_index
            header = OfferingHeader(offering, index, expanded=expanded, query=query)
            header.set_class(on_offering and state.level is NavigationLevel.OFFERINGS, "-focused")
            rows.append(header)
            if not expanded or not offering.items:
                continue
            cells = []
            for item_index, item in enumerate(offering.items):
                cell = OfferingItemCell(item, index, item_index, query=query)
                cell.set_class(
                    on_offering
                    and state.level is NavigationLevel.ITEMS
                    and item_index == state.focused_item_index,
                    "-focused",
                )
                cells.append(cell)
            rows.append(Container(*cells, classes="offering-items"))
        self.mount_all(rows)

    def scroll_focused_into_view(self) -> None:
        for widget in self.query(".-focused"):
            widget.scroll_visible(animate=False)
            break


__all__ = [
    "OfferingHeader",
    "OfferingItemCell",
    "OfferingList",
]
