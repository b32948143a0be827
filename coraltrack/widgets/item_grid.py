"""Item grid widgets for category pages.

The grid lays out one card per tracked item in as many columns as fit the
available width. Keyboard focus is drawn with the ``-focused`` class; the
widgets themselves never take Textual focus.

CSS Classes: item-card, -completed, -focused
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text
from textual.containers import Container
from textual.events import Click, Resize
from textual.message import Message
from textual.widgets import Static

from coraltrack.constants.limits import GRID_COLUMN_COUNT_MIN, ITEM_CARD_WIDTH
from coraltrack.models.core.tracker_items import TrackedItem
from coraltrack.utils.search import highlight_match


def columns_for_width(width: int) -> int:
    """Number of item cards that fit side by side in ``width`` cells."""
    return max(GRID_COLUMN_COUNT_MIN, width // ITEM_CARD_WIDTH)


class ItemCard(Static):
    """A single tracked item."""

    def __init__(self, item: TrackedItem, index: int, *, query: str = "", focused: bool = False):
        super().__init__(self.render_item(item, query), classes="item-card")
        self.item = item
        self.index = index
        self.set_class(item.completed, "-completed")
        self.set_class(focused, "-focused")

    @staticmethod
    def render_item(item: TrackedItem, query: str = "") -> Text:
        line = Text("✓ " if item.completed else "· ")
        line.append_text(highlight_match(item.name, query))
        if item.hearts is not None:
            line.append(f"  ♥ {item.hearts}/{item.max_hearts}")
        return line

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(ItemGrid.ItemClicked(self.index))


class ItemGrid(Container, can_focus=False):
    """Responsive grid of item cards."""

    DEFAULT_CSS = """
    ItemGrid {
        layout: grid;
        grid-size: 1;
        grid-gutter: 0 1;
        height: auto;
    }

    ItemGrid .item-card {
        height: 3;
        padding: 0 1;
        border: round $panel;
    }

    ItemGrid .item-card.-completed {
        color: $success;
    }

    ItemGrid .item-card.-focused {
        border: round $accent;
        text-style: bold;
    }
    """

    class ItemClicked(Message):
        """Posted when a card is clicked."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    class ColumnsChanged(Message):
        """Posted when a resize changes the column count."""

        def __init__(self, column_count: int) -> None:
            super().__init__()
            self.column_count = column_count

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._column_count = GRID_COLUMN_COUNT_MIN

    @property
    def column_count(self) -> int:
        return self._column_count

    def on_resize(self, event: Resize) -> None:
        columns = columns_for_width(event.size.width)
        if columns == self._column_count:
            return
        self._column_count = columns
        self.styles.grid_size_columns = columns
        self.post_message(self.ColumnsChanged(columns))

    def set_items(
        self,
        items: Sequence[TrackedItem],
        *,
        query: str = "",
        focused_index: int = -1,
    ) -> None:
        """Replace all cards."""
        self.remove_children()
        self.mount_all(
            ItemCard(item, index, query=query, focused=index == focused_index)
            for index, item in enumerate(items)
        )

    def show_focus(self, index: int) -> None:
        """Draw the focus ring on ``index`` only; -1 hides it."""
        for card in self.query(ItemCard):
            card.set_class(card.index == index, "-focused")


__all__ = [
    "ItemCard",
    "ItemGrid",
    "columns_for_width",
]
