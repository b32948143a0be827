"""Keyboard shortcuts help panel.

Dialogs are modal screens; the app pushes this one when the help panel
opens and pops it when it closes, so the modal observer sees it.

CSS Classes: dialog-container, dialog-title, shortcut-section
"""

from __future__ import annotations

from contextlib import suppress

from rich.table import Table
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.events import Key, Resize
from textual.screen import ModalScreen
from textual.widget import Widget
from textual.widgets import Button, Static

from coraltrack.constants.enums import ShortcutCategory
from coraltrack.keyboard.focus_trap import FocusTrap
from coraltrack.keyboard.keys import KeyPress
from coraltrack.keyboard.shortcuts import format_shortcut, get_shortcuts_by_category
from coraltrack.screens.adapters import WidgetFocusHandle

_DIALOG_MIN_WIDTH = 44
_DIALOG_SIDE_MARGIN = 6
_DIALOG_MIN_HEIGHT = 10
_DIALOG_VERTICAL_MARGIN = 4

_CATEGORY_TITLES: dict[ShortcutCategory, str] = {
    ShortcutCategory.NAVIGATION: "Navigation",
    ShortcutCategory.GRID: "Grid",
    ShortcutCategory.FILTERS: "Filters",
    ShortcutCategory.GENERAL: "General",
}


def _shortcut_table(category: ShortcutCategory) -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold", no_wrap=True)
    table.add_column()
    for shortcut in get_shortcuts_by_category()[category]:
        table.add_row(format_shortcut(shortcut), shortcut.description)
    return table


class ShortcutsHelpScreen(ModalScreen[None]):
    """Modal listing every shortcut grouped by category."""

    DEFAULT_CSS = """
    ShortcutsHelpScreen {
        align: center middle;
    }

    ShortcutsHelpScreen .dialog-container {
        width: 64;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $surface;
    }

    ShortcutsHelpScreen .dialog-title {
        text-style: bold;
        content-align: center middle;
        margin-bottom: 1;
    }

    ShortcutsHelpScreen .shortcut-section {
        margin-bottom: 1;
    }
    """

    AUTO_FOCUS = "#help-close"

    def __init__(self, restore_focus: Widget | None = None) -> None:
        super().__init__()
        self._restore_focus = restore_focus
        self._trap: FocusTrap | None = None

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            yield Static("Keyboard Shortcuts", classes="dialog-title")
            with VerticalScroll(id="help-sections"):
                for category, title in _CATEGORY_TITLES.items():
                    yield Static(f"[b]{title}[/b]", classes="shortcut-section-title")
                    yield Static(_shortcut_table(category), classes="shortcut-section")
            yield Button("Close", id="help-close")

    def on_mount(self) -> None:
        self._trap = FocusTrap(
            lambda: [widget for widget in self.focus_chain if widget.focusable],
            WidgetFocusHandle(self.app),
            on_escape=self._close,
            restore_focus=self._restore_focus,
        )
        self._trap.activate()
        self._apply_dynamic_layout()

    def on_unmount(self) -> None:
        if self._trap is not None:
            self._trap.deactivate()

    def on_resize(self, _: Resize) -> None:
        self._apply_dynamic_layout()

    def _apply_dynamic_layout(self) -> None:
        width = max(_DIALOG_MIN_WIDTH, self.app.size.width - _DIALOG_SIDE_MARGIN)
        height = max(_DIALOG_MIN_HEIGHT, self.app.size.height - _DIALOG_VERTICAL_MARGIN)
        with suppress(NoMatches):
            container = self.query_one(".dialog-container", Vertical)
            container.styles.max_width = width
            container.styles.max_height = height

    def on_key(self, event: Key) -> None:
        if self._trap is not None and self._trap.handle_key(KeyPress.from_textual(event)):
            event.stop()
            event.prevent_default()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "help-close":
            event.stop()
            self._close()

    def _close(self) -> None:
        set_help_open = getattr(self.app, "set_help_open", None)
        if callable(set_help_open):
            set_help_open(False)
        else:
            self.dismiss()


__all__ = [
    "ShortcutsHelpScreen",
]
