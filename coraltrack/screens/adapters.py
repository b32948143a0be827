"""Textual implementations of the keyboard capability protocols."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.screen import ModalScreen
from textual.widget import Widget

if TYPE_CHECKING:
    from textual.app import App


class WidgetFocusHandle:
    """Move Textual focus between widgets."""

    def __init__(self, app: App) -> None:
        self._app = app

    def move_focus_to(self, target: Widget) -> None:
        target.focus()

    def current_focus(self) -> Widget | None:
        return self._app.focused


class ScreenStackModalObserver:
    """Report a modal as open while a ModalScreen is on top of the stack."""

    def __init__(self, app: App) -> None:
        self._app = app

    def is_any_modal_open(self) -> bool:
        if not self._app.screen_stack:
            return False
        return isinstance(self._app.screen, ModalScreen)


class ChildScroller:
    """Scroll the n-th child of a container into view."""

    def __init__(self, container: Widget) -> None:
        self._container = container

    def scroll_to_index(self, index: int) -> None:
        children = self._container.children
        if 0 <= index < len(children):
            children[index].scroll_visible(animate=False)


__all__ = [
    "ChildScroller",
    "ScreenStackModalObserver",
    "WidgetFocusHandle",
]
