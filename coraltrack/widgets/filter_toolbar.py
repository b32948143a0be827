"""Season and completion filter toolbar.

Buttons form a roving tab stop: only one of them is focusable at a time,
so Tab enters and leaves the toolbar in a single step while arrow keys
move between buttons through the RovingFilterNavigator.

CSS Classes: filter-button, -selected
"""

from __future__ import annotations

from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.events import DescendantBlur
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button

from coraltrack.constants.enums import Season
from coraltrack.constants.timeouts import FILTER_BLUR_SETTLE_DELAY
from coraltrack.models.state.ui_state import UIState
from coraltrack.navigation.filters import FilterBinding, RovingFilterNavigator, Scheduler

COMPLETED_FILTER_VALUE = "completed"

_COMPLETED_LABELS = {
    None: "All",
    True: "Completed",
    False: "Incomplete",
}


class FilterButton(Button):
    """A toolbar button bound to one filter value."""

    def __init__(self, label: str, *, filter_index: int, value: str) -> None:
        super().__init__(label, classes="filter-button")
        self.filter_index = filter_index
        self.value = value


class RovingFocusHandle:
    """Focus one toolbar button and make it the only focusable one."""

    def __init__(self, toolbar: FilterToolbar) -> None:
        self._toolbar = toolbar

    def move_focus_to(self, target: Widget) -> None:
        for button in self._toolbar.buttons:
            button.can_focus = button is target
        target.focus()

    def current_focus(self) -> Widget | None:
        return self._toolbar.app.focused


class FilterToolbar(Horizontal):
    """Season toggles plus a completion filter."""

    DEFAULT_CSS = """
    FilterToolbar {
        height: auto;
        padding: 0 1;
    }

    FilterToolbar .filter-button {
        margin-right: 1;
    }

    FilterToolbar .filter-button.-selected {
        text-style: bold reverse;
    }
    """

    class FilterToggled(Message):
        """Posted when a filter button is pressed."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(
        self,
        *,
        on_activate: Callable[[], None] | None = None,
        on_exit: Callable[[], None] | None = None,
        schedule: Scheduler | None = None,
        settle_delay: float = FILTER_BLUR_SETTLE_DELAY,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.navigator = RovingFilterNavigator(
            RovingFocusHandle(self),
            on_activate=on_activate,
            on_exit=on_exit,
            schedule=schedule,
            settle_delay=settle_delay,
        )
        self._filter_binds: list[FilterBinding] = []

    @property
    def buttons(self) -> list[FilterButton]:
        return list(self.query(FilterButton))

    def compose(self) -> ComposeResult:
        for index, season in enumerate(Season):
            yield FilterButton(season.value.title(), filter_index=index, value=season.value)
        yield FilterButton(
            _COMPLETED_LABELS[None],
            filter_index=len(Season),
            value=COMPLETED_FILTER_VALUE,
        )

    def on_mount(self) -> None:
        for button in self.buttons:
            bind = self.navigator.register_filter(button.filter_index)
            bind(button)
            self._filter_binds.append(bind)
        self.reset_tab_stops()

    def on_unmount(self) -> None:
        self.navigator.exit()
        for bind in self._filter_binds:
            bind(None)
        self._filter_binds.clear()

    def reset_tab_stops(self) -> None:
        """Make the tab stop the navigator reports the only focusable button."""
        for button in self.buttons:
            button.can_focus = self.navigator.get_tab_index(button.filter_index) == 0

    def sync(self, store: UIState) -> None:
        """Reflect the store's filter selection on the buttons."""
        for button in self.buttons:
            if button.value == COMPLETED_FILTER_VALUE:
                button.label = _COMPLETED_LABELS[store.show_completed]
                button.set_class(store.show_completed is not None, "-selected")
            else:
                button.set_class(button.value in store.selected_seasons, "-selected")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, FilterButton):
            event.stop()
            self.post_message(self.FilterToggled(event.button.value))

    def on_descendant_blur(self, _: DescendantBlur) -> None:
        self.navigator.handle_toolbar_blur(
            lambda: any(button.has_focus for button in self.buttons)
        )


__all__ = [
    "COMPLETED_FILTER_VALUE",
    "FilterButton",
    "FilterToolbar",
    "RovingFocusHandle",
]
