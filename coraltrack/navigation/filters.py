"""Roving-tabindex navigation for the filter toolbar.

Only one filter control is reachable with Tab at any time. Arrow (or
h/l) keys move that single tab stop between controls, wrapping at both
ends; Home/End jump to the first/last control; Escape leaves the toolbar.

Controls register themselves under a stable integer index assigned at
render time. Indices may be sparse because controls come and go.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from coraltrack.constants.timeouts import FILTER_BLUR_SETTLE_DELAY
from coraltrack.keyboard.capabilities import DirectFocusHandle, FocusableHandle
from coraltrack.keyboard.keys import KeyPress

logger = logging.getLogger(__name__)

FilterBinding = Callable[[Any | None], None]
ModeListener = Callable[[bool], None]
Scheduler = Callable[[float, Callable[[], None]], None]


def _run_now(_delay: float, callback: Callable[[], None]) -> None:
    callback()


class RovingFilterNavigator:
    """Roving tab stop over a sparse, ordered set of filter controls."""

    def __init__(
        self,
        focus: FocusableHandle | None = None,
        *,
        on_activate: Callable[[], None] | None = None,
        on_exit: Callable[[], None] | None = None,
        schedule: Scheduler | None = None,
        settle_delay: float = FILTER_BLUR_SETTLE_DELAY,
    ) -> None:
        """Initialize the navigator.

        Args:
            focus: Moves input focus to a control. Defaults to calling the
                control's own ``focus()``.
            on_activate: Called after filter mode is entered.
            on_exit: Called after filter mode is left.
            schedule: Runs a callback after a delay. Used to let focus
                settle before reacting to a toolbar blur. Defaults to
                running immediately.
            settle_delay: Delay passed to ``schedule`` on blur.
        """
        self._focus = focus or DirectFocusHandle()
        self._on_activate = on_activate
        self._on_exit = on_exit
        self._schedule = schedule or _run_now
        self._settle_delay = settle_delay
        self._controls: dict[int, Any] = {}
        self._active = False
        self._focused_index = -1
        self._mode_listeners: list[ModeListener] = []

    # =========================================================================
    # State
    # =========================================================================

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def focused_index(self) -> int:
        return self._focused_index

    @property
    def filter_count(self) -> int:
        return len(self._controls)

    def registered_indices(self) -> list[int]:
        """Registered filter indices in ascending order."""
        return sorted(self._controls)

    def get_tab_index(self, index: int) -> int:
        """Return 0 for the single tab stop, -1 for every other filter."""
        if self._active:
            return 0 if index == self._focused_index else -1
        indices = self.registered_indices()
        return 0 if indices and indices[0] == index else -1

    def is_focused(self, index: int) -> bool:
        return self._active and self._focused_index == index

    def add_mode_listener(self, listener: ModeListener) -> None:
        """Call ``listener(True)`` on activation and ``listener(False)`` on exit."""
        self._mode_listeners.append(listener)

    def remove_mode_listener(self, listener: ModeListener) -> None:
        if listener in self._mode_listeners:
            self._mode_listeners.remove(listener)

    # =========================================================================
    # Registration
    # =========================================================================

    def register_filter(self, index: int) -> FilterBinding:
        """Return a binding callback for the filter at ``index``.

        Call the binding with the control when it mounts and with None when
        it unmounts.
        """

        def bind(control: Any | None) -> None:
            if control is not None:
                self._controls[index] = control
                return
            self._controls.pop(index, None)
            if self._active and self._focused_index == index:
                self._recover_focus(index)

        return bind

    def _recover_focus(self, removed_index: int) -> None:
        indices = self.registered_indices()
        if not indices:
            logger.debug("Last filter removed while active, exiting filter mode")
            self.exit()
            return
        nearest = indices[0]
        for candidate in indices[1:]:
            if abs(candidate - removed_index) < abs(nearest - removed_index):
                nearest = candidate
        self._focus_filter(nearest)

    # =========================================================================
    # Movement
    # =========================================================================

    def _focus_filter(self, index: int) -> None:
        control = self._controls.get(index)
        if control is None:
            return
        self._focus.move_focus_to(control)
        self._focused_index = index
        logger.debug("Filter focus -> %d", index)

    def activate(self) -> None:
        """Enter filter mode on the lowest registered filter."""
        indices = self.registered_indices()
        if not indices:
            return
        self._active = True
        self._focus_filter(indices[0])
        if self._on_activate is not None:
            self._on_activate()
        self._notify(True)

    def focus_next(self) -> None:
        """Move to the next filter, wrapping. Activates when inactive."""
        indices = self.registered_indices()
        if not indices:
            return
        if not self._active:
            self.activate()
            return
        position = indices.index(self._focused_index) if self._focused_index in indices else -1
        self._focus_filter(indices[(position + 1) % len(indices)])

    def focus_prev(self) -> None:
        """Move to the previous filter, wrapping. No-op when inactive."""
        indices = self.registered_indices()
        if not indices or not self._active:
            return
        position = indices.index(self._focused_index) if self._focused_index in indices else -1
        self._focus_filter(indices[-1] if position <= 0 else indices[position - 1])

    def focus_first(self) -> None:
        indices = self.registered_indices()
        if indices:
            self._focus_filter(indices[0])

    def focus_last(self) -> None:
        indices = self.registered_indices()
        if indices:
            self._focus_filter(indices[-1])

    def exit(self) -> None:
        """Leave filter mode."""
        if not self._active and self._focused_index == -1:
            return
        self._active = False
        self._focused_index = -1
        if self._on_exit is not None:
            self._on_exit()
        self._notify(False)

    def _notify(self, active: bool) -> None:
        for listener in list(self._mode_listeners):
            listener(active)

    # =========================================================================
    # Toolbar events
    # =========================================================================

    def handle_toolbar_key(self, press: KeyPress) -> bool:
        """Handle a key pressed inside the toolbar.

        Returns:
            True if the key was consumed.
        """
        if not self._active:
            return False
        if press.key in ("right", "l"):
            self.focus_next()
        elif press.key in ("left", "h"):
            self.focus_prev()
        elif press.key == "home":
            self.focus_first()
        elif press.key == "end":
            self.focus_last()
        elif press.key == "escape":
            self.exit()
        else:
            return False
        return True

    def handle_toolbar_blur(self, focus_still_inside: Callable[[], bool]) -> None:
        """Exit filter mode if focus has left the toolbar once it settles.

        Args:
            focus_still_inside: Evaluated after the settle delay; returns
                whether focus is still on a toolbar control.
        """

        def check() -> None:
            if self._active and not focus_still_inside():
                logger.debug("Focus left the filter toolbar")
                self.exit()

        self._schedule(self._settle_delay, check)


__all__ = [
    "FilterBinding",
    "RovingFilterNavigator",
]
