"""Focus trap for modal dialogs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from coraltrack.keyboard.capabilities import FocusableHandle
from coraltrack.keyboard.keys import KeyPress

logger = logging.getLogger(__name__)


class FocusTrap:
    """Confine Tab order to a container while it is active.

    On activation the previously focused target is remembered and focus
    moves to the first focusable target. Tab on the last target wraps to
    the first, Shift+Tab on the first wraps to the last, and Escape calls
    ``on_escape``. Deactivation restores the remembered focus, or
    ``restore_focus`` when one is given. A modal screen passes the widget
    that was focused before it was pushed.
    """

    def __init__(
        self,
        get_focusable: Callable[[], Sequence[Any]],
        focus: FocusableHandle,
        on_escape: Callable[[], None] | None = None,
        restore_focus: Any | None = None,
    ) -> None:
        self._get_focusable = get_focusable
        self._focus = focus
        self._on_escape = on_escape
        self._restore_focus = restore_focus
        self._previous: Any | None = None
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        if self._active:
            return
        self._active = True
        if self._restore_focus is not None:
            self._previous = self._restore_focus
        else:
            self._previous = self._focus.current_focus()
        targets = list(self._get_focusable())
        if targets:
            self._focus.move_focus_to(targets[0])

    def deactivate(self) -> None:
        if not self._active:
            return
        self._active = False
        previous, self._previous = self._previous, None
        if previous is not None:
            self._focus.move_focus_to(previous)

    def handle_key(self, press: KeyPress) -> bool:
        """Handle a key while trapped.

        Returns:
            True if the key was consumed.
        """
        if not self._active:
            return False

        if press.key == "escape" and self._on_escape is not None:
            self._on_escape()
            return True

        if press.key != "tab":
            return False

        targets = list(self._get_focusable())
        if not targets:
            return False

        current = self._focus.current_focus()
        if press.shift and current is targets[0]:
            self._focus.move_focus_to(targets[-1])
            return True
        if not press.shift and current is targets[-1]:
            self._focus.move_focus_to(targets[0])
            return True
        return False


__all__ = [
    "FocusTrap",
]
