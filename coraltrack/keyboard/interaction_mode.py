"""Interaction mode detection (pointer vs keyboard)."""

from __future__ import annotations

import logging
from collections.abc import Callable

from coraltrack.constants.enums import InteractionMode
from coraltrack.constants.limits import MOUSE_MOVEMENT_THRESHOLD
from coraltrack.keyboard.keys import KeyPress

logger = logging.getLogger(__name__)

ModeListener = Callable[[InteractionMode], None]


class InteractionModeDetector:
    """Classify the current input modality from raw key and pointer events.

    Starts in mouse mode. Any navigation-class key switches to keyboard
    mode. While in keyboard mode, a pointer move of at least
    ``threshold`` cells on either axis since the last recorded position
    switches back to mouse mode.
    """

    def __init__(self, threshold: int = MOUSE_MOVEMENT_THRESHOLD) -> None:
        self._threshold = threshold
        self._mode = InteractionMode.MOUSE
        self._last_position: tuple[int, int] | None = None
        self._listeners: list[ModeListener] = []

    @property
    def mode(self) -> InteractionMode:
        return self._mode

    @property
    def is_keyboard(self) -> bool:
        return self._mode is InteractionMode.KEYBOARD

    @property
    def threshold(self) -> int:
        return self._threshold

    @threshold.setter
    def threshold(self, value: int) -> None:
        self._threshold = max(0, value)

    def add_listener(self, listener: ModeListener) -> None:
        """Call ``listener`` with the new mode whenever it changes."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ModeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def on_key(self, press: KeyPress) -> None:
        """Record a key press."""
        if press.is_navigation_key:
            self._set_mode(InteractionMode.KEYBOARD)

    def on_pointer_move(self, x: int, y: int) -> None:
        """Record a pointer position."""
        last = self._last_position
        self._last_position = (x, y)
        if self._mode is InteractionMode.MOUSE or last is None:
            return
        if abs(x - last[0]) >= self._threshold or abs(y - last[1]) >= self._threshold:
            self._set_mode(InteractionMode.MOUSE)

    def _set_mode(self, mode: InteractionMode) -> None:
        if mode is self._mode:
            return
        self._mode = mode
        logger.debug("Interaction mode -> %s", mode.value)
        for listener in list(self._listeners):
            listener(mode)


__all__ = [
    "InteractionModeDetector",
]
