"""Capability protocols the keyboard core depends on.

Navigators never touch widgets directly. They move focus, check for open
modals and scroll through these small contracts, so the same core runs
against Textual widgets or plain test doubles.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FocusableHandle(Protocol):
    """Moves input focus between focus targets."""

    def move_focus_to(self, target: Any) -> None: ...

    def current_focus(self) -> Any | None: ...


@runtime_checkable
class ModalPresenceObserver(Protocol):
    """Reports whether any modal dialog is currently open."""

    def is_any_modal_open(self) -> bool: ...


@runtime_checkable
class Scroller(Protocol):
    """Scrolls a list so the given index is visible."""

    def scroll_to_index(self, index: int) -> None: ...


class KeyboardHost(Protocol):
    """Side effects the dispatch hub asks the application to perform."""

    def navigate(self, path: str) -> None: ...

    def focus_search(self) -> None: ...

    def blur_input(self) -> None: ...

    def clear_search(self) -> None: ...

    def set_help_visible(self, visible: bool) -> None: ...


class DirectFocusHandle:
    """FocusableHandle that calls ``focus()`` on the target itself.

    Tracks the last focused target so ``current_focus`` works without a
    toolkit. Textual widgets satisfy the ``focus()`` contract.
    """

    def __init__(self) -> None:
        self._current: Any | None = None

    def move_focus_to(self, target: Any) -> None:
        focus = getattr(target, "focus", None)
        if callable(focus):
            focus()
        self._current = target

    def current_focus(self) -> Any | None:
        return self._current


class NoModalObserver:
    """ModalPresenceObserver for contexts without modal dialogs."""

    def is_any_modal_open(self) -> bool:
        return False


__all__ = [
    "DirectFocusHandle",
    "FocusableHandle",
    "KeyboardHost",
    "ModalPresenceObserver",
    "NoModalObserver",
    "Scroller",
]
