"""Toolkit-neutral key press model.

Key names follow Textual's vocabulary for named keys (``up``, ``down``,
``left``, ``right``, ``home``, ``end``, ``enter``, ``space``, ``escape``,
``tab``). Printable keys are stored as the character itself, so Textual's
``question_mark`` becomes ``?`` and ``left_square_bracket`` becomes ``[``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textual.events import Key

MODIFIER_NAMES = frozenset({"shift", "alt", "ctrl", "meta"})

# Textual key names for printable characters the shortcuts care about.
_KEY_NAME_CHARACTERS: dict[str, str] = {
    "question_mark": "?",
    "slash": "/",
    "left_square_bracket": "[",
    "right_square_bracket": "]",
    "plus": "+",
    "minus": "-",
    "equals_sign": "=",
    "underscore": "_",
}

VIM_KEYS: dict[str, str] = {
    "h": "left",
    "j": "down",
    "k": "up",
    "l": "right",
}

NAVIGATION_KEYS = frozenset(
    {
        "up",
        "down",
        "left",
        "right",
        "tab",
        "enter",
        "space",
        "home",
        "end",
        "h",
        "j",
        "k",
        "l",
        "H",
        "J",
        "K",
        "L",
    }
)


@dataclass(frozen=True)
class KeyPress:
    """A single keystroke with its modifier state.

    Attributes:
        key: Named key or printable character.
        shift: Shift held (implied by an uppercase letter).
        alt: Alt/Option held.
        ctrl: Control held.
        meta: Meta/Command held.
        in_text_input: Whether focus was inside a text entry widget.
    """

    key: str
    shift: bool = False
    alt: bool = False
    ctrl: bool = False
    meta: bool = False
    in_text_input: bool = False

    @classmethod
    def parse(cls, chord: str, *, in_text_input: bool = False) -> KeyPress:
        """Build a KeyPress from a chord string such as ``"alt+1"``.

        Args:
            chord: Modifiers and key joined with ``+``. A lone ``+`` is the
                plus key.
            in_text_input: Whether focus is inside a text entry widget.

        Returns:
            The normalized key press.
        """
        if chord == "+" or chord.endswith("++"):
            modifiers = chord[:-2].split("+") if len(chord) > 1 else []
            base = "+"
        else:
            parts = chord.split("+")
            modifiers, base = parts[:-1], parts[-1]
        return cls._from_parts(base, modifiers, in_text_input=in_text_input)

    @classmethod
    def from_textual(cls, event: Key, *, in_text_input: bool = False) -> KeyPress:
        """Build a KeyPress from a Textual key event."""
        return cls.parse(event.key, in_text_input=in_text_input)

    @classmethod
    def _from_parts(
        cls,
        base: str,
        modifiers: list[str],
        *,
        in_text_input: bool,
    ) -> KeyPress:
        held = {m.lower() for m in modifiers if m.lower() in MODIFIER_NAMES}
        key = _KEY_NAME_CHARACTERS.get(base, base)
        if len(key) == 1 and key.isalpha():
            if "shift" in held:
                key = key.upper()
            elif key.isupper():
                held.add("shift")
        return cls(
            key=key,
            shift="shift" in held,
            alt="alt" in held,
            ctrl="ctrl" in held,
            meta="meta" in held,
            in_text_input=in_text_input,
        )

    @property
    def has_modifiers(self) -> bool:
        return self.shift or self.alt or self.ctrl or self.meta

    @property
    def digit(self) -> int | None:
        """Return the digit value for ``0``-``9`` keys, else None."""
        if len(self.key) == 1 and self.key.isdigit():
            return int(self.key)
        return None

    @property
    def is_navigation_key(self) -> bool:
        return self.key in NAVIGATION_KEYS


def normalize_vim_key(key: str) -> str:
    """Map h/j/k/l (either case) to arrow key names, leave others unchanged."""
    return VIM_KEYS.get(key.lower(), key)


__all__ = [
    "MODIFIER_NAMES",
    "NAVIGATION_KEYS",
    "VIM_KEYS",
    "KeyPress",
    "normalize_vim_key",
]
