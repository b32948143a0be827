"""Unit tests for InteractionModeDetector."""

from __future__ import annotations

from unittest.mock import MagicMock

from coraltrack.constants.enums import InteractionMode
from coraltrack.keyboard.interaction_mode import InteractionModeDetector
from coraltrack.keyboard.keys import KeyPress


class TestInteractionModeKeys:
    """Test switching to keyboard mode."""

    def test_starts_in_mouse_mode(self) -> None:
        detector = InteractionModeDetector()
        assert detector.mode is InteractionMode.MOUSE
        assert not detector.is_keyboard

    def test_navigation_key_switches_to_keyboard(self) -> None:
        detector = InteractionModeDetector()
        detector.on_key(KeyPress("down"))
        assert detector.is_keyboard

    def test_other_keys_keep_mouse_mode(self) -> None:
        detector = InteractionModeDetector()
        detector.on_key(KeyPress("x"))
        detector.on_key(KeyPress("?", shift=True))
        assert detector.mode is InteractionMode.MOUSE


class TestInteractionModePointer:
    """Test the pointer movement threshold."""

    def _keyboard_detector(self, threshold: int = 5) -> InteractionModeDetector:
        detector = InteractionModeDetector(threshold)
        detector.on_pointer_move(0, 0)
        detector.on_key(KeyPress("up"))
        return detector

    def test_small_move_keeps_keyboard_mode(self) -> None:
        detector = self._keyboard_detector()
        detector.on_pointer_move(4, 4)
        assert detector.is_keyboard

    def test_move_at_threshold_switches_to_mouse(self) -> None:
        detector = self._keyboard_detector()
        detector.on_pointer_move(0, 5)
        assert detector.mode is InteractionMode.MOUSE

    def test_distance_measured_from_last_position(self) -> None:
        detector = self._keyboard_detector()
        detector.on_pointer_move(3, 0)
        detector.on_pointer_move(6, 0)
        assert detector.is_keyboard
        detector.on_pointer_move(11, 0)
        assert not detector.is_keyboard

    def test_first_move_only_records_position(self) -> None:
        detector = InteractionModeDetector()
        detector.on_key(KeyPress("up"))
        detector.on_pointer_move(50, 50)
        assert detector.is_keyboard

    def test_negative_threshold_clamps_to_zero(self) -> None:
        detector = InteractionModeDetector()
        detector.threshold = -3
        assert detector.threshold == 0


class TestInteractionModeListeners:
    """Test change notifications."""

    def test_listener_called_on_change_only(self) -> None:
        detector = InteractionModeDetector()
        listener = MagicMock()
        detector.add_listener(listener)
        detector.on_key(KeyPress("down"))
        detector.on_key(KeyPress("up"))
        listener.assert_called_once_with(InteractionMode.KEYBOARD)

    def test_removed_listener_not_called(self) -> None:
        detector = InteractionModeDetector()
        listener = MagicMock()
        detector.add_listener(listener)
        detector.remove_listener(listener)
        detector.on_key(KeyPress("down"))
        listener.assert_not_called()
