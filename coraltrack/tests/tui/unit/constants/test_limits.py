"""Unit tests for limit constants in constants/limits.py."""

from __future__ import annotations

from coraltrack.constants.limits import (
    GRID_COLUMN_COUNT_MIN,
    GRID_FOCUS_HISTORY_LIMIT,
    GRID_FOCUS_HISTORY_MIN,
    ITEM_CARD_WIDTH,
    MOUSE_MOVEMENT_THRESHOLD,
    OFFERING_COLUMN_COUNT,
    SEARCH_RESULT_LIMIT,
    SEASON_SHORTCUT_COUNT,
)
from coraltrack.constants.timeouts import FILTER_BLUR_SETTLE_DELAY, GRID_INITIAL_SCROLL_DELAY


class TestLimits:
    """Test limit values and their relationships."""

    def test_mouse_threshold(self) -> None:
        assert MOUSE_MOVEMENT_THRESHOLD == 5

    def test_offering_columns(self) -> None:
        assert OFFERING_COLUMN_COUNT == 2

    def test_grid_minimum_column(self) -> None:
        assert GRID_COLUMN_COUNT_MIN == 1
        assert ITEM_CARD_WIDTH > 0

    def test_season_shortcuts(self) -> None:
        assert SEASON_SHORTCUT_COUNT == 4

    def test_focus_history_bounds(self) -> None:
        assert GRID_FOCUS_HISTORY_MIN >= 1
        assert GRID_FOCUS_HISTORY_LIMIT >= GRID_FOCUS_HISTORY_MIN

    def test_search_result_limit_positive(self) -> None:
        assert SEARCH_RESULT_LIMIT > 0


class TestTimeouts:
    """Test settle delays."""

    def test_delays_are_non_negative_floats(self) -> None:
        for delay in (FILTER_BLUR_SETTLE_DELAY, GRID_INITIAL_SCROLL_DELAY):
            assert isinstance(delay, float)
            assert delay >= 0.0
