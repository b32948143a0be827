"""Unit tests for GridNavigator.

Tests cover:
- Bounded movement (no wrapping) in a 10-item, 3-column grid
- Home/End jumps and activation callbacks
- Remembered focus per category, clamped on restore
- Registration with the dispatch hub
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from coraltrack.constants.enums import JumpPosition, MoveDirection, NavigationOwner
from coraltrack.keyboard.capabilities import DirectFocusHandle
from coraltrack.keyboard.dispatch import KeyboardDispatchHub
from coraltrack.keyboard.keys import KeyPress
from coraltrack.models.state.ui_state import UIState
from coraltrack.navigation.filters import RovingFilterNavigator
from coraltrack.navigation.grid import GridAction, GridNavigator


@pytest.fixture
def store() -> UIState:
    return UIState()


def _grid(store: UIState, **kwargs) -> GridNavigator:
    options = {"item_count": 10, "column_count": 3, "category_slug": "fish"}
    options.update(kwargs)
    return GridNavigator(store, **options)


def _move(grid: GridNavigator, direction: MoveDirection) -> None:
    grid.handle_action(GridAction.move(direction))


# =============================================================================
# Movement
# =============================================================================


class TestGridMovement:
    """Layout for 10 items in 3 columns:

    0 1 2
    3 4 5
    6 7 8
    9
    """

    def test_starts_at_first_item(self, store: UIState) -> None:
        grid = _grid(store)
        assert grid.focused_index == 0
        assert grid.focused_position == (0, 0)

    def test_right_and_down(self, store: UIState) -> None:
        grid = _grid(store)
        _move(grid, MoveDirection.RIGHT)
        _move(grid, MoveDirection.DOWN)
        assert grid.focused_index == 4
        assert grid.focused_position == (1, 1)

    @pytest.mark.parametrize(
        ("start", "direction"),
        [
            (0, MoveDirection.UP),
            (1, MoveDirection.UP),
            (3, MoveDirection.LEFT),
            (2, MoveDirection.RIGHT),
            (9, MoveDirection.RIGHT),
            (9, MoveDirection.DOWN),
            (8, MoveDirection.DOWN),
        ],
    )
    def test_moves_past_an_edge_do_nothing(
        self, store: UIState, start: int, direction: MoveDirection
    ) -> None:
        grid = _grid(store)
        grid.set_focused_index(start)
        assert grid.handle_action(GridAction.move(direction)) is True
        assert grid.focused_index == start

    def test_down_into_partial_last_row(self, store: UIState) -> None:
        grid = _grid(store)
        grid.set_focused_index(6)
        _move(grid, MoveDirection.DOWN)
        assert grid.focused_index == 9

    def test_jumps(self, store: UIState) -> None:
        grid = _grid(store)
        grid.handle_action(GridAction.jump(JumpPosition.LAST))
        assert grid.focused_index == 9
        grid.handle_action(GridAction.jump(JumpPosition.FIRST))
        assert grid.focused_index == 0

    def test_out_of_range_focus_is_ignored(self, store: UIState) -> None:
        grid = _grid(store)
        grid.set_focused_index(42)
        grid.set_focused_index(-1)
        assert grid.focused_index == 0

    def test_scroller_follows_focus(self, store: UIState) -> None:
        scroller = MagicMock()
        grid = _grid(store, scroller=scroller)
        _move(grid, MoveDirection.DOWN)
        scroller.scroll_to_index.assert_called_with(3)


# =============================================================================
# Callbacks
# =============================================================================


class TestGridCallbacks:
    """Test activation callbacks receive the focused index."""

    def test_select_details_and_hearts(self, store: UIState) -> None:
        on_select, on_details, on_hearts = MagicMock(), MagicMock(), MagicMock()
        grid = _grid(
            store, on_select=on_select, on_details=on_details, on_hearts_change=on_hearts
        )
        grid.set_focused_index(5)

        grid.handle_action(GridAction.select())
        grid.handle_action(GridAction.details())
        grid.handle_action(GridAction.hearts(1))
        grid.handle_action(GridAction.hearts(-3))

        on_select.assert_called_once_with(5)
        on_details.assert_called_once_with(5)
        assert [call.args for call in on_hearts.call_args_list] == [(5, 1), (5, -1)]

    def test_missing_callback_is_noop(self, store: UIState) -> None:
        grid = _grid(store)
        assert grid.handle_action(GridAction.hearts(1)) is True

    def test_empty_grid_drops_actions(self, store: UIState) -> None:
        on_select = MagicMock()
        grid = _grid(store, item_count=0, on_select=on_select)
        assert grid.focused_index == -1
        assert grid.focused_position is None
        assert grid.handle_action(GridAction.select()) is True
        on_select.assert_not_called()


# =============================================================================
# Persistence
# =============================================================================


class TestGridFocusMemory:
    """Test remembered focus per category."""

    def test_focus_survives_remount(self, store: UIState) -> None:
        grid = _grid(store)
        grid.set_focused_index(7)
        assert _grid(store).focused_index == 7

    def test_categories_remember_independently(self, store: UIState) -> None:
        _grid(store).set_focused_index(4)
        _grid(store, category_slug="gems").set_focused_index(2)
        assert _grid(store).focused_index == 4
        assert _grid(store, category_slug="gems").focused_index == 2

    def test_restored_focus_is_clamped(self, store: UIState) -> None:
        store.set_grid_focus_index("fish", 50)
        grid = _grid(store)
        assert grid.focused_index == 9
        grid.update(item_count=4)
        assert grid.focused_index == 3

    def test_zero_columns_rejected(self, store: UIState) -> None:
        with pytest.raises(ValueError):
            _grid(store, column_count=0)
        grid = _grid(store)
        with pytest.raises(ValueError):
            grid.update(column_count=0)

    def test_column_change_keeps_index(self, store: UIState) -> None:
        grid = _grid(store)
        grid.set_focused_index(4)
        grid.update(column_count=2)
        assert grid.focused_index == 4
        assert grid.focused_position == (2, 0)


# =============================================================================
# Hub registration
# =============================================================================


class TestGridHubRegistration:
    """Test mount/unmount against the dispatch hub."""

    def test_mount_registers_and_handles_keys(self, store: UIState) -> None:
        hub = KeyboardDispatchHub(MagicMock(), store)
        grid = _grid(store)
        grid.mount(hub)
        assert hub.owner is NavigationOwner.GRID

        assert hub.handle_key(KeyPress("l")) is True
        assert grid.focused_index == 1

        grid.unmount()
        assert hub.owner is NavigationOwner.NONE
        assert hub.handle_key(KeyPress("right")) is False

    def test_disable_unregisters(self, store: UIState) -> None:
        hub = KeyboardDispatchHub(MagicMock(), store)
        grid = _grid(store)
        grid.mount(hub)
        grid.set_enabled(False)
        assert hub.owner is NavigationOwner.NONE
        grid.set_enabled(True)
        assert hub.owner is NavigationOwner.GRID

    def test_focus_indicator_hidden_in_filter_mode(self, store: UIState) -> None:
        hub = KeyboardDispatchHub(MagicMock(), store)
        grid = _grid(store)
        assert grid.show_focus_indicator
        grid.mount(hub)
        filters = RovingFilterNavigator(DirectFocusHandle())
        filters.register_filter(0)(MagicMock())
        hub.register_filter_handler(filters)

        filters.activate()
        assert not grid.show_focus_indicator
        filters.exit()
        assert grid.show_focus_indicator
