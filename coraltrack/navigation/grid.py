"""Two-dimensional keyboard navigation over a category item grid.

Items form a logically one-dimensional list laid out in ``column_count``
columns, so index ``i`` sits at row ``i // column_count`` and column
``i % column_count``. Moves never wrap: a move past any edge leaves the
focus where it is. The focused index is remembered per category in the
UI state store and restored (clamped) the next time the grid mounts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from coraltrack.constants.enums import GridActionType, JumpPosition, MoveDirection
from coraltrack.constants.limits import GRID_COLUMN_COUNT_MIN
from coraltrack.keyboard.capabilities import Scroller

if TYPE_CHECKING:
    from coraltrack.keyboard.dispatch import KeyboardDispatchHub
    from coraltrack.models.state.ui_state import UIState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridAction:
    """An action the dispatch hub forwards to the registered grid."""

    type: GridActionType
    direction: MoveDirection | None = None
    position: JumpPosition | None = None
    delta: int = 0

    @classmethod
    def move(cls, direction: MoveDirection) -> GridAction:
        return cls(GridActionType.MOVE, direction=direction)

    @classmethod
    def jump(cls, position: JumpPosition) -> GridAction:
        return cls(GridActionType.JUMP, position=position)

    @classmethod
    def select(cls) -> GridAction:
        return cls(GridActionType.SELECT)

    @classmethod
    def details(cls) -> GridAction:
        return cls(GridActionType.DETAILS)

    @classmethod
    def hearts(cls, delta: int) -> GridAction:
        return cls(GridActionType.HEARTS, delta=1 if delta > 0 else -1)

    @classmethod
    def toggle_offered(cls) -> GridAction:
        return cls(GridActionType.TOGGLE_OFFERED)


GridActionHandler = Callable[[GridAction], bool]


class GridNavigator:
    """Track and move the focused item of a category grid."""

    def __init__(
        self,
        store: UIState,
        *,
        item_count: int,
        column_count: int,
        category_slug: str,
        on_select: Callable[[int], None] | None = None,
        on_details: Callable[[int], None] | None = None,
        on_hearts_change: Callable[[int, int], None] | None = None,
        on_toggle_offered: Callable[[int], None] | None = None,
        scroller: Scroller | None = None,
    ) -> None:
        """Initialize the grid navigator.

        Args:
            store: UI state store holding remembered focus per category.
            item_count: Number of items currently shown.
            column_count: Number of grid columns, at least 1.
            category_slug: Key under which focus is remembered.
            on_select: Primary activation (toggle completion).
            on_details: Open the detail view for an index.
            on_hearts_change: Adjust NPC hearts by +1/-1.
            on_toggle_offered: Toggle a temple requirement's offered state.
            scroller: Keeps the focused item visible.

        Raises:
            ValueError: If ``column_count`` is less than 1.
        """
        self._store = store
        self._item_count = max(0, item_count)
        self._column_count = self._validate_columns(column_count)
        self._category_slug = category_slug
        self.on_select = on_select
        self.on_details = on_details
        self.on_hearts_change = on_hearts_change
        self.on_toggle_offered = on_toggle_offered
        self._scroller = scroller
        self._hub: KeyboardDispatchHub | None = None
        self._enabled = True

    @staticmethod
    def _validate_columns(column_count: int) -> int:
        if column_count < GRID_COLUMN_COUNT_MIN:
            raise ValueError(f"column_count must be >= {GRID_COLUMN_COUNT_MIN}, got {column_count}")
        return column_count

    # =========================================================================
    # State
    # =========================================================================

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def category_slug(self) -> str:
        return self._category_slug

    @property
    def focused_index(self) -> int:
        """Current focus, restored from the store and clamped; -1 when empty."""
        if self._item_count == 0:
            return -1
        remembered = self._store.get_grid_focus_index(self._category_slug)
        if remembered is None or remembered < 0:
            return 0
        return min(remembered, self._item_count - 1)

    @property
    def focused_position(self) -> tuple[int, int] | None:
        """(row, column) of the focused item, or None when empty."""
        index = self.focused_index
        if index < 0:
            return None
        return divmod(index, self._column_count)

    @property
    def show_focus_indicator(self) -> bool:
        return self._hub is None or not self._hub.is_filter_mode_active

    def update(
        self,
        *,
        item_count: int | None = None,
        column_count: int | None = None,
        category_slug: str | None = None,
    ) -> None:
        """Apply new grid dimensions or category after a re-render."""
        if item_count is not None:
            self._item_count = max(0, item_count)
        if column_count is not None:
            self._column_count = self._validate_columns(column_count)
        if category_slug is not None and category_slug != self._category_slug:
            self._category_slug = category_slug
            self.scroll_focused_into_view()

    def set_focused_index(self, index: int) -> None:
        """Focus ``index`` if it is in range, remembering it for the category."""
        if not 0 <= index < self._item_count:
            return
        self._store.set_grid_focus_index(self._category_slug, index)
        logger.debug("Grid %s focus -> %d", self._category_slug, index)
        if self._scroller is not None:
            self._scroller.scroll_to_index(index)

    def scroll_focused_into_view(self) -> None:
        index = self.focused_index
        if index >= 0 and self._scroller is not None:
            self._scroller.scroll_to_index(index)

    # =========================================================================
    # Actions
    # =========================================================================

    def _target_for_move(self, current: int, direction: MoveDirection) -> int:
        columns = self._column_count
        if direction is MoveDirection.UP:
            target = current - columns
            return target if target >= 0 else current
        if direction is MoveDirection.DOWN:
            target = current + columns
            return target if target < self._item_count else current
        if direction is MoveDirection.LEFT:
            return current - 1 if current % columns > 0 else current
        if current % columns < columns - 1 and current + 1 < self._item_count:
            return current + 1
        return current

    def handle_action(self, action: GridAction) -> bool:
        """Apply a grid action.

        Boundary moves and actions without a callback are no-ops, but the
        action still counts as handled.

        Returns:
            Always True.
        """
        if self._item_count == 0:
            logger.debug("Grid %s is empty, dropping %s", self._category_slug, action.type.value)
            return True

        current = self.focused_index

        if action.type is GridActionType.MOVE and action.direction is not None:
            target = self._target_for_move(current, action.direction)
            if target != current:
                self.set_focused_index(target)
        elif action.type is GridActionType.JUMP:
            if action.position is JumpPosition.LAST:
                self.set_focused_index(self._item_count - 1)
            else:
                self.set_focused_index(0)
        elif action.type is GridActionType.SELECT:
            if self.on_select is not None:
                self.on_select(current)
        elif action.type is GridActionType.DETAILS:
            if self.on_details is not None:
                self.on_details(current)
        elif action.type is GridActionType.HEARTS:
            if self.on_hearts_change is not None:
                self.on_hearts_change(current, action.delta)
        elif action.type is GridActionType.TOGGLE_OFFERED:
            if self.on_toggle_offered is not None:
                self.on_toggle_offered(current)
        return True

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def enabled(self) -> bool:
        return self._enabled

    def mount(self, hub: KeyboardDispatchHub) -> None:
        """Register with the dispatch hub and scroll restored focus into view."""
        self._hub = hub
        if self._enabled:
            hub.register_grid_handler(self.handle_action)
        self.scroll_focused_into_view()

    def unmount(self) -> None:
        if self._hub is not None:
            self._hub.unregister_grid_handler(self.handle_action)
        self._hub = None

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable keyboard handling, e.g. while a modal is open."""
        if enabled == self._enabled:
            return
        self._enabled = enabled
        if self._hub is None:
            return
        if enabled:
            self._hub.register_grid_handler(self.handle_action)
        else:
            self._hub.unregister_grid_handler(self.handle_action)


__all__ = [
    "GridAction",
    "GridActionHandler",
    "GridNavigator",
]
