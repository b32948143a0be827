"""UI state store and its persistence.

The store mirrors what the tracker remembers between keystrokes (filters,
search text, help panel) and between sessions (save slot, sidebar,
per-category grid focus). Only the latter group is written to disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from coraltrack.constants.defaults import SIDEBAR_OPEN_DEFAULT
from coraltrack.constants.enums import Season
from coraltrack.constants.limits import GRID_FOCUS_HISTORY_LIMIT, GRID_FOCUS_HISTORY_MIN
from coraltrack.models.state.app_settings import StateLoadError, StateSaveError

logger = logging.getLogger(__name__)

PERSISTED_FIELDS = frozenset({"current_save_id", "sidebar_open", "grid_focus_index"})


def _toggle(values: list[str], value: str) -> list[str]:
    if value in values:
        return [v for v in values if v != value]
    return [*values, value]


class UIState(BaseModel):
    """Mutable UI state shared by the app, screens and navigators."""

    model_config = ConfigDict(populate_by_name=True)

    # Persisted
    current_save_id: int | None = None
    sidebar_open: bool = SIDEBAR_OPEN_DEFAULT
    grid_focus_index: dict[str, int] = Field(default_factory=dict)

    # Session only
    selected_seasons: list[str] = Field(default_factory=list)
    selected_times: list[str] = Field(default_factory=list)
    selected_locations: list[str] = Field(default_factory=list)
    show_completed: bool | None = None  # None = all, True = completed, False = incomplete
    search_query: str = ""
    shortcuts_panel_open: bool = False

    _history_limit: int = PrivateAttr(default=GRID_FOCUS_HISTORY_LIMIT)

    # =========================================================================
    # Filters
    # =========================================================================

    def toggle_season(self, season: Season | str) -> None:
        value = season.value if isinstance(season, Season) else season
        self.selected_seasons = _toggle(self.selected_seasons, value)

    def toggle_time(self, time_of_day: str) -> None:
        self.selected_times = _toggle(self.selected_times, time_of_day)

    def toggle_location(self, location: str) -> None:
        self.selected_locations = _toggle(self.selected_locations, location)

    def clear_all_filters(self) -> None:
        """Reset search text and every filter selection."""
        self.search_query = ""
        self.selected_seasons = []
        self.selected_times = []
        self.selected_locations = []
        self.show_completed = None

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.search_query
            or self.selected_seasons
            or self.selected_times
            or self.selected_locations
            or self.show_completed is not None
        )

    # =========================================================================
    # UI
    # =========================================================================

    def toggle_sidebar(self) -> None:
        self.sidebar_open = not self.sidebar_open

    # =========================================================================
    # Grid focus
    # =========================================================================

    def set_history_limit(self, limit: int) -> None:
        """Cap how many categories keep a remembered grid focus."""
        self._history_limit = max(GRID_FOCUS_HISTORY_MIN, limit)
        self._evict_focus_history()

    def get_grid_focus_index(self, category_slug: str) -> int | None:
        return self.grid_focus_index.get(category_slug)

    def set_grid_focus_index(self, category_slug: str, index: int) -> None:
        """Remember the focused index for a category.

        The most recently written category moves to the end of the map and
        the oldest entries are dropped once the history limit is exceeded.
        """
        self.grid_focus_index.pop(category_slug, None)
        self.grid_focus_index[category_slug] = index
        self._evict_focus_history()

    def _evict_focus_history(self) -> None:
        while len(self.grid_focus_index) > self._history_limit:
            oldest = next(iter(self.grid_focus_index))
            del self.grid_focus_index[oldest]
            logger.debug("Evicted remembered grid focus for %s", oldest)


class UIStateManager:
    """Read and write the persisted subset of UIState as YAML."""

    @staticmethod
    def load(path: Path) -> UIState:
        """Load persisted UI state.

        Returns:
            Loaded state, or a fresh UIState when the file does not exist.

        Raises:
            StateLoadError: If the file is unreadable or invalid.
        """
        if not path.exists():
            return UIState()
        try:
            with path.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as err:
            raise StateLoadError(f"Cannot read UI state from {path}: {err}") from err
        if not isinstance(raw, dict):
            raise StateLoadError(f"UI state file {path} must contain a mapping")

        persisted = {key: value for key, value in raw.items() if key in PERSISTED_FIELDS}
        try:
            return UIState.model_validate(persisted)
        except ValidationError as err:
            raise StateLoadError(f"Invalid UI state in {path}: {err}") from err

    @staticmethod
    def save(state: UIState, path: Path) -> None:
        """Write the persisted subset of ``state`` to ``path``.

        Raises:
            StateSaveError: If the file cannot be written.
        """
        payload = state.model_dump(include=set(PERSISTED_FIELDS))
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as handle:
                yaml.dump(payload, handle, default_flow_style=False, sort_keys=False)
        except OSError as err:
            raise StateSaveError(f"Cannot write UI state to {path}: {err}") from err


__all__ = [
    "PERSISTED_FIELDS",
    "UIState",
    "UIStateManager",
]
