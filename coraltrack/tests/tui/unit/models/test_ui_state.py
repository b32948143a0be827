"""Unit tests for UIState and UIStateManager.

Tests cover:
- Filter toggles and clearing
- Grid focus history eviction
- YAML persistence of the remembered subset
- Load/save error handling
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from coraltrack.constants.enums import Season
from coraltrack.models.state.app_settings import ConfigError, StateLoadError, StateSaveError
from coraltrack.models.state.ui_state import PERSISTED_FIELDS, UIState, UIStateManager

# =============================================================================
# Filters
# =============================================================================


class TestUIStateFilters:
    """Test filter state operations."""

    def test_toggle_season_accepts_enum_and_string(self) -> None:
        state = UIState()
        state.toggle_season(Season.FALL)
        state.toggle_season("winter")
        assert state.selected_seasons == ["fall", "winter"]
        state.toggle_season("fall")
        assert state.selected_seasons == ["winter"]

    def test_toggle_time_and_location(self) -> None:
        state = UIState()
        state.toggle_time("night")
        state.toggle_location("beach")
        assert state.selected_times == ["night"]
        assert state.selected_locations == ["beach"]

    def test_clear_all_filters(self) -> None:
        state = UIState(search_query="tuna", show_completed=False)
        state.toggle_season("spring")
        state.toggle_time("morning")
        assert state.has_active_filters
        state.clear_all_filters()
        assert not state.has_active_filters
        assert state.search_query == ""
        assert state.show_completed is None

    def test_toggle_sidebar(self) -> None:
        state = UIState(sidebar_open=True)
        state.toggle_sidebar()
        assert state.sidebar_open is False


# =============================================================================
# Grid focus history
# =============================================================================


class TestGridFocusHistory:
    """Test the remembered focus map."""

    def test_get_unknown_category(self) -> None:
        assert UIState().get_grid_focus_index("fish") is None

    def test_oldest_entry_evicted(self) -> None:
        state = UIState()
        state.set_history_limit(2)
        state.set_grid_focus_index("fish", 1)
        state.set_grid_focus_index("gems", 2)
        state.set_grid_focus_index("crops", 3)
        assert list(state.grid_focus_index) == ["gems", "crops"]

    def test_rewrite_refreshes_entry(self) -> None:
        state = UIState()
        state.set_history_limit(2)
        state.set_grid_focus_index("fish", 1)
        state.set_grid_focus_index("gems", 2)
        state.set_grid_focus_index("fish", 4)
        state.set_grid_focus_index("crops", 3)
        assert state.grid_focus_index == {"fish": 4, "crops": 3}

    def test_lowering_limit_evicts(self) -> None:
        state = UIState()
        for index, slug in enumerate(("fish", "gems", "crops")):
            state.set_grid_focus_index(slug, index)
        state.set_history_limit(0)
        assert list(state.grid_focus_index) == ["crops"]


# =============================================================================
# Persistence
# =============================================================================


class TestUIStateManager:
    """Test YAML persistence."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        state = UIStateManager.load(tmp_path / "missing.yaml")
        assert state == UIState()

    def test_round_trip_keeps_only_persisted_fields(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "state.yaml"
        state = UIState(current_save_id=7, sidebar_open=False, search_query="tuna")
        state.set_grid_focus_index("fish", 5)
        state.toggle_season("summer")

        UIStateManager.save(state, path)
        assert set(yaml.safe_load(path.read_text())) == PERSISTED_FIELDS

        loaded = UIStateManager.load(path)
        assert loaded.current_save_id == 7
        assert loaded.sidebar_open is False
        assert loaded.grid_focus_index == {"fish": 5}
        assert loaded.search_query == ""
        assert loaded.selected_seasons == []

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "state.yaml"
        path.write_text("sidebar_open: false\nsearch_query: tuna\n")
        loaded = UIStateManager.load(path)
        assert loaded.sidebar_open is False
        assert loaded.search_query == ""

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "state.yaml"
        path.write_text("sidebar_open: [unclosed\n")
        with pytest.raises(StateLoadError):
            UIStateManager.load(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "state.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(StateLoadError):
            UIStateManager.load(path)

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        path = tmp_path / "state.yaml"
        path.write_text("grid_focus_index: not-a-map\n")
        with pytest.raises(StateLoadError):
            UIStateManager.load(path)

    def test_write_failure_raises(self, tmp_path: Path) -> None:
        with (
            patch.object(Path, "open", side_effect=OSError("read-only")),
            pytest.raises(StateSaveError),
        ):
            UIStateManager.save(UIState(), tmp_path / "state.yaml")

    def test_errors_are_config_errors(self) -> None:
        assert issubclass(StateLoadError, ConfigError)
        assert issubclass(StateSaveError, ConfigError)
