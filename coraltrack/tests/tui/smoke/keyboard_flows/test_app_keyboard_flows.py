"""Smoke tests for keyboard flows through the running app.

Each test drives the app with Textual's pilot and checks which page is
shown and what the UI state store holds afterwards.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from textual.widgets import Input

from coraltrack.app import CoralTrackerApp
from coraltrack.constants.enums import NavigationLevel, NavigationOwner
from coraltrack.screens import (
    AltarScreen,
    CategoryScreen,
    OverviewScreen,
    ShortcutsHelpScreen,
)
from coraltrack.widgets import FilterButton

# =============================================================================
# Page navigation
# =============================================================================


class TestPageNavigation:
    """Digit jumps and navigation chords."""

    @pytest.mark.asyncio
    async def test_starts_on_dashboard(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, OverviewScreen)
            assert app.screen.route == "/"
            assert app.ui_state.current_save_id == 2

    @pytest.mark.asyncio
    async def test_nothing_focused_on_start(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.focused is None

    @pytest.mark.asyncio
    async def test_fresh_page_takes_keys_without_escape(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("1")
            await pilot.pause()
            assert app.focused is None
            assert app.ui_state.search_query == ""

            await pilot.press("end")
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, CategoryScreen)
            assert screen.navigator is not None
            assert screen.navigator.focused_index == 2

            await pilot.press("2")
            await pilot.pause()
            assert isinstance(app.screen, CategoryScreen)
            assert app.screen.category_slug == "insects"
            assert app.focused is None
            assert app.ui_state.search_query == ""

    @pytest.mark.asyncio
    async def test_digit_opens_category(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("1")
            await pilot.pause()
            assert isinstance(app.screen, CategoryScreen)
            assert app.screen.category_slug == "fish"
            assert app.hub.location == "/track/fish"

    @pytest.mark.asyncio
    async def test_zero_opens_tenth_category(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("0")
            await pilot.pause()
            assert isinstance(app.screen, CategoryScreen)
            assert app.screen.category_slug == "artisan-products"

    @pytest.mark.asyncio
    async def test_temple_and_home_chords(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("T")
            await pilot.pause()
            assert isinstance(app.screen, OverviewScreen)
            assert app.screen.route == "/temple"
            await pilot.press("H")
            await pilot.pause()
            assert app.screen.route == "/"

    @pytest.mark.asyncio
    async def test_sidebar_toggle(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("[")
            await pilot.pause()
            assert app.ui_state.sidebar_open is False
            assert app.screen.query_one("#sidebar").display is False


# =============================================================================
# Help panel
# =============================================================================


class TestHelpPanel:
    """The shortcuts panel and its modal behavior."""

    @pytest.mark.asyncio
    async def test_question_mark_opens_and_escape_closes(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("?")
            await pilot.pause()
            assert isinstance(app.screen, ShortcutsHelpScreen)
            assert app.ui_state.shortcuts_panel_open is True

            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(app.screen, OverviewScreen)
            assert app.ui_state.shortcuts_panel_open is False

    @pytest.mark.asyncio
    async def test_closing_returns_focus_to_search(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("/")
            await pilot.pause()
            await pilot.press("?")
            await pilot.pause()
            assert isinstance(app.screen, ShortcutsHelpScreen)
            assert not isinstance(app.focused, Input)

            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(app.screen, OverviewScreen)
            assert isinstance(app.focused, Input)
            assert app.focused.id == "search"

    @pytest.mark.asyncio
    async def test_navigation_suppressed_while_open(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("?")
            await pilot.pause()
            await pilot.press("1")
            await pilot.pause()
            assert isinstance(app.screen, ShortcutsHelpScreen)
            assert app.hub.location == "/"


# =============================================================================
# Search
# =============================================================================


class TestSearch:
    """Search input focus and filtering."""

    @pytest.mark.asyncio
    async def test_slash_focuses_search(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("/")
            await pilot.pause()
            assert isinstance(app.focused, Input)
            assert app.focused.id == "search"

    @pytest.mark.asyncio
    async def test_typing_filters_grid(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("1")
            await pilot.pause()
            await pilot.press("/", "t", "u")
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, CategoryScreen)
            assert app.ui_state.search_query == "tu"
            assert [item.name for item in screen.visible] == ["Tuna"]

    @pytest.mark.asyncio
    async def test_digits_type_into_search(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("/", "2")
            await pilot.pause()
            assert isinstance(app.screen, OverviewScreen)
            assert app.ui_state.search_query == "2"


# =============================================================================
# Grid and altar pages
# =============================================================================


class TestGridPage:
    """Keyboard control of the item grid."""

    @pytest.mark.asyncio
    async def test_end_and_enter(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("1")
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, CategoryScreen)
            assert app.hub.owner is NavigationOwner.GRID

            await pilot.press("end")
            await pilot.pause()
            assert screen.navigator is not None
            assert screen.navigator.focused_index == 2
            assert app.ui_state.get_grid_focus_index("fish") == 2

            await pilot.press("enter")
            await pilot.pause()
            assert sum(1 for item in app.controller.items_for("fish") if item.completed) == 2

    @pytest.mark.asyncio
    async def test_filter_mode_takes_ownership(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("1")
            await pilot.pause()
            await pilot.press("f")
            await pilot.pause()
            assert app.hub.owner is NavigationOwner.FILTERS

            await pilot.press("escape")
            await pilot.pause()
            assert app.hub.owner is NavigationOwner.GRID

    @pytest.mark.asyncio
    async def test_arrow_keys_rove_between_filter_buttons(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.press("1")
            await pilot.pause()
            await pilot.press("f")
            await pilot.pause()
            assert isinstance(app.focused, FilterButton)
            assert app.focused.filter_index == 0

            await pilot.press("right")
            await pilot.pause()
            assert isinstance(app.focused, FilterButton)
            assert app.focused.filter_index == 1
            assert app.hub.owner is NavigationOwner.FILTERS

    @pytest.mark.asyncio
    async def test_page_switch_in_filter_mode_hands_keys_to_new_grid(
        self, app: CoralTrackerApp
    ) -> None:
        async with app.run_test() as pilot:
            await pilot.press("1")
            await pilot.pause()
            await pilot.press("f")
            await pilot.pause()
            assert app.hub.owner is NavigationOwner.FILTERS

            await pilot.press("9")
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, CategoryScreen)
            assert screen.category_slug == "npcs"
            assert app.hub.owner is NavigationOwner.GRID
            assert app.hub.is_filter_mode_active is False

            await pilot.press("enter")
            await pilot.pause()
            assert app.controller.items_for("npcs")[0].completed is True

    @pytest.mark.asyncio
    async def test_progress_saved_on_exit(
        self, app: CoralTrackerApp, data_file: Path, tmp_path: Path
    ) -> None:
        async with app.run_test() as pilot:
            await pilot.press("1")
            await pilot.pause()
            await pilot.press("home", "enter")
            await pilot.pause()
        raw = yaml.safe_load(data_file.read_text())
        assert sum(1 for item in raw["categories"]["fish"] if item["completed"]) == 2
        state = yaml.safe_load((tmp_path / "state.yaml").read_text())
        assert state["grid_focus_index"] == {"fish": 0}


class TestAltarPage:
    """Two-level offering navigation."""

    @pytest.mark.asyncio
    async def test_enter_items_toggle_and_escape(self, app: CoralTrackerApp) -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            app.navigate("/temple/catch-altar")
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, AltarScreen)
            assert app.hub.owner is NavigationOwner.OFFERING

            await pilot.press("enter")
            await pilot.pause()
            assert screen.navigator is not None
            assert screen.navigator.level is NavigationLevel.ITEMS

            await pilot.press("enter")
            await pilot.pause()
            assert app.controller.offerings_for("catch-altar")[0].items[0].offered is True

            await pilot.press("escape")
            await pilot.pause()
            assert screen.navigator.level is NavigationLevel.OFFERINGS
