"""Main application class for the Coral Tracker TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual import events
from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler
from textual.widgets import Input, TextArea

from coraltrack.constants import APP_TITLE
from coraltrack.constants.values import ROUTE_HOME, ROUTE_TEMPLE_PREFIX, ROUTE_TRACK_PREFIX
from coraltrack.controllers import DataSourceError, TrackerController
from coraltrack.keyboard.app import APP_BINDINGS
from coraltrack.keyboard.dispatch import KeyboardDispatchHub
from coraltrack.keyboard.interaction_mode import InteractionModeDetector
from coraltrack.keyboard.keys import KeyPress
from coraltrack.keyboard.navigation import route_slug
from coraltrack.models.state.app_settings import StateLoadError, StateSaveError
from coraltrack.models.state.config_manager import AppSettings, ConfigLoadError, ConfigManager
from coraltrack.models.state.ui_state import UIState, UIStateManager
from coraltrack.screens import (
    AltarScreen,
    BaseScreen,
    CategoryScreen,
    OverviewScreen,
    ScreenStackModalObserver,
    ShortcutsHelpScreen,
)
from coraltrack.utils.global_search import GlobalSearchIndex

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    """Set the root log level and send records to the Textual console."""
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        root.addHandler(TextualHandler())


class CoralTrackerApp(App[None]):
    """Main TUI application for Coral Tracker."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings
    ui_state: UIState

    def __init__(
        self,
        data_path: Path | None = None,
        state_path: Path | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.data_path = data_path
        self.state_path = state_path

        # Load settings on startup
        self._load_settings()
        configure_logging(self.settings.log_level)
        self._load_ui_state()

        self.controller = TrackerController(self._optional_path(self.settings.data_path))
        self.search_index = GlobalSearchIndex(self.settings.search_result_limit)
        self.interaction_mode = InteractionModeDetector(self.settings.mouse_movement_threshold)
        self.interaction_mode.add_listener(lambda _: self._refresh_page())
        self.hub = KeyboardDispatchHub(
            self,
            self.ui_state,
            modal_observer=ScreenStackModalObserver(self),
            interaction_mode=self.interaction_mode,
        )

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load()
        except ConfigLoadError as e:
            logger.warning("Using default settings: %s", e)
            self.settings = AppSettings()

        # Apply CLI overrides if provided
        if self.data_path is not None:
            self.settings.data_path = str(self.data_path)
        if self.state_path is not None:
            self.settings.state_path = str(self.state_path)

    def _load_ui_state(self) -> None:
        try:
            self.ui_state = UIStateManager.load(Path(self.settings.state_path).expanduser())
        except StateLoadError as e:
            logger.warning("Starting with fresh UI state: %s", e)
            self.ui_state = UIState()
        self.ui_state.set_history_limit(self.settings.grid_focus_history_limit)

    @staticmethod
    def _optional_path(value: str) -> Path | None:
        raw_value = value.strip()
        if not raw_value:
            return None
        return Path(raw_value).expanduser().absolute()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def on_mount(self) -> None:
        """Load tracker data and open the dashboard."""
        try:
            data = await self.controller.fetch_all()
        except DataSourceError as e:
            logger.warning("%s", e)
            self.notify(str(e), title="Tracker data", severity="warning")
            data = self.controller.data
        if data.save_id is not None:
            self.ui_state.current_save_id = data.save_id
        self.search_index.build(data.categories, data.npcs)
        self.navigate(ROUTE_HOME)

    def on_unmount(self) -> None:
        """Persist UI state and tracker progress when the app exits."""
        try:
            UIStateManager.save(self.ui_state, Path(self.settings.state_path).expanduser())
        except StateSaveError as e:
            logger.warning("%s", e)
        try:
            self.controller.save()
        except DataSourceError as e:
            logger.warning("%s", e)

    # =========================================================================
    # Input routing
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        press = KeyPress.from_textual(
            event,
            in_text_input=isinstance(self.focused, (Input, TextArea)),
        )
        if self.hub.handle_key(press):
            event.stop()
            event.prevent_default()
            self._refresh_page()

    async def on_event(self, event: events.Event) -> None:
        if isinstance(event, events.MouseMove) and not event.is_forwarded:
            self.interaction_mode.on_pointer_move(event.screen_x, event.screen_y)
        await super().on_event(event)

    def action_toggle_help(self) -> None:
        """Toggle the shortcuts panel."""
        self.hub.handle_key(KeyPress("?", shift=True))
        self._refresh_page()

    def set_help_open(self, open_: bool) -> None:
        self.hub.set_help_open(open_)
        self._refresh_page()

    def _page(self) -> BaseScreen | None:
        """Return the topmost tracker page, skipping modals above it."""
        for screen in reversed(self.screen_stack):
            if isinstance(screen, BaseScreen):
                return screen
        return None

    def _refresh_page(self) -> None:
        page = self._page()
        if page is not None and page.is_mounted:
            page.refresh_from_state()

    # =========================================================================
    # KeyboardHost
    # =========================================================================

    def navigate(self, path: str) -> None:
        """Open the page for ``path``; unknown routes are ignored."""
        current = self._page()
        if current is not None and current.route == path:
            return
        slug = route_slug(path)
        if path.startswith(ROUTE_TRACK_PREFIX) and slug is not None:
            screen: BaseScreen = CategoryScreen(slug, path)
        elif path.startswith(ROUTE_TEMPLE_PREFIX) and slug is not None:
            screen = AltarScreen(slug, path)
        elif path in OverviewScreen.ROUTES:
            screen = OverviewScreen(path)
        else:
            logger.debug("Ignoring unknown route %s", path)
            return

        logger.debug("Navigate %s -> %s", self.hub.location, path)
        self.hub.set_location(path)
        if isinstance(self.screen, BaseScreen):
            self.switch_screen(screen)
        else:
            self.push_screen(screen)

    def focus_search(self) -> None:
        page = self._page()
        if page is not None:
            page.focus_search()

    def blur_input(self) -> None:
        self.set_focus(None)

    def clear_search(self) -> None:
        self.ui_state.search_query = ""
        page = self._page()
        if page is not None:
            page.clear_search()

    def set_help_visible(self, visible: bool) -> None:
        help_open = isinstance(self.screen, ShortcutsHelpScreen)
        if visible and not help_open:
            self.push_screen(ShortcutsHelpScreen(restore_focus=self.focused))
        elif not visible and help_open:
            self.pop_screen()


__all__ = [
    "CoralTrackerApp",
    "configure_logging",
]
