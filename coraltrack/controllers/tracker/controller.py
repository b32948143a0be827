"""Tracker controller backed by a YAML data file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from coraltrack.constants.values import ALTAR_OFFERINGS, ALTAR_SLUG_MAP, NPC_CATEGORY_SLUG
from coraltrack.controllers.base.base_controller import BaseController, DataSourceError
from coraltrack.models.core.tracker_items import Offering, TrackedItem, TrackerData

logger = logging.getLogger(__name__)


def _default_offerings(altar_slug: str) -> list[Offering]:
    """Offerings of an altar without requirement data."""
    return [
        Offering(slug=slug, name=name)
        for name, slug, altar in ALTAR_OFFERINGS
        if ALTAR_SLUG_MAP.get(altar) == altar_slug
    ]


class TrackerController(BaseController):
    """Load tracker data from YAML and apply progress changes in memory.

    The data file maps category slugs to items, holds the NPC list and maps
    altar slugs to their offerings. Without a data file every page is
    empty and altars list their offerings without requirements.
    """

    def __init__(self, data_path: Path | None = None) -> None:
        super().__init__()
        self.data_path = data_path

    async def check_connection(self) -> bool:
        return self.data_path is not None and self.data_path.is_file()

    async def fetch_all(self) -> TrackerData:
        path = self.data_path
        if path is None or not await self.check_connection():
            logger.info("No tracker data file, starting empty")
            self.data = TrackerData()
            return self.data

        try:
            with open(path, encoding="utf-8") as f:
                payload = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise DataSourceError(f"Failed to read tracker data {self.data_path}: {e}") from e

        if not isinstance(payload, dict):
            raise DataSourceError(f"Tracker data {self.data_path} must be a mapping")

        try:
            self.data = TrackerData(**payload)
        except ValidationError as e:
            raise DataSourceError(f"Invalid tracker data {self.data_path}: {e}") from e

        logger.info(
            "Loaded %d categories, %d NPCs, %d altars",
            len(self.data.categories),
            len(self.data.npcs),
            len(self.data.altars),
        )
        return self.data

    def save(self) -> None:
        """Write the current data back to the data file, if there is one."""
        if self.data_path is None:
            return
        try:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.data_path, "w", encoding="utf-8") as f:
                yaml.dump(
                    self.data.model_dump(mode="json"),
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                )
        except OSError as e:
            raise DataSourceError(f"Failed to write tracker data {self.data_path}: {e}") from e

    # =========================================================================
    # Lookups
    # =========================================================================

    def items_for(self, category_slug: str) -> list[TrackedItem]:
        if category_slug == NPC_CATEGORY_SLUG:
            return self.data.npcs
        return self.data.categories.get(category_slug, [])

    def offerings_for(self, altar_slug: str) -> list[Offering]:
        if altar_slug in self.data.altars:
            return self.data.altars[altar_slug]
        return _default_offerings(altar_slug)

    # =========================================================================
    # Mutations
    # =========================================================================

    def toggle_completed(self, category_slug: str, index: int) -> TrackedItem | None:
        """Flip the completion state of the item at ``index``."""
        items = self.items_for(category_slug)
        if not 0 <= index < len(items):
            return None
        item = items[index]
        item.completed = not item.completed
        logger.debug("%s/%s completed=%s", category_slug, item.name, item.completed)
        return item

    def change_hearts(self, index: int, delta: int) -> TrackedItem | None:
        """Adjust an NPC's hearts by ``delta``, clamped to ``[0, max_hearts]``."""
        npcs = self.data.npcs
        if not 0 <= index < len(npcs):
            return None
        npc = npcs[index]
        npc.hearts = max(0, min(npc.max_hearts, (npc.hearts or 0) + delta))
        logger.debug("%s hearts=%d", npc.name, npc.hearts)
        return npc

    def set_offered(self, altar_slug: str, item_id: int, offered: bool) -> bool:
        """Set the offered state of a requirement on an altar.

        Returns:
            True if a requirement with ``item_id`` was found.
        """
        for offering in self.offerings_for(altar_slug):
            for item in offering.items:
                if item.id == item_id:
                    item.offered = offered
                    logger.debug("%s/%s offered=%s", offering.slug, item.name, offered)
                    return True
        return False


__all__ = [
    "TrackerController",
]
