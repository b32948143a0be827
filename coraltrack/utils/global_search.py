"""Global search across categories, NPCs, altars and offerings."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from coraltrack.constants.enums import SearchItemType
from coraltrack.constants.limits import SEARCH_RESULT_LIMIT
from coraltrack.constants.values import (
    ALTAR_OFFERINGS,
    ALTAR_SLUG_MAP,
    CATEGORY_DISPLAY_NAMES,
    ITEM_CATEGORY_SLUGS,
    LAKE_TEMPLE_ALTARS,
    NPC_CATEGORY_SLUG,
)
from coraltrack.keyboard.navigation import altar_route, category_route
from coraltrack.models.core.tracker_items import SearchableItem, TrackedItem
from coraltrack.utils.search import search_and_sort

logger = logging.getLogger(__name__)

_TEMPLE_CATEGORY = "Temple"


def _altar_slug(altar: str) -> str:
    return ALTAR_SLUG_MAP.get(altar, altar.lower().replace(" ", "-"))


class GlobalSearchIndex:
    """Searchable index built from the loaded tracker data.

    Categories are indexed in their fixed display order, followed by NPCs,
    the lake temple altars and their static offerings.
    """

    def __init__(self, result_limit: int = SEARCH_RESULT_LIMIT) -> None:
        self.result_limit = result_limit
        self._entries: list[SearchableItem] = []

    @property
    def entries(self) -> list[SearchableItem]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def build(
        self,
        items_by_category: Mapping[str, Iterable[TrackedItem]],
        npcs: Iterable[TrackedItem] = (),
    ) -> None:
        """Rebuild the index.

        Args:
            items_by_category: Loaded items keyed by category slug. Slugs that
                are not item categories are ignored.
            npcs: Loaded NPCs.
        """
        entries: list[SearchableItem] = []

        for slug in ITEM_CATEGORY_SLUGS:
            for item in items_by_category.get(slug, ()):
                entries.append(
                    SearchableItem(
                        id=item.id,
                        name=item.name,
                        type=SearchItemType.ITEM,
                        category=CATEGORY_DISPLAY_NAMES.get(slug, slug),
                        category_slug=slug,
                    )
                )

        for npc in npcs:
            entries.append(
                SearchableItem(
                    id=npc.id,
                    name=npc.name,
                    type=SearchItemType.NPC,
                    category=CATEGORY_DISPLAY_NAMES[NPC_CATEGORY_SLUG],
                    category_slug=NPC_CATEGORY_SLUG,
                )
            )

        for altar in LAKE_TEMPLE_ALTARS:
            entries.append(
                SearchableItem(
                    id=altar,
                    name=altar,
                    type=SearchItemType.ALTAR,
                    category=_TEMPLE_CATEGORY,
                    category_slug=_altar_slug(altar),
                )
            )

        for name, slug, altar in ALTAR_OFFERINGS:
            entries.append(
                SearchableItem(
                    id=slug,
                    name=name,
                    type=SearchItemType.OFFERING,
                    category=altar,
                    category_slug=slug,
                    parent_slug=_altar_slug(altar),
                )
            )

        self._entries = entries
        logger.debug("Search index built with %d entries", len(entries))

    def search(self, query: str) -> list[SearchableItem]:
        """Return the best matches for ``query``; empty for a blank query."""
        if not query.strip():
            return []
        ranked = search_and_sort(self._entries, query, lambda entry: entry.name)
        return ranked[: self.result_limit]


def route_for(entry: SearchableItem) -> str:
    """Return the page a search result opens."""
    if entry.type is SearchItemType.ALTAR:
        return altar_route(entry.category_slug)
    if entry.type is SearchItemType.OFFERING:
        return altar_route(entry.parent_slug or entry.category_slug)
    return category_route(entry.category_slug)


__all__ = [
    "GlobalSearchIndex",
    "route_for",
]
