"""Unit tests for GlobalSearchIndex."""

from __future__ import annotations

import pytest

from coraltrack.constants.enums import SearchItemType
from coraltrack.constants.values import ALTAR_OFFERINGS, LAKE_TEMPLE_ALTARS
from coraltrack.models.core.tracker_items import TrackedItem
from coraltrack.utils.global_search import GlobalSearchIndex, route_for


@pytest.fixture
def index() -> GlobalSearchIndex:
    search_index = GlobalSearchIndex()
    search_index.build(
        {
            "fish": [TrackedItem(id=1, name="Salmon"), TrackedItem(id=2, name="Tuna")],
            "gems": [TrackedItem(id=3, name="Ruby")],
            "not-a-category": [TrackedItem(id=4, name="Stray")],
        },
        [TrackedItem(id=5, name="Sam", hearts=3)],
    )
    return search_index


class TestGlobalSearchBuild:
    """Test index contents."""

    def test_entry_count(self, index: GlobalSearchIndex) -> None:
        expected = 3 + 1 + len(LAKE_TEMPLE_ALTARS) + len(ALTAR_OFFERINGS)
        assert len(index) == expected

    def test_unknown_categories_skipped(self, index: GlobalSearchIndex) -> None:
        assert all(entry.name != "Stray" for entry in index.entries)

    def test_static_temple_entries(self) -> None:
        search_index = GlobalSearchIndex()
        search_index.build({})
        types = [entry.type for entry in search_index.entries]
        assert types.count(SearchItemType.ALTAR) == 4
        assert types.count(SearchItemType.OFFERING) == 24


class TestGlobalSearchQuery:
    """Test searching."""

    def test_blank_query_is_empty(self, index: GlobalSearchIndex) -> None:
        assert index.search("") == []
        assert index.search("   ") == []

    def test_item_match(self, index: GlobalSearchIndex) -> None:
        best = index.search("salmon")[0]
        assert best.type is SearchItemType.ITEM
        assert best.category == "Fish"
        assert best.category_slug == "fish"

    def test_npc_match(self, index: GlobalSearchIndex) -> None:
        best = index.search("sam")[0]
        assert best.type is SearchItemType.NPC
        assert best.category_slug == "npcs"

    def test_offering_has_parent_altar(self, index: GlobalSearchIndex) -> None:
        best = index.search("rare fish")[0]
        assert best.type is SearchItemType.OFFERING
        assert best.parent_slug == "catch-altar"

    def test_result_limit(self) -> None:
        search_index = GlobalSearchIndex(result_limit=3)
        search_index.build({})
        assert len(search_index.search("a")) == 3


class TestRouteFor:
    """Test result routes."""

    def test_routes(self, index: GlobalSearchIndex) -> None:
        assert route_for(index.search("salmon")[0]) == "/track/fish"
        assert route_for(index.search("sam")[0]) == "/track/npcs"
        assert route_for(index.search("crop altar")[0]) == "/temple/crop-altar"
        assert route_for(index.search("rare fish")[0]) == "/temple/catch-altar"
