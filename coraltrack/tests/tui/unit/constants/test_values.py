"""Unit tests for scalar constants in constants/values.py."""

from __future__ import annotations

from coraltrack.constants.values import (
    ALTAR_OFFERINGS,
    ALTAR_SLUG_MAP,
    CATEGORY_DISPLAY_NAMES,
    CATEGORY_ORDER,
    GRID_PAGE_PREFIXES,
    ITEM_CATEGORY_SLUGS,
    LAKE_TEMPLE_ALTARS,
    NPC_CATEGORY_SLUG,
)


class TestCategories:
    """Test category ordering and names."""

    def test_ten_categories_for_digit_keys(self) -> None:
        assert len(CATEGORY_ORDER) == 10
        assert len(set(CATEGORY_ORDER)) == 10

    def test_tenth_category(self) -> None:
        assert CATEGORY_ORDER[-1] == "artisan-products"

    def test_every_category_has_display_name(self) -> None:
        assert set(CATEGORY_DISPLAY_NAMES) == set(CATEGORY_ORDER)

    def test_item_categories_exclude_npcs(self) -> None:
        assert NPC_CATEGORY_SLUG not in ITEM_CATEGORY_SLUGS
        assert set(ITEM_CATEGORY_SLUGS) | {NPC_CATEGORY_SLUG} == set(CATEGORY_ORDER)


class TestLakeTemple:
    """Test altar and offering tables."""

    def test_four_altars(self) -> None:
        assert len(LAKE_TEMPLE_ALTARS) == 4
        assert set(ALTAR_SLUG_MAP) == set(LAKE_TEMPLE_ALTARS)

    def test_twenty_four_offerings(self) -> None:
        assert len(ALTAR_OFFERINGS) == 24
        assert len({slug for _, slug, _ in ALTAR_OFFERINGS}) == 24

    def test_six_offerings_per_altar(self) -> None:
        for altar in LAKE_TEMPLE_ALTARS:
            assert sum(1 for *_, owner in ALTAR_OFFERINGS if owner == altar) == 6


class TestRoutes:
    """Test grid page prefixes."""

    def test_grid_prefixes(self) -> None:
        assert GRID_PAGE_PREFIXES == ("/track/", "/temple/")
