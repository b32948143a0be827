"""Scalar constants for the tracker.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Coral Tracker"

# ============================================================================
# Routes
# ============================================================================

ROUTE_HOME: Final = "/"
ROUTE_SAVES: Final = "/saves"
ROUTE_TEMPLE: Final = "/temple"
ROUTE_TRACK_PREFIX: Final = "/track/"
ROUTE_TEMPLE_PREFIX: Final = "/temple/"

GRID_PAGE_PREFIXES: Final = (ROUTE_TRACK_PREFIX, ROUTE_TEMPLE_PREFIX)

# ============================================================================
# Categories
# ============================================================================

# Digit shortcuts 1-9 map to the first nine slugs, 0 to the tenth.
CATEGORY_ORDER: Final = (
    "fish",
    "insects",
    "critters",
    "crops",
    "artifacts",
    "gems",
    "forageables",
    "cooking",
    "npcs",
    "artisan-products",
)

ITEM_CATEGORY_SLUGS: Final = (
    "fish",
    "insects",
    "critters",
    "crops",
    "artifacts",
    "gems",
    "forageables",
    "cooking",
    "artisan-products",
)

CATEGORY_DISPLAY_NAMES: Final = {
    "fish": "Fish",
    "insects": "Insects",
    "critters": "Critters",
    "crops": "Crops",
    "artifacts": "Artifacts",
    "gems": "Gems",
    "forageables": "Forageables",
    "cooking": "Cooking",
    "artisan-products": "Artisan Products",
    "npcs": "NPCs",
}

NPC_CATEGORY_SLUG: Final = "npcs"

# ============================================================================
# Lake temple
# ============================================================================

LAKE_TEMPLE_ALTARS: Final = (
    "Crop Altar",
    "Catch Altar",
    "Advanced Altar",
    "Rare Altar",
)

ALTAR_SLUG_MAP: Final = {
    "Crop Altar": "crop-altar",
    "Catch Altar": "catch-altar",
    "Advanced Altar": "advanced-altar",
    "Rare Altar": "rare-altar",
}

# (offering name, offering slug, altar name)
ALTAR_OFFERINGS: Final = (
    ("Essential Resources", "essential-resources", "Crop Altar"),
    ("Spring Sesajen", "spring-sesajen", "Crop Altar"),
    ("Summer Sesajen", "summer-sesajen", "Crop Altar"),
    ("Fall Sesajen", "fall-sesajen", "Crop Altar"),
    ("Winter Sesajen", "winter-sesajen", "Crop Altar"),
    ("Ocean Scavengables", "ocean-scavengables", "Crop Altar"),
    ("Fresh Water Fish", "fresh-water-fish", "Catch Altar"),
    ("Salt Water Fish", "salt-water-fish", "Catch Altar"),
    ("Rare Fish", "rare-fish", "Catch Altar"),
    ("Day Insect", "day-insect", "Catch Altar"),
    ("Night Insect", "night-insect", "Catch Altar"),
    ("Ocean Critters", "ocean-critters", "Catch Altar"),
    ("Barn Animals", "barn-animals", "Advanced Altar"),
    ("Coop Animals", "coop-animals", "Advanced Altar"),
    ("Basic Cooking", "basic-cooking", "Advanced Altar"),
    ("Basic Artisan", "basic-artisan", "Advanced Altar"),
    ("Fruit Plant", "fruit-plant", "Advanced Altar"),
    ("Monster Drop", "monster-drop", "Advanced Altar"),
    ("Rare Crops", "rare-crops", "Rare Altar"),
    ("Greenhouse Crops", "greenhouse-crops", "Rare Altar"),
    ("Advanced Cooking", "advanced-cooking", "Rare Altar"),
    ("Master Artisan", "master-artisan", "Rare Altar"),
    ("Rare Animal Products", "rare-animal-products", "Rare Altar"),
    ("Kelp Essence", "kelp-essence", "Rare Altar"),
)

# ============================================================================
# Search highlight (rich style)
# ============================================================================

SEARCH_HIGHLIGHT_STYLE: Final = "bold #7fd1b9"

__all__ = [
    "ALTAR_OFFERINGS",
    "ALTAR_SLUG_MAP",
    "APP_TITLE",
    "CATEGORY_DISPLAY_NAMES",
    "CATEGORY_ORDER",
    "GRID_PAGE_PREFIXES",
    "ITEM_CATEGORY_SLUGS",
    "LAKE_TEMPLE_ALTARS",
    "NPC_CATEGORY_SLUG",
    "ROUTE_HOME",
    "ROUTE_SAVES",
    "ROUTE_TEMPLE",
    "ROUTE_TEMPLE_PREFIX",
    "ROUTE_TRACK_PREFIX",
    "SEARCH_HIGHLIGHT_STYLE",
]
