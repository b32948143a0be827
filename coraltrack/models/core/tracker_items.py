"""Tracked item, offering and search index models."""

from pydantic import BaseModel, Field

from coraltrack.constants.enums import SearchItemType


class TrackedItem(BaseModel):
    """One collectible or NPC row shown in a category grid."""

    id: int
    name: str
    completed: bool = False
    hearts: int | None = None  # NPCs only
    max_hearts: int = 10
    seasons: list[str] = Field(default_factory=list)


class OfferingItem(BaseModel):
    """A single requirement inside an altar offering."""

    id: int
    name: str = ""
    offered: bool = False


class Offering(BaseModel):
    """A themed group of required items at an altar."""

    slug: str
    name: str = ""
    items: list[OfferingItem] = Field(default_factory=list)


class TrackerData(BaseModel):
    """Everything one save slot tracks, keyed by category or altar slug."""

    save_id: int | None = None
    categories: dict[str, list[TrackedItem]] = Field(default_factory=dict)
    npcs: list[TrackedItem] = Field(default_factory=list)
    altars: dict[str, list[Offering]] = Field(default_factory=dict)


class SearchableItem(BaseModel):
    """Entry in the global search index."""

    id: int | str
    name: str
    type: SearchItemType
    category: str
    category_slug: str
    parent_slug: str | None = None  # Altar slug for offerings


__all__ = [
    "Offering",
    "OfferingItem",
    "SearchableItem",
    "TrackedItem",
    "TrackerData",
]
