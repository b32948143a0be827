"""Core data models."""

from coraltrack.models.core.tracker_items import (
    Offering,
    OfferingItem,
    SearchableItem,
    TrackedItem,
    TrackerData,
)

__all__ = [
    "Offering",
    "OfferingItem",
    "SearchableItem",
    "TrackedItem",
    "TrackerData",
]
