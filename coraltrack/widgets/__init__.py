"""Widgets module for the Coral Tracker TUI.

This module provides the tracker's page widgets:
- filter_toolbar: Season and completion filters with a roving tab stop
- item_grid: Responsive grid of tracked item cards
- offering_list: Altar offerings with expandable requirements
"""

from coraltrack.widgets.filter_toolbar import (
    COMPLETED_FILTER_VALUE,
    FilterButton,
    FilterToolbar,
    RovingFocusHandle,
)
from coraltrack.widgets.item_grid import ItemCard, ItemGrid, columns_for_width
from coraltrack.widgets.offering_list import OfferingHeader, OfferingItemCell, OfferingList

__all__ = [
    "COMPLETED_FILTER_VALUE",
    "FilterButton",
    "FilterToolbar",
    "ItemCard",
    "ItemGrid",
    "OfferingHeader",
    "OfferingItemCell",
    "OfferingList",
    "RovingFocusHandle",
    "columns_for_width",
]
