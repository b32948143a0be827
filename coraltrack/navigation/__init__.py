"""Keyboard navigators for filters, category grids and altar offerings."""

from coraltrack.navigation.filters import RovingFilterNavigator
from coraltrack.navigation.grid import GridAction, GridNavigator
from coraltrack.navigation.offerings import OfferingNavigator, OfferingNavState

__all__ = [
    "GridAction",
    "GridNavigator",
    "OfferingNavState",
    "OfferingNavigator",
    "RovingFilterNavigator",
]
