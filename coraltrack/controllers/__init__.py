"""Controllers module for Coral Tracker.

Controllers load tracker data and apply progress changes requested by the
screens.
"""

from __future__ import annotations

# Base classes
from coraltrack.controllers.base import BaseController, DataSourceError

# Tracker domain
from coraltrack.controllers.tracker.controller import TrackerController

__all__ = [
    # Base
    "BaseController",
    "DataSourceError",
    # Domain Controllers
    "TrackerController",
]
