"""Base controller for tracker data sources.

Controllers own loading and mutating tracker data so screens only deal
with models. Loading is async so the app can run it from a Textual worker
or directly in ``on_mount``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from coraltrack.models.core.tracker_items import Offering, TrackedItem, TrackerData

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """Raised when tracker data cannot be loaded or saved."""


class BaseController(ABC):
    """Base controller class for tracker data.

    Subclasses implement the data source; lookups and mutations work on
    the loaded TrackerData.
    """

    def __init__(self) -> None:
        self.data = TrackerData()

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if data can be loaded, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> TrackerData:
        """Load all tracker data from the source.

        Raises:
            DataSourceError: If the source exists but cannot be read.
        """
        ...

    @abstractmethod
    def items_for(self, category_slug: str) -> list[TrackedItem]:
        """Items shown on a category page."""
        ...

    @abstractmethod
    def offerings_for(self, altar_slug: str) -> list[Offering]:
        """Offerings shown on an altar page."""
        ...


__all__ = [
    "BaseController",
    "DataSourceError",
]
