"""Base controller classes."""

from coraltrack.controllers.base.base_controller import BaseController, DataSourceError

__all__ = [
    "BaseController",
    "DataSourceError",
]
