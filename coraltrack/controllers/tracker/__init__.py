"""Tracker data controller."""

from coraltrack.controllers.tracker.controller import TrackerController

__all__ = [
    "TrackerController",
]
