"""Coral Tracker: a keyboard-first terminal progress tracker."""

__version__ = "0.1.0"
