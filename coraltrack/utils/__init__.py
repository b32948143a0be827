"""Utility functions and classes for Coral Tracker."""

from coraltrack.utils.global_search import GlobalSearchIndex, route_for
from coraltrack.utils.search import highlight_match, score_match, search_and_sort

__all__ = [
    # Global search
    "GlobalSearchIndex",
    "route_for",
    # Ranking
    "highlight_match",
    "score_match",
    "search_and_sort",
]
