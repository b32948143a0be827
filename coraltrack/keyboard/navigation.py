"""Route helpers for the tracker pages.

This module contains:
1. Route builders and predicates (category_route, altar_route, is_grid_page)
2. Digit-to-category lookup used by the number-key jumps
"""

from __future__ import annotations

from coraltrack.constants.values import (
    CATEGORY_ORDER,
    GRID_PAGE_PREFIXES,
    ROUTE_TEMPLE_PREFIX,
    ROUTE_TRACK_PREFIX,
)

# ============================================================================
# ROUTES
# ============================================================================


def category_route(slug: str) -> str:
    """Return the tracker route for a category, e.g. ``/track/fish``."""
    return f"{ROUTE_TRACK_PREFIX}{slug}"


def altar_route(slug: str) -> str:
    """Return the route for a temple altar, e.g. ``/temple/crop-altar``."""
    return f"{ROUTE_TEMPLE_PREFIX}{slug}"


def is_grid_page(path: str) -> bool:
    """Return whether ``path`` shows a navigable grid (category or altar)."""
    return path.startswith(GRID_PAGE_PREFIXES)


def route_slug(path: str) -> str | None:
    """Return the trailing slug of a category or altar route, else None."""
    for prefix in GRID_PAGE_PREFIXES:
        if path.startswith(prefix):
            slug = path[len(prefix):].strip("/")
            return slug or None
    return None


def category_for_digit(digit: int) -> str | None:
    """Map a number key to a category slug; 0 selects the tenth category.

    Args:
        digit: Value of the pressed number key, 0-9.

    Returns:
        The category slug, or None when the digit has no category.
    """
    if not 0 <= digit <= 9:
        return None
    index = 9 if digit == 0 else digit - 1
    if index >= len(CATEGORY_ORDER):
        return None
    return CATEGORY_ORDER[index]


__all__ = [
    "altar_route",
    "category_for_digit",
    "category_route",
    "is_grid_page",
    "route_slug",
]
