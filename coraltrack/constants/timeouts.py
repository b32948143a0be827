"""Timing constants for the tracker.

Delays used to let focus and layout settle (float, in seconds).
"""

from typing import Final

# ============================================================================
# Focus settle delays
# ============================================================================

# Wait before deciding focus really left the filter toolbar.
FILTER_BLUR_SETTLE_DELAY: Final = 0.0

# Wait before scrolling the restored grid focus into view.
GRID_INITIAL_SCROLL_DELAY: Final = 0.1

__all__ = [
    "FILTER_BLUR_SETTLE_DELAY",
    "GRID_INITIAL_SCROLL_DELAY",
]
