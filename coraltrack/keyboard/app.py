"""App-level keyboard bindings.

Tracker shortcuts are routed by the dispatch hub from ``on_key``; only
bindings that must work regardless of focus or page live here. Help is a
priority binding so ``?`` opens it even while the search input has focus.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+q", "quit", "Quit", priority=True),
    Binding("question_mark", "toggle_help", "Help", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
