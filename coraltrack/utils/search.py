"""Relevance scoring for item search.

Score tiers (case-insensitive):
- 100: exact match
- 80: name starts with query
- 60: a word inside the name starts with query ("Buffalo Butter" for "butter")
- 40: substring match anywhere
- 20: all query characters appear in order
- 0: no match
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import TypeVar

from rich.text import Text

from coraltrack.constants.values import SEARCH_HIGHLIGHT_STYLE

T = TypeVar("T")

SCORE_EXACT = 100
SCORE_PREFIX = 80
SCORE_WORD_BOUNDARY = 60
SCORE_SUBSTRING = 40
SCORE_SUBSEQUENCE = 20
SCORE_NONE = 0


def _is_subsequence(text: str, query: str) -> bool:
    position = 0
    for char in text:
        if position < len(query) and char == query[position]:
            position += 1
    return position == len(query)


def score_match(name: str, query: str) -> int:
    """Score how well ``name`` matches ``query``.

    Args:
        name: Candidate display name.
        query: Search text as typed.

    Returns:
        One of the score tiers, 0 when the name does not match.
    """
    name_lower = name.lower()
    query_lower = query.lower()

    if name_lower == query_lower:
        return SCORE_EXACT
    if name_lower.startswith(query_lower):
        return SCORE_PREFIX
    if re.search(r"[\s\-]" + re.escape(query_lower), name_lower):
        return SCORE_WORD_BOUNDARY
    if query_lower in name_lower:
        return SCORE_SUBSTRING
    if _is_subsequence(name_lower, query_lower):
        return SCORE_SUBSEQUENCE
    return SCORE_NONE


def search_and_sort(
    items: Sequence[T],
    query: str,
    get_name: Callable[[T], str],
) -> list[T]:
    """Filter ``items`` to matches and order them by relevance.

    Ties keep their original relative order. A blank query returns every
    item in its original order.
    """
    if not query.strip():
        return list(items)
    scored = [(score_match(get_name(item), query), item) for item in items]
    ranked = sorted(
        (entry for entry in scored if entry[0] > SCORE_NONE),
        key=lambda entry: entry[0],
        reverse=True,
    )
    return [item for _, item in ranked]


def highlight_match(
    text: str,
    query: str,
    style: str = SEARCH_HIGHLIGHT_STYLE,
) -> Text:
    """Return ``text`` as rich Text with every occurrence of ``query`` styled."""
    rendered = Text(text)
    if not query.strip():
        return rendered
    rendered.highlight_regex("(?i)" + re.escape(query), style=style)
    return rendered


__all__ = [
    "SCORE_EXACT",
    "SCORE_NONE",
    "SCORE_PREFIX",
    "SCORE_SUBSEQUENCE",
    "SCORE_SUBSTRING",
    "SCORE_WORD_BOUNDARY",
    "highlight_match",
    "score_match",
    "search_and_sort",
]
