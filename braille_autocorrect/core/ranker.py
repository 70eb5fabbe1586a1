# ranker.py
# Orders raw trie matches by cost and keeps the top N.

from __future__ import annotations

from typing import Iterable, List, NamedTuple


class Suggestion(NamedTuple):
    """One scored candidate. Lower cost = closer to what was typed."""

    word: str
    cost: int


def rank_suggestions(suggestions: Iterable[Suggestion], max_suggestions: int = 5) -> List[Suggestion]:
    """
    Sort ascending by cost and truncate.
    sorted() is stable, so ties stay in discovery (DFS) order.
    A non-positive limit gives an empty list.
    """
    if max_suggestions <= 0:
        return []
    return sorted(suggestions, key=lambda s: s.cost)[:max_suggestions]
