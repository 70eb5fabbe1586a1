# autocorrector.py
"""
BrailleAutocorrect - application facade.

Purpose:
 - Own the codec, the built Trie and the KeyGrouper
 - Simple public API for CLI/TUI/tests:
     suggest(patterns), suggest_keys(groups), suggest_current(), accept(word), stats()
 - Build happens once in __init__; the trie is read-only afterwards
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from braille_autocorrect.core.patterns import DEFAULT_CODEC, BrailleCodec, Pattern, keys_to_pattern
from braille_autocorrect.core.ranker import Suggestion
from braille_autocorrect.core.trie import DELETION_COST, TrieBuilder
from braille_autocorrect.dictionary import DEFAULT_WORDS, load_words, normalize_words
from braille_autocorrect.input.grouper import DEFAULT_DEBOUNCE, SPACE, KeyGrouper
from braille_autocorrect.utils.logger_utils import time_block

logger = logging.getLogger(__name__)

KeyGroup = Union[str, Sequence[str]]


class BrailleAutocorrect:
    """Facade over codec + trie + key grouper.
    Public API:
      - suggest(patterns, topn=None) -> List[Suggestion]
      - suggest_keys(groups, topn=None) -> List[Suggestion]
      - suggest_current(topn=None) -> List[Suggestion]
      - accept(word) -> None
      - stats() -> Dict[str, Any]
    """

    def __init__(
        self,
        words: Optional[Iterable[str]] = None,
        codec: Optional[BrailleCodec] = None,
        deletion_cost: int = DELETION_COST,
        max_suggestions: int = 5,
        max_cost: Optional[int] = None,
        debounce: float = DEFAULT_DEBOUNCE,
        metrics=None,
    ) -> None:
        self.codec = codec or DEFAULT_CODEC
        self.max_suggestions = max_suggestions
        self.max_cost = max_cost
        self.metrics = metrics
        self.grouper = KeyGrouper(debounce=debounce)

        vocab = normalize_words(DEFAULT_WORDS if words is None else words)
        with time_block("build", metrics):
            self.trie = TrieBuilder(self.codec, deletion_cost).insert_many(vocab).build()
        self._started_at = time.time()
        logger.info("loaded %d words (%d trie nodes)", len(vocab), self.trie.node_count())

    @classmethod
    def from_config(cls, cfg, metrics=None) -> "BrailleAutocorrect":
        """Build from a Config; a configured dictionary path replaces the sample words."""
        path = cfg.get("dictionary")
        words = load_words(path) if path else None
        return cls(
            words=words,
            deletion_cost=cfg.get("deletion_cost"),
            max_suggestions=cfg.get("max_suggestions"),
            max_cost=cfg.get("max_cost"),
            debounce=cfg.debounce,
            metrics=metrics,
        )

    # Public API ---------------------------------------------------------
    def suggest(self, patterns: Sequence[Pattern], topn: Optional[int] = None) -> List[Suggestion]:
        topn = self.max_suggestions if topn is None else topn
        with time_block("search", self.metrics):
            return self.trie.search(patterns, max_suggestions=topn, max_cost=self.max_cost)

    def suggest_keys(self, groups: Iterable[KeyGroup], topn: Optional[int] = None) -> List[Suggestion]:
        """groups: key chords such as "dq" or ("d", "q"); SPACE entries are skipped."""
        patterns = [keys_to_pattern(g) for g in groups if g != SPACE]
        return self.suggest(patterns, topn)

    def suggest_current(self, topn: Optional[int] = None) -> List[Suggestion]:
        """Suggestions for whatever the grouper has committed so far."""
        return self.suggest(self.grouper.patterns(), topn)

    def accept(self, word: str) -> None:
        """Replace the typed input with the chosen word."""
        self.grouper.set_word(word, self.codec)
        logger.debug("accepted %r", word)

    def stats(self) -> Dict[str, Any]:
        return {
            "words": self.trie.size(),
            "nodes": self.trie.node_count(),
            "deletion_cost": self.trie.deletion_cost,
            "uptime_s": round(time.time() - self._started_at, 1),
        }
