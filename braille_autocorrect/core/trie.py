# trie.py
# Prefix tree over dictionary words with an approximate search.
# Search walks the whole tree depth-first and carries one edit-distance row per
# node, so each child row is computed from its parent's row in O(n).
#
# Two phases: TrieBuilder collects words, build() hands the nodes to a
# read-only Trie that only knows how to search.

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from .patterns import DEFAULT_CODEC, Pattern, PatternCodec, hamming_distance, validate_pattern
from .ranker import Suggestion, rank_suggestions

logger = logging.getLogger(__name__)

DELETION_COST = 3


class TrieFrozenError(RuntimeError):
    """Raised when a builder is used again after build()."""


class TrieNode:
    """
    A single node in the Trie.
    children: symbol -> TrieNode, in insertion order (tie order depends on it)
    is_word: True if the path from the root spells a dictionary word
    """

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False


class TrieBuilder:
    """Build phase: insert words, then call build() once."""

    def __init__(self, codec: Optional[PatternCodec] = None, deletion_cost: int = DELETION_COST) -> None:
        self._root = TrieNode()
        self._codec = codec or DEFAULT_CODEC
        self._deletion_cost = deletion_cost
        self._built = False

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word. Inserting it twice changes nothing, and an empty
        word is ignored. Symbols are not checked against the codec here.
        """
        if self._built:
            raise TrieFrozenError("trie already built; create a new TrieBuilder")
        if not word:
            return

        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt
        node.is_word = True

    def insert_many(self, words: Iterable[str]) -> "TrieBuilder":
        for w in words:
            self.insert(w)
        return self

    def build(self) -> "Trie":
        """Finalize. The builder refuses further inserts afterwards."""
        if self._built:
            raise TrieFrozenError("build() already called")
        self._built = True
        trie = Trie(self._root, self._codec, self._deletion_cost)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("trie built: %d words, %d nodes", trie.size(), trie.node_count())
        return trie


class Trie:
    """
    Read-only prefix tree. Use TrieBuilder (or Trie.from_words) to make one.

    search() scores every dictionary word against a sequence of cell patterns:
     - substitution = hamming distance between the two cells
     - insertion/deletion = deletion_cost
     - a word may match any prefix of the input, the unmatched tail is charged
       as insertions, so finished words surface while the user is still typing
    """

    def __init__(self, root: TrieNode, codec: PatternCodec, deletion_cost: int = DELETION_COST) -> None:
        self._root = root
        self._codec = codec
        self.deletion_cost = deletion_cost

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        codec: Optional[PatternCodec] = None,
        deletion_cost: int = DELETION_COST,
    ) -> "Trie":
        return TrieBuilder(codec, deletion_cost).insert_many(words).build()

    @property
    def root(self) -> TrieNode:
        return self._root

    # search ---------------------------------------------------------
    def search(
        self,
        query: Sequence[Pattern],
        max_suggestions: int = 5,
        max_cost: Optional[int] = None,
    ) -> List[Suggestion]:
        """
        Return up to max_suggestions (word, cost) pairs, cheapest first.

        With max_cost=None every node is visited (no pruning). With a bound,
        words costing more are dropped and subtrees whose whole row is already
        above the bound are skipped; results within the bound are identical.
        """
        n = len(query)
        if n == 0 or max_suggestions <= 0:
            return []
        for p in query:
            validate_pattern(p)

        found: List[Suggestion] = []
        self._walk(query, found, max_cost)
        return rank_suggestions(found, max_suggestions)

    def _walk(
        self,
        query: Sequence[Pattern],
        out: List[Suggestion],
        max_cost: Optional[int],
    ) -> None:
        """
        Depth-first walk with an explicit stack (word length is not bounded by
        the recursion limit). Each stack entry carries its own dp row; children
        are pushed in reverse so they pop in insertion order.
        """
        n = len(query)
        c = self.deletion_cost
        stack = [(self._root, "", [j * c for j in range(n + 1)])]

        while stack:
            node, word, dp = stack.pop()

            if node.is_word:
                total = min(cost + c * (n - j) for j, cost in enumerate(dp))
                if max_cost is None or total <= max_cost:
                    out.append(Suggestion(word, total))

            pushed = []
            for ch, child in node.children.items():
                pattern = self._codec.pattern_for(ch)
                if pattern is None:
                    logger.debug("no pattern for %r, skipping subtree under %r", ch, word + ch)
                    continue

                row = [dp[0] + c]
                for j in range(1, n + 1):
                    row.append(min(
                        dp[j] + c,                                     # drop dictionary symbol
                        row[j - 1] + c,                                # extra input cell
                        dp[j - 1] + hamming_distance(pattern, query[j - 1]),  # match / substitute
                    ))

                if max_cost is not None and min(row) > max_cost:
                    continue
                pushed.append((child, word + ch, row))
            stack.extend(reversed(pushed))

    # utilities -------------------------------------------------------
    def words(self) -> List[str]:
        """All stored words in DFS (insertion) order."""
        out: List[str] = []
        stack = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                out.append(prefix)
            # reversed so the stack pops children in insertion order
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, prefix + ch))
        return out

    def size(self) -> int:
        return len(self.words())

    def node_count(self) -> int:
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def __contains__(self, word: str) -> bool:
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_word
