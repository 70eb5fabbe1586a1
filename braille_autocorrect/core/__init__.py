"""
braille_autocorrect.core

The matching engine:
 - braille cell codec and hamming distance (patterns)
 - prefix tree with approximate search (TrieBuilder, Trie)
 - cost ranking (rank_suggestions, Suggestion)
"""

from .patterns import (
    BrailleCodec,
    DEFAULT_CODEC,
    KEY_TO_DOT,
    LETTER_TO_PATTERN,
    PatternCodec,
    encode_word,
    hamming_distance,
    keys_to_pattern,
    pattern_to_keys,
    validate_pattern,
)
from .ranker import Suggestion, rank_suggestions
from .trie import DELETION_COST, Trie, TrieBuilder, TrieFrozenError, TrieNode

__all__ = [
    "BrailleCodec",
    "DEFAULT_CODEC",
    "KEY_TO_DOT",
    "LETTER_TO_PATTERN",
    "PatternCodec",
    "encode_word",
    "hamming_distance",
    "keys_to_pattern",
    "pattern_to_keys",
    "validate_pattern",
    "Suggestion",
    "rank_suggestions",
    "DELETION_COST",
    "Trie",
    "TrieBuilder",
    "TrieFrozenError",
    "TrieNode",
]
