"""
braille_autocorrect

Autocorrect for six-key braille typing: noisy braille cells in, closest
dictionary words out, ranked by a hamming-weighted edit distance.
"""

from .autocorrector import BrailleAutocorrect
from .core import BrailleCodec, Suggestion, Trie, TrieBuilder, hamming_distance, keys_to_pattern

__all__ = [
    "BrailleAutocorrect",
    "BrailleCodec",
    "Suggestion",
    "Trie",
    "TrieBuilder",
    "hamming_distance",
    "keys_to_pattern",
]

__version__ = "0.1.0"
