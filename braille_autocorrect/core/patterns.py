# patterns.py
# Six-dot braille codec: letter -> cell pattern, key chord -> cell pattern and back.
# A pattern is a 6-char string over "0"/"1", position i is dot i+1.
# Hamming distance between two cells is the substitution cost used by the trie search.

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Tuple

Pattern = str
KeyChord = Tuple[str, ...]

PATTERN_WIDTH = 6

# dot index for each physical key (dot 1 = index 0)
KEY_TO_DOT: Dict[str, int] = {
    "d": 0,
    "w": 1,
    "q": 2,
    "k": 3,
    "o": 4,
    "p": 5,
}

LETTER_TO_PATTERN: Dict[str, Pattern] = {
    "a": "100000", "b": "110000", "c": "100100", "d": "100110",
    "e": "100010", "f": "110100", "g": "110110", "h": "110010",
    "i": "010100", "j": "010110", "k": "101000", "l": "111000",
    "m": "101100", "n": "101110", "o": "101010", "p": "111100",
    "q": "111110", "r": "111010", "s": "011100", "t": "011110",
    "u": "101001", "v": "111001", "w": "010111", "x": "101101",
    "y": "101111", "z": "101011",
}


class PatternCodec(Protocol):
    """Anything that can map a dictionary symbol to a cell pattern."""

    def pattern_for(self, symbol: str) -> Optional[Pattern]:
        ...


def validate_pattern(pattern: Pattern) -> Pattern:
    """Return pattern unchanged, or raise ValueError if it is not a 6-bit string."""
    if not isinstance(pattern, str) or len(pattern) != PATTERN_WIDTH:
        raise ValueError(f"pattern must be a {PATTERN_WIDTH}-char string, got {pattern!r}")
    if set(pattern) - {"0", "1"}:
        raise ValueError(f"pattern must only contain 0/1, got {pattern!r}")
    return pattern


def hamming_distance(a: Pattern, b: Pattern) -> int:
    """Count differing dot positions (0-6). Both patterns are fixed-width."""
    return sum(1 for x, y in zip(a, b) if x != y)


def keys_to_pattern(keys: Iterable[str]) -> Pattern:
    """
    Turn a chord of pressed keys into a cell pattern.
    Keys outside KEY_TO_DOT are ignored (same as the keyboard handler).
    """
    cell = ["0"] * PATTERN_WIDTH
    for key in keys:
        dot = KEY_TO_DOT.get(key.lower())
        if dot is not None:
            cell[dot] = "1"
    return "".join(cell)


_DOT_TO_KEY = {dot: key for key, dot in KEY_TO_DOT.items()}


def pattern_to_keys(pattern: Pattern) -> KeyChord:
    """Inverse of keys_to_pattern; keys come back sorted like a committed chord."""
    validate_pattern(pattern)
    return tuple(sorted(_DOT_TO_KEY[i] for i, bit in enumerate(pattern) if bit == "1"))


class BrailleCodec:
    """
    Default PatternCodec backed by a letter table.
    Lookups are exact (the table is lowercase, so "C" has no pattern);
    unknown symbols map to None so the trie skips them at search time.
    Dictionary loaders lowercase words before they reach the trie.
    """

    def __init__(self, table: Optional[Mapping[str, Pattern]] = None) -> None:
        src = LETTER_TO_PATTERN if table is None else table
        self._table: Dict[str, Pattern] = {
            sym: validate_pattern(p) for sym, p in src.items()
        }

    def pattern_for(self, symbol: str) -> Optional[Pattern]:
        return self._table.get(symbol)

    def encode_word(self, word: str) -> List[Pattern]:
        out: List[Pattern] = []
        for ch in word:
            p = self.pattern_for(ch)
            if p is None:
                raise ValueError(f"no braille pattern for {ch!r} in {word!r}")
            out.append(p)
        return out

    def word_to_chords(self, word: str) -> List[KeyChord]:
        """Key chords a user would type to spell `word`."""
        return [pattern_to_keys(p) for p in self.encode_word(word)]

    def __contains__(self, symbol: str) -> bool:
        return self.pattern_for(symbol) is not None

    def __len__(self) -> int:
        return len(self._table)


DEFAULT_CODEC = BrailleCodec()


def encode_word(word: str, codec: Optional[BrailleCodec] = None) -> List[Pattern]:
    """Module-level shortcut for DEFAULT_CODEC.encode_word."""
    return (codec or DEFAULT_CODEC).encode_word(word)
