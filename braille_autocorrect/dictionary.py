# dictionary.py - word lists for the trie

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

# sample vocabulary shipped with the app
DEFAULT_WORDS: List[str] = [
    "hello", "world", "braille", "system", "react",
    "javascript", "task", "thinkerbell", "correction",
    "interface", "suggestion", "keyboard", "input",
    "auto", "correct", "visual", "impairment", "accessibility",
]


def normalize_words(words: Iterable[str]) -> List[str]:
    """Lowercase + strip, drop empties and repeats (first one wins)."""
    seen = set()
    out: List[str] = []
    for w in words:
        w = w.strip().lower()
        if not w or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


def load_words(path: Union[str, Path]) -> List[str]:
    """
    Read a word list: one word per line, '#' starts a comment line.
    Raises FileNotFoundError if the file is missing.
    """
    with open(path, "r", encoding="utf8") as f:
        lines = [ln for ln in f if not ln.lstrip().startswith("#")]
    return normalize_words(lines)
