# grouper.py
# Debounced chord grouping for a six-key braille keyboard.
# Keys pressed close together (within `debounce` seconds of the previous one)
# form one chord = one braille cell. Space and backspace edit the committed groups.

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Tuple, Union

from braille_autocorrect.core.patterns import KEY_TO_DOT, BrailleCodec, Pattern, keys_to_pattern

logger = logging.getLogger(__name__)

SPACE = "space"
DEFAULT_DEBOUNCE = 0.2  # seconds

Group = Union[Tuple[str, ...], str]  # sorted key chord, or SPACE


class KeyGrouper:
    """
    Collects key presses into chord groups.

    press() adds a dot key to the pending chord and restarts the debounce
    window; poll() commits the chord once the window has passed. Callers
    driving a UI timer can call flush() when the timer fires instead.
    """

    def __init__(self, debounce: float = DEFAULT_DEBOUNCE, clock: Callable[[], float] = time.monotonic) -> None:
        self.debounce = debounce
        self._clock = clock
        self._pending: List[str] = []
        self._last_press: Optional[float] = None
        self._groups: List[Group] = []

    # key events -------------------------------------------------------
    def press(self, key: str, now: Optional[float] = None) -> bool:
        """Returns True if the key joined the pending chord."""
        key = key.lower()
        if key not in KEY_TO_DOT or key in self._pending:
            return False
        self._pending.append(key)
        self._last_press = self._clock() if now is None else now
        return True

    def poll(self, now: Optional[float] = None) -> bool:
        """Commit the pending chord if the debounce window has passed."""
        if not self._pending or self._last_press is None:
            return False
        now = self._clock() if now is None else now
        if now - self._last_press < self.debounce:
            return False
        return self.flush()

    def flush(self) -> bool:
        """Commit the pending chord right away."""
        if not self._pending:
            return False
        chord = tuple(sorted(self._pending))
        self._groups.append(chord)
        self._pending = []
        self._last_press = None
        logger.debug("committed chord %s -> %s", "".join(chord), keys_to_pattern(chord))
        return True

    def backspace(self) -> None:
        """Drop the pending chord if there is one, otherwise the last group."""
        if self._pending:
            self._pending = []
            self._last_press = None
        elif self._groups:
            self._groups.pop()

    def space(self) -> None:
        # a chord still waiting on the timer belongs before the space
        self.flush()
        self._groups.append(SPACE)

    def clear(self) -> None:
        self._pending = []
        self._last_press = None
        self._groups = []

    def set_word(self, word: str, codec: BrailleCodec) -> None:
        """Replace everything typed so far with the chords spelling `word`."""
        self._pending = []
        self._last_press = None
        self._groups = list(codec.word_to_chords(word))

    # views -----------------------------------------------------------
    @property
    def groups(self) -> List[Group]:
        return list(self._groups)

    @property
    def pending(self) -> Tuple[str, ...]:
        return tuple(self._pending)

    def patterns(self) -> List[Pattern]:
        """Committed cells as patterns; spaces are left out."""
        return [keys_to_pattern(g) for g in self._groups if g != SPACE]

    def __len__(self) -> int:
        return len(self._groups)
