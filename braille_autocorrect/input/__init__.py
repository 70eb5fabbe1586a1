# braille_autocorrect.input - turns raw key presses into braille cells

from .grouper import SPACE, KeyGrouper

__all__ = ["SPACE", "KeyGrouper"]
