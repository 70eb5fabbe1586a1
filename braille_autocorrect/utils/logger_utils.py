# logger_utils.py - logging setup and block timing

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler

logger = logging.getLogger("braille_autocorrect")


def configure_logging(level: Union[int, str] = "INFO", path: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Attach handlers to the package logger.
    Console output goes through rich; `path` adds a plain file log as well.
    Calling it again replaces the handlers instead of stacking them.
    """
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))

    if path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"))
        logger.addHandler(fh)

    logger.propagate = False
    return logger


def time_block(label: str, metrics=None) -> "_Timer":
    """
    Measure how long a block takes.
        with time_block("search", metrics):
            trie.search(cells)
    Logs the duration at DEBUG and records it in `metrics` when given.
    """
    return _Timer(label, metrics)


class _Timer:
    """Context manager used by time_block."""

    def __init__(self, label: str, metrics=None):
        self.label = label
        self.metrics = metrics
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        logger.debug("%s done in %.3f ms", self.label, self.elapsed * 1000.0)
        if self.metrics is not None:
            self.metrics.record(self.label, self.elapsed)
        return False
