# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 5,
    "deletion_cost": 3,
    "max_cost": None,  # None = exhaustive search
    "debounce_ms": 200,
    "dictionary": None,  # None = built-in sample words
}

# value type per key; keys whose default is None may also be None
TYPES = {
    "max_suggestions": int,
    "deletion_cost": int,
    "max_cost": int,
    "debounce_ms": int,
    "dictionary": str,
}


def _nullable(key):
    return DEFAULTS[key] is None


def _valid(key, val):
    if val is None:
        return _nullable(key)
    if isinstance(val, bool):
        return False
    return isinstance(val, TYPES[key])


def _coerce(key, val):
    """Convert a value (usually a string from the CLI) to the key's type."""
    if isinstance(val, str):
        if val.strip().lower() in ("none", "null", ""):
            if not _nullable(key):
                raise ValueError(f"{key} cannot be empty")
            return None
        val = TYPES[key](val)
    if not _valid(key, val):
        raise ValueError(f"bad value for {key}: {val!r}")
    return val


class Config:
    """
    Settings with defaults, loaded from / saved to a JSON file.
    path=None keeps everything in memory.
    """

    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path:
            return
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("could not read config %s, using defaults: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object, using defaults", self.path)
                return
            unknown = set(loaded) - set(DEFAULTS)
            if unknown:
                logger.warning("ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
            for k, v in loaded.items():
                if k not in DEFAULTS:
                    continue
                if not _valid(k, v):
                    logger.warning("config %s: bad value for %s (%r), keeping default", self.path, k, v)
                    continue
                self.data[k] = v
        else:
            self.save()

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        """Raises KeyError for unknown keys, ValueError for values of the wrong type."""
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        self.data[key] = _coerce(key, val)
        self.save()

    def items(self):
        return self.data.items()

    @property
    def debounce(self):
        """Debounce window in seconds."""
        return self.data["debounce_ms"] / 1000.0
