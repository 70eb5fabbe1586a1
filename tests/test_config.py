# tests/test_config.py

import json

import pytest

from braille_autocorrect.utils.config_manager import DEFAULTS, Config
from braille_autocorrect.utils.metrics_tracker import Metrics


def test_in_memory_defaults():
    cfg = Config()
    assert cfg.data == DEFAULTS
    assert cfg.debounce == pytest.approx(0.2)


def test_creates_file_when_missing(tmp_path):
    path = tmp_path / "config.json"
    Config(str(path))
    assert json.loads(path.read_text(encoding="utf8")) == DEFAULTS


def test_loads_existing_and_ignores_unknown(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": 9, "theme": "dark"}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("max_suggestions") == 9
    assert "theme" not in cfg.data


def test_bad_json_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS


def test_set_coerces_and_saves(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("max_suggestions", "3")
    cfg.set("max_cost", "4")
    cfg.set("dictionary", "words.txt")
    assert cfg.get("max_suggestions") == 3
    assert cfg.get("max_cost") == 4
    assert cfg.get("dictionary") == "words.txt"
    assert json.loads(path.read_text(encoding="utf8"))["max_cost"] == 4
    cfg.set("max_cost", "none")
    assert cfg.get("max_cost") is None


def test_set_errors():
    cfg = Config()
    with pytest.raises(KeyError):
        cfg.set("nope", "1")
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", "many")


def test_metrics_average_and_persistence(tmp_path):
    path = tmp_path / "metrics.json"
    m = Metrics(str(path))
    m.record("search", 0.5)
    m.record("search", 1.5)
    assert m.avg("search") == pytest.approx(1.0)
    assert m.avg("unknown") == 0.0
    again = Metrics(str(path))
    assert again.count("search") == 2
    assert again.summary() == {"search": (2, pytest.approx(1.0))}


@pytest.mark.parametrize("key", ["max_suggestions", "deletion_cost", "debounce_ms"])
@pytest.mark.parametrize("val", ["none", "null", ""])
def test_required_keys_cannot_be_cleared(key, val):
    cfg = Config()
    with pytest.raises(ValueError):
        cfg.set(key, val)
    assert cfg.get(key) == DEFAULTS[key]


def test_set_rejects_wrong_python_types():
    cfg = Config()
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", None)
    with pytest.raises(ValueError):
        cfg.set("deletion_cost", True)
    cfg.set("max_cost", None)
    assert cfg.get("max_cost") is None


def test_mistyped_file_values_keep_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "deletion_cost": "3",
        "max_suggestions": None,
        "debounce_ms": True,
        "max_cost": 4,
        "dictionary": 12,
    }), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("deletion_cost") == 3
    assert cfg.get("max_suggestions") == 5
    assert cfg.get("debounce_ms") == 200
    assert cfg.get("max_cost") == 4
    assert cfg.get("dictionary") is None
