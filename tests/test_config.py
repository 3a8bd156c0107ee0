# tests/test_config.py
import json

import pytest

from trie_dictionary.utils.config_manager import DEFAULTS, Config, parse_bool
from trie_dictionary.utils.logger_utils import Log


def test_missing_file_written_with_defaults(tmp_path):
    path = tmp_path / "cfg" / "config.json"
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert json.loads(path.read_text()) == DEFAULTS


def test_no_autosave_leaves_disk_alone(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path), autosave=False)
    cfg.set("max_distance", "3")
    assert cfg.get("max_distance") == 3
    assert not path.exists()


def test_file_values_merged_and_coerced(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_distance": "1", "use_color": "no", "bogus": 1}))
    cfg = Config(str(path))
    assert cfg.get("max_distance") == 1
    assert cfg.get("use_color") is False
    assert "bogus" not in cfg.data
    assert cfg.get("max_suggestions") == DEFAULTS["max_suggestions"]


def test_corrupt_file_keeps_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert "could not read config" in caplog.text


def test_set_persists(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("max_suggestions", "25")
    cfg.set("use_color", "false")
    again = Config(str(path))
    assert again.get("max_suggestions") == 25
    assert again.get("use_color") is False


def test_set_errors(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    with pytest.raises(KeyError):
        cfg.set("nope", 1)
    with pytest.raises(ValueError):
        cfg.set("max_distance", "two")
    with pytest.raises(ValueError):
        cfg.set("use_color", "maybe")


@pytest.mark.parametrize("raw, expected", [("TRUE", True), ("1", True), ("yes", True), ("0", False), (" No ", False), (False, False)])
def test_parse_bool(raw, expected):
    assert parse_bool("k", raw) is expected


@pytest.mark.parametrize("key, raw", [
    ("max_distance", "-1"),
    ("max_distance", -3),
    ("max_suggestions", "0"),
    ("log_level", "LOUD"),
])
def test_set_rejects_out_of_range(tmp_path, key, raw):
    cfg = Config(str(tmp_path / "config.json"), autosave=False)
    with pytest.raises(ValueError):
        cfg.set(key, raw)
    assert cfg.get(key) == DEFAULTS[key]


def test_log_level_normalised(tmp_path):
    cfg = Config(str(tmp_path / "config.json"), autosave=False)
    cfg.set("log_level", " debug ")
    assert cfg.get("log_level") == "DEBUG"


def test_bad_file_values_fall_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_distance": -1, "log_level": "LOUD", "max_suggestions": 4}))
    cfg = Config(str(path))
    assert cfg.get("max_distance") == DEFAULTS["max_distance"]
    assert cfg.get("log_level") == DEFAULTS["log_level"]
    assert cfg.get("max_suggestions") == 4
    assert "must be >= 0" in caplog.text
    assert "LOUD" in caplog.text
    # the kept defaults still build a working Log
    cfg.set("log_path", str(tmp_path / "app.log"))
    log = Log.from_config(cfg)
    log.info("started")
    assert "started" in (tmp_path / "app.log").read_text()
