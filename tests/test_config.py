import json
import os

import pytest

from Graph_Walk.config import Config, load_config


def test_load_from_file_merges_known_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "dwell_interval": 0.5,
                "colors": {"highlight_edge": "#ffffff"},
                "unknown_key": 3,
            }
        )
    )
    data = load_config(str(path))
    assert data["dwell_interval"] == 0.5
    assert Config.dwell_interval == 0.5
    assert Config.colors["highlight_edge"] == "#ffffff"
    assert Config.colors["default_edge"] == "#a7c957"
    assert not hasattr(Config, "unknown_key")
    assert Config.config_file == os.path.abspath(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load_from_file(str(tmp_path / "missing.json"))


def test_frame_interval_in_seconds():
    Config.frame_interval_ms = 250
    assert Config.frame_interval() == 0.25


def test_shipped_config_holds_class_defaults():
    path = Config.input_path("config.json")
    assert os.path.exists(path)
    with open(path) as f:
        shipped = json.load(f)
    for key, value in shipped.items():
        assert getattr(Config, key) == value, key

    load_config()
    assert Config.dwell_interval == 2.0
    assert Config.run_seed is None
    assert Config.config_file == os.path.abspath(path)
