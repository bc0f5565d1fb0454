import json
import sys

import pytest

from Graph_Walk import main as main_mod
from Graph_Walk.config import Config
from Graph_Walk.graph.model import Graph
from Graph_Walk.main import MainService, main

FAST = ["--no-gui", "--dwell_interval", "0.001", "--frame_interval_ms", "0"]


@pytest.fixture(autouse=True)
def _keep_excepthook(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


def test_headless_run_exits_cleanly():
    assert main([*FAST, "--max_ticks", "25", "--run_seed", "3"]) == 0
    assert Config.run_seed == 3
    assert Config.max_ticks == 25


def test_invalid_start_edge_exits_non_zero():
    assert main([*FAST, "--max_ticks", "1", "--start_vertex", "9"]) == 1


def test_dead_end_graph_fails_validation(monkeypatch):
    monkeypatch.setattr(main_mod, "demo_graph", lambda: Graph.construct(2, [(0, 1)]))
    assert main([*FAST, "--max_ticks", "1"]) == 1


def test_dead_end_walk_error_propagates(monkeypatch):
    monkeypatch.setattr(main_mod, "demo_graph", lambda: Graph.construct(2, [(0, 1)]))
    assert main([*FAST, "--validate_graph", "false"]) == 1


def test_config_file_and_nested_override(tmp_path):
    cfg = tmp_path / "c.json"
    cfg.write_text(json.dumps({"max_ticks": 5, "colors": {"background": "#000000"}}))
    service = MainService(
        argv=["--config", str(cfg), "--colors.highlight_edge", "#123456", *FAST]
    )
    assert service.run() == 0
    assert Config.max_ticks == 5
    assert Config.colors["background"] == "#000000"
    assert Config.colors["highlight_edge"] == "#123456"


def test_boolean_and_optional_flags_are_typed():
    assert main([*FAST, "--max_ticks", "1", "--validate_graph", "no", "--run_seed", "7"]) == 0
    assert Config.validate_graph is False
    assert Config.run_seed == 7


def test_malformed_boolean_flag_is_rejected():
    with pytest.raises(SystemExit):
        main([*FAST, "--validate_graph", "maybe"])
