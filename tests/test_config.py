"""Tests for settings defaults, merging and persistence."""

from __future__ import annotations

import json

import config
from world.constants import DEFAULT_RESOLUTION_H, DEFAULT_RESOLUTION_W, DEFAULT_VALUE_CUTOFF


def test_missing_file_gives_defaults(tmp_path) -> None:
    cfg = config.load_config(tmp_path / "nope.json")
    assert cfg["world"] == {"width": DEFAULT_RESOLUTION_W, "height": DEFAULT_RESOLUTION_H}
    assert cfg["value_cutoff"] == DEFAULT_VALUE_CUTOFF
    assert cfg["max_value"] == 1.0
    assert cfg["log_level"] == "INFO"


def test_partial_file_is_merged(tmp_path) -> None:
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"world": {"width": 200}, "decay_factor": 0.2, "bogus": 1}))
    cfg = config.load_config(p)
    assert cfg["world"] == {"width": 200, "height": DEFAULT_RESOLUTION_H}
    assert cfg["decay_factor"] == 0.2
    assert "bogus" not in cfg


def test_malformed_file_falls_back(tmp_path, caplog) -> None:
    p = tmp_path / "settings.json"
    p.write_text("{not json")
    cfg = config.load_config(p)
    assert cfg == config._default_config()
    assert "using defaults" in caplog.text


def test_save_then_load(tmp_path) -> None:
    p = tmp_path / "sub" / "settings.json"
    config.save_config({"cell_size": 4, "render_workers": 2}, p)
    cfg = config.load_config(p)
    assert cfg["cell_size"] == 4
    assert cfg["render_workers"] == 2
    assert cfg["target_fps"] == 60
