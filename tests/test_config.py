from __future__ import annotations

import json
from pathlib import Path

from ffm.presentation.cli import config


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    assert config.load_config(tmp_path / "config.json") == {"dice_count": 2, "dice_sides": 6}


def test_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"

    config.save_config({"dice_count": 1, "dice_sides": 20}, path)

    assert config.load_config(path) == {"dice_count": 1, "dice_sides": 20}


def test_out_of_range_values_fall_back(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"dice_count": 5, "dice_sides": 1000}), encoding="utf-8")

    assert config.load_config(path) == {"dice_count": 2, "dice_sides": 6}


def test_corrupt_config_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("not json", encoding="utf-8")

    assert config.load_config(path) == {"dice_count": 2, "dice_sides": 6}


def test_debug_flag_requires_exact_value(monkeypatch) -> None:
    monkeypatch.setenv("FFM_DEBUG", "true")
    assert config.debug_enabled() is False

    monkeypatch.setenv("FFM_DEBUG", "1")
    assert config.debug_enabled() is True
