"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

from ffm.core.coerce import finite_int
from ffm.data.paths import get_default_config_path
from ffm.services.dice_service import ALLOWED_DICE_COUNTS, MAX_SIDES, MIN_SIDES

DEBUG_ENV = "FFM_DEBUG"
_DEFAULT_DICE_COUNT = 2
_DEFAULT_DICE_SIDES = 6


def debug_enabled() -> bool:
    """Return True only when FFM_DEBUG is explicitly set to '1'."""
    return os.getenv(DEBUG_ENV) == "1"


def _default_config() -> Dict[str, int]:
    return {"dice_count": _DEFAULT_DICE_COUNT, "dice_sides": _DEFAULT_DICE_SIDES}


def _normalize(raw: Dict[str, object]) -> Dict[str, int]:
    count = finite_int(raw.get("dice_count"))
    sides = finite_int(raw.get("dice_sides"))
    return {
        "dice_count": count if count in ALLOWED_DICE_COUNTS else _DEFAULT_DICE_COUNT,
        "dice_sides": sides if sides is not None and MIN_SIDES <= sides <= MAX_SIDES else _DEFAULT_DICE_SIDES,
    }


def load_config(path: Path | None = None) -> Dict[str, int]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _default_config()
    if not isinstance(raw, dict):
        return _default_config()
    return _normalize(raw)


def save_config(config: Dict[str, int], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(_normalize(config), indent=2, sort_keys=True), encoding="utf-8")
