"""Helpers for resolving per-user file locations."""
from __future__ import annotations

import os
from pathlib import Path

DATA_DIR_ENV = "FFM_DATA_DIR"


def get_user_data_dir() -> Path:
    """Return the per-user data directory, honouring FFM_DATA_DIR."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "FightingFantasyManager"
        return Path.home() / "FightingFantasyManager"
    return Path.home() / ".config" / "ff_manager"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_save_dir() -> Path:
    """Return the per-user save directory."""
    return get_user_data_dir() / "saves"
