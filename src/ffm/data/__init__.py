"""Storage layer: file locations and the durable save store."""

from .errors import DataError, PersistenceError
from .paths import get_default_config_path, get_save_dir, get_user_data_dir
from .save_store import SaveStore

__all__ = [
    "DataError",
    "PersistenceError",
    "SaveStore",
    "get_default_config_path",
    "get_save_dir",
    "get_user_data_dir",
]
