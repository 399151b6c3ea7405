"""Factory helpers for runtime entities."""

from .id_factory import make_instance_id

__all__ = [
    "make_instance_id",
]
