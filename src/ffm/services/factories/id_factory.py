"""Utilities for creating deterministic instance identifiers."""
from __future__ import annotations

from typing import Container

from ffm.core.rng import RNG


def make_instance_id(prefix: str, rng: RNG, taken: Container[str] = ()) -> str:
    """Generate an identifier from the RNG that is not already in ``taken``."""
    while True:
        suffix = rng.randint(100000, 999999)
        candidate = f"{prefix}_{suffix}"
        if candidate not in taken:
            return candidate
