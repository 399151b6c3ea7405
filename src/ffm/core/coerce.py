"""Lenient numeric coercion for untrusted values."""
from __future__ import annotations

import math


def finite_int(value: object, *, allow_str: bool = False) -> int | None:
    """Return value as an int when it is a finite number, else None.

    Booleans are rejected. Finite floats are truncated toward zero. Numeric
    strings are accepted only when ``allow_str`` is set.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if allow_str and isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if math.isfinite(number) else None
    return None
