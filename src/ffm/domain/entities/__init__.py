"""Runtime entity exports."""

from .sheet import CharacterSheet, Potion
from .stat import Stat, clamp

__all__ = [
    "CharacterSheet",
    "Potion",
    "Stat",
    "clamp",
]
