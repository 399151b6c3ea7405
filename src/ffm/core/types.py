"""Shared enums and type aliases for the core and domain layers."""
from __future__ import annotations

from enum import Enum
from typing import Literal


class PotionChoice(str, Enum):
    """The potion picked at the start of an adventure."""

    NONE = "none"
    SKILL = "skill"
    STRENGTH = "strength"
    FORTUNE = "fortune"


class EncounterStatus(str, Enum):
    """Lifecycle status of a tracked monster."""

    ACTIVE = "active"
    DEFEATED = "defeated"
    ESCAPED = "escaped"


StatKey = Literal["skill", "stamina", "luck"]
ListKind = Literal["equipment", "treasure"]
LogChannel = Literal["luck", "combat", "dice"]
CombatOutcome = Literal["player", "monster", "tie"]

STAT_KEYS: tuple[StatKey, ...] = ("skill", "stamina", "luck")
LIST_KINDS: tuple[ListKind, ...] = ("equipment", "treasure")
LOG_CHANNELS: tuple[LogChannel, ...] = ("luck", "combat", "dice")

__all__ = [
    "CombatOutcome",
    "EncounterStatus",
    "LIST_KINDS",
    "LOG_CHANNELS",
    "ListKind",
    "LogChannel",
    "PotionChoice",
    "STAT_KEYS",
    "StatKey",
]
