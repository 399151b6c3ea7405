"""Result events returned by the rules, sheet, encounter and dice services."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from ffm.core.types import CombatOutcome, EncounterStatus, PotionChoice


class FailureReason(Enum):
    """Why a rules operation refused to change anything."""

    STATS_NOT_ROLLED = "stats_not_rolled"
    NO_PROVISIONS = "no_provisions"
    ALREADY_USED = "already_used"
    NO_POTION_CHOSEN = "no_potion_chosen"
    NO_ACTIVE_ENCOUNTER = "no_active_encounter"
    ENCOUNTER_NOT_ACTIVE = "encounter_not_active"
    INVALID_INPUT = "invalid_input"


@dataclass(slots=True)
class GameEvent:
    """Base game event."""


@dataclass(slots=True)
class ActionFailedEvent(GameEvent):
    reason: FailureReason
    message: str


@dataclass(slots=True)
class StatRolledEvent(GameEvent):
    key: str
    value: int


@dataclass(slots=True)
class StatsRolledEvent(GameEvent):
    skill: int
    stamina: int
    luck: int


@dataclass(slots=True)
class ProvisionEatenEvent(GameEvent):
    provisions_left: int
    stamina: int
    restored: int


@dataclass(slots=True)
class LuckTestedEvent(GameEvent):
    roll: int
    threshold: int
    lucky: bool
    luck_after: int


@dataclass(slots=True)
class PotionChosenEvent(GameEvent):
    choice: PotionChoice


@dataclass(slots=True)
class PotionUsedEvent(GameEvent):
    choice: PotionChoice


@dataclass(slots=True)
class CombatRoundEvent(GameEvent):
    encounter_id: str
    player_roll: int
    monster_roll: int
    player_attack_strength: int
    monster_attack_strength: int
    outcome: CombatOutcome
    damage: int
    luck_test: LuckTestedEvent | None = None


@dataclass(slots=True)
class EncounterAddedEvent(GameEvent):
    encounter_id: str
    name: str


@dataclass(slots=True)
class EncounterChangedEvent(GameEvent):
    encounter_id: str
    status: EncounterStatus
    stamina: int


@dataclass(slots=True)
class EncounterRemovedEvent(GameEvent):
    encounter_id: str


@dataclass(slots=True)
class ActiveEncounterSetEvent(GameEvent):
    encounter_id: str | None


@dataclass(slots=True)
class StatAdjustedEvent(GameEvent):
    key: str
    value: int


@dataclass(slots=True)
class SheetUpdatedEvent(GameEvent):
    field: str


@dataclass(slots=True)
class DiceRolledEvent(GameEvent):
    sides: int
    rolls: List[int]

    @property
    def total(self) -> int:
        return sum(self.rolls)


@dataclass(slots=True)
class LogClearedEvent(GameEvent):
    channel: str


def is_failure(event: GameEvent) -> bool:
    return isinstance(event, ActionFailedEvent)


__all__ = [
    "ActionFailedEvent",
    "ActiveEncounterSetEvent",
    "CombatRoundEvent",
    "DiceRolledEvent",
    "EncounterAddedEvent",
    "EncounterChangedEvent",
    "EncounterRemovedEvent",
    "FailureReason",
    "GameEvent",
    "LogClearedEvent",
    "LuckTestedEvent",
    "PotionChosenEvent",
    "PotionUsedEvent",
    "ProvisionEatenEvent",
    "SheetUpdatedEvent",
    "StatAdjustedEvent",
    "StatRolledEvent",
    "StatsRolledEvent",
    "is_failure",
]
