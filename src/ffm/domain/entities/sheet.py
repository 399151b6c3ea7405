"""Player character sheet models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ffm.core.types import ListKind, PotionChoice, StatKey

from .stat import Stat

DEFAULT_PROVISIONS = 10
MAX_PROVISIONS = 999
MAX_GOLD = 999_999


@dataclass(slots=True)
class Potion:
    """The single potion carried for the adventure."""

    choice: PotionChoice = PotionChoice.NONE
    used: bool = False


@dataclass(slots=True)
class CharacterSheet:
    """Stats, inventory and potion status of the adventurer."""

    name: str = ""
    skill: Stat = field(default_factory=Stat)
    stamina: Stat = field(default_factory=Stat)
    luck: Stat = field(default_factory=Stat)
    provisions: int = DEFAULT_PROVISIONS
    gold: int = 0
    equipment: List[str] = field(default_factory=list)
    treasure: List[str] = field(default_factory=list)
    potion: Potion = field(default_factory=Potion)

    @property
    def has_stats_rolled(self) -> bool:
        return all(stat.is_rolled for stat in (self.skill, self.stamina, self.luck))

    def stat(self, key: StatKey) -> Stat:
        if key == "skill":
            return self.skill
        if key == "stamina":
            return self.stamina
        if key == "luck":
            return self.luck
        raise KeyError(key)

    def items(self, kind: ListKind) -> List[str]:
        if kind == "equipment":
            return self.equipment
        if kind == "treasure":
            return self.treasure
        raise KeyError(kind)
