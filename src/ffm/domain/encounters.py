"""Monster encounters and the registry tracking which one is active."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ffm.core.types import EncounterStatus
from ffm.domain.entities import Stat, clamp

MIN_MONSTER_SKILL = 1
MAX_MONSTER_SKILL = 99
MAX_MONSTER_STAMINA = 999


@dataclass(slots=True)
class Encounter:
    """A tracked monster with its own Skill and Stamina."""

    id: str
    name: str
    skill: int
    stamina: Stat
    status: EncounterStatus = EncounterStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is EncounterStatus.ACTIVE

    def take_damage(self, amount: int) -> int:
        """Reduce stamina, marking the monster defeated at zero. Returns stamina left."""
        self.stamina.current = clamp(self.stamina.current - amount, 0, self.stamina.initial)
        if self.stamina.current == 0:
            self.status = EncounterStatus.DEFEATED
        return self.stamina.current

    def toggle_escaped(self) -> None:
        # Defeated monsters flip to escaped as well; only escaped goes back to active.
        if self.status is EncounterStatus.ESCAPED:
            self.status = EncounterStatus.ACTIVE
        else:
            self.status = EncounterStatus.ESCAPED


def build_encounter(encounter_id: str, name: str, skill: int, stamina: int) -> Encounter:
    """Create an encounter with creation-time clamping applied."""
    return Encounter(
        id=encounter_id,
        name=name,
        skill=clamp(skill, MIN_MONSTER_SKILL, MAX_MONSTER_SKILL),
        stamina=Stat(
            initial=clamp(stamina, 1, MAX_MONSTER_STAMINA),
            current=clamp(stamina, 0, MAX_MONSTER_STAMINA),
        ),
    )


@dataclass(slots=True)
class EncounterRegistry:
    """Encounters ordered newest first plus the active selection."""

    encounters: List[Encounter] = field(default_factory=list)
    active_id: str | None = None

    def add(self, encounter: Encounter) -> None:
        """Prepend the encounter and make it the active one."""
        self.encounters.insert(0, encounter)
        self.active_id = encounter.id

    def get(self, encounter_id: str) -> Encounter | None:
        for encounter in self.encounters:
            if encounter.id == encounter_id:
                return encounter
        return None

    def set_active(self, encounter_id: str | None) -> None:
        self.active_id = encounter_id

    def active(self) -> Encounter | None:
        """Return the active encounter, treating a dangling id as none."""
        if self.active_id is None:
            return None
        return self.get(self.active_id)

    def remove(self, encounter_id: str) -> bool:
        before = len(self.encounters)
        self.encounters = [enc for enc in self.encounters if enc.id != encounter_id]
        if self.active_id == encounter_id:
            self.active_id = None
        return len(self.encounters) != before
