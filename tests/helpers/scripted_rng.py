from __future__ import annotations

from typing import Iterable, Iterator

from ffm.core.rng import RNG
from ffm.domain.encounters import Encounter
from ffm.domain.entities import Stat
from ffm.domain.state import GameState


class ScriptedRNG(RNG):
    """RNG whose die faces come from a fixed script; ids still use the seeded stream."""

    def __init__(self, faces: Iterable[int], seed: int = 0) -> None:
        super().__init__(seed)
        self._faces: Iterator[int] = iter(faces)

    def roll_die(self, sides: int = 6) -> int:
        face = next(self._faces)
        assert 1 <= face <= sides, f"scripted face {face} does not fit a d{sides}"
        return face


def rolled_state(skill: int = 10, stamina: int = 20, luck: int = 10) -> GameState:
    state = GameState()
    state.sheet.skill = Stat(initial=skill, current=skill)
    state.sheet.stamina = Stat(initial=stamina, current=stamina)
    state.sheet.luck = Stat(initial=luck, current=luck)
    return state


def add_monster(
    state: GameState,
    *,
    encounter_id: str = "enc_100001",
    name: str = "Orc",
    skill: int = 8,
    stamina: int = 8,
) -> Encounter:
    encounter = Encounter(id=encounter_id, name=name, skill=skill, stamina=Stat(initial=stamina, current=stamina))
    state.encounters.add(encounter)
    return encounter
