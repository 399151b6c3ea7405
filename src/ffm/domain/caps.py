"""Pure helpers re-applying the numeric bounds of a game state."""
from __future__ import annotations

from ffm.domain.encounters import MAX_MONSTER_SKILL, MIN_MONSTER_SKILL
from ffm.domain.entities import clamp
from ffm.domain.entities.sheet import MAX_GOLD, MAX_PROVISIONS
from ffm.domain.state import GameState


def enforce_caps(state: GameState) -> None:
    """Clamp every stat and counter back into range.

    Running it twice in a row changes nothing the second time.
    """
    sheet = state.sheet
    for stat in (sheet.skill, sheet.stamina, sheet.luck):
        stat.enforce_cap()
    sheet.provisions = clamp(sheet.provisions, 0, MAX_PROVISIONS)
    sheet.gold = clamp(sheet.gold, 0, MAX_GOLD)

    for encounter in state.encounters.encounters:
        encounter.skill = clamp(encounter.skill, MIN_MONSTER_SKILL, MAX_MONSTER_SKILL)
        encounter.stamina.enforce_cap()
