"""Encounter lifecycle: adding, selecting, wounding, escaping and removing monsters."""
from __future__ import annotations

import logging

from ffm.core.coerce import finite_int
from ffm.core.rng import RNG
from ffm.domain.encounters import build_encounter
from ffm.domain.state import GameState
from ffm.services.events import (
    ActionFailedEvent,
    ActiveEncounterSetEvent,
    EncounterAddedEvent,
    EncounterChangedEvent,
    EncounterRemovedEvent,
    FailureReason,
)
from ffm.services.factories import make_instance_id

logger = logging.getLogger(__name__)


class EncounterService:
    """Manages the encounter registry of a GameState."""

    def __init__(self, rng: RNG) -> None:
        self._rng = rng

    def add_encounter(
        self, state: GameState, name: str, skill: object, stamina: object
    ) -> EncounterAddedEvent | ActionFailedEvent:
        """Create a monster, put it at the top of the list and make it active."""
        clean_name = name.strip() if isinstance(name, str) else ""
        skill_value = finite_int(skill, allow_str=True)
        stamina_value = finite_int(stamina, allow_str=True)
        if not clean_name:
            return ActionFailedEvent(FailureReason.INVALID_INPUT, "Monster needs a name.")
        if skill_value is None or stamina_value is None:
            return ActionFailedEvent(FailureReason.INVALID_INPUT, "Monster SKILL and STAMINA must be numbers.")

        registry = state.encounters
        taken = {encounter.id for encounter in registry.encounters}
        encounter = build_encounter(
            make_instance_id("enc", self._rng, taken),
            clean_name,
            skill_value,
            stamina_value,
        )
        registry.add(encounter)
        logger.debug("Added encounter %s (%s)", encounter.id, encounter.name)
        return EncounterAddedEvent(encounter_id=encounter.id, name=encounter.name)

    def set_active_encounter(self, state: GameState, encounter_id: str | None) -> ActiveEncounterSetEvent:
        state.encounters.set_active(encounter_id)
        return ActiveEncounterSetEvent(encounter_id=encounter_id)

    def damage_encounter(
        self, state: GameState, encounter_id: str, amount: int
    ) -> EncounterChangedEvent | ActionFailedEvent:
        encounter = state.encounters.get(encounter_id)
        if encounter is None:
            return self._unknown(encounter_id)
        encounter.take_damage(amount)
        return EncounterChangedEvent(
            encounter_id=encounter.id, status=encounter.status, stamina=encounter.stamina.current
        )

    def toggle_encounter_escaped(
        self, state: GameState, encounter_id: str
    ) -> EncounterChangedEvent | ActionFailedEvent:
        encounter = state.encounters.get(encounter_id)
        if encounter is None:
            return self._unknown(encounter_id)
        encounter.toggle_escaped()
        return EncounterChangedEvent(
            encounter_id=encounter.id, status=encounter.status, stamina=encounter.stamina.current
        )

    def remove_encounter(self, state: GameState, encounter_id: str) -> EncounterRemovedEvent | ActionFailedEvent:
        if not state.encounters.remove(encounter_id):
            return self._unknown(encounter_id)
        return EncounterRemovedEvent(encounter_id=encounter_id)

    @staticmethod
    def _unknown(encounter_id: str) -> ActionFailedEvent:
        return ActionFailedEvent(FailureReason.INVALID_INPUT, f"No encounter with id '{encounter_id}'.")
